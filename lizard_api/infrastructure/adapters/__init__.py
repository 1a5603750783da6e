from .candidate_filter_impl import CandidateFilterImpl
from .http_image_fetcher import HttpImageFetcher
from .image_source_factory import ImageSourceFactory
from .scrape_source import ScrapeImageSource
from .serpapi_source import SerpApiImageSource

__all__ = [
    "CandidateFilterImpl",
    "HttpImageFetcher",
    "ImageSourceFactory",
    "ScrapeImageSource",
    "SerpApiImageSource",
]
