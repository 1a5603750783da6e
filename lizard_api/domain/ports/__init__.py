from .candidate_filter import CandidateFilter
from .image_fetcher import ImageFetcher
from .image_source import ImageSource

__all__ = [
    "CandidateFilter",
    "ImageFetcher",
    "ImageSource",
]
