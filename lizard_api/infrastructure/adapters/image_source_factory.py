"""
Factory for the image source.

The source is chosen once from configuration: a SerpAPI key selects the
search API, no key selects the page scrape.
"""

import structlog

from ...config import Settings
from ...domain.ports import ImageSource
from .scrape_source import ScrapeImageSource
from .serpapi_source import SerpApiImageSource

logger = structlog.get_logger()


class ImageSourceFactory:
    """Creates and caches the process-wide image source."""

    _instance: ImageSource | None = None

    @classmethod
    def get_source(cls, settings: Settings) -> ImageSource:
        if cls._instance is None:
            cls._instance = cls.create(settings)
        return cls._instance

    @staticmethod
    def create(settings: Settings) -> ImageSource:
        if settings.has_search_credential:
            logger.info("Using SerpAPI image source")
            return SerpApiImageSource(
                api_key=settings.serpapi_key,
                base_url=settings.serpapi_url,
                max_pages=settings.serpapi_max_pages,
                target_candidates=settings.target_candidates,
                timeout=settings.http_timeout,
            )
        logger.info("No SerpAPI key; using scrape image source")
        return ScrapeImageSource(
            page_url=settings.scrape_url,
            max_candidates=settings.target_candidates,
            timeout=settings.http_timeout,
        )

    @classmethod
    def reset(cls) -> None:
        """Drop the cached source (useful for testing)."""
        cls._instance = None
