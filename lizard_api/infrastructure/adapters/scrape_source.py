"""
Keyless source that scrapes a public search-results page.

The page layout is undocumented and may change at any time; when nothing
matches, the source returns no candidates and the static fallback takes over.
"""

import re

import httpx
import structlog

from ...domain.errors import UpstreamHTTPError
from ...domain.ports import CandidateFilter, ImageSource
from ...domain.value_objects import Candidate, ImageSourceType, SearchQuery
from .http_image_fetcher import BROWSER_HEADERS

logger = structlog.get_logger()

# Direct asset links on the Unsplash image CDN
CDN_PHOTO_PATTERN = re.compile(r"https://images\.unsplash\.com/photo-[A-Za-z0-9_-]+")

# Served size for scraped assets
CDN_SIZE_PARAMS = "?fm=jpg&w=1200&q=80"


class ScrapeImageSource(ImageSource):
    """Extracts CDN photo URLs from a fixed search page."""

    DEFAULT_URL = "https://unsplash.com/s/photos/lizard"

    def __init__(
        self,
        page_url: str = DEFAULT_URL,
        max_candidates: int = 30,
        timeout: float | None = None,
    ) -> None:
        self._page_url = page_url
        self._max_candidates = max_candidates
        self._timeout = timeout

    @property
    def source_type(self) -> ImageSourceType:
        return ImageSourceType.SCRAPE

    async def search(
        self,
        query: SearchQuery,
        candidate_filter: CandidateFilter,
    ) -> list[Candidate]:
        """Scrape the fixed page; ``query`` does not change the search term."""
        try:
            html = await self._fetch_page()
        except (UpstreamHTTPError, httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Scrape page failed", url=self._page_url, error=str(e))
            return []

        candidates = candidate_filter.apply(
            [Candidate(url=url) for url in extract_photo_urls(html)]
        )[: self._max_candidates]
        logger.info("Scrape finished", url=self._page_url, candidates=len(candidates))
        return candidates

    async def _fetch_page(self) -> str:
        headers = {**BROWSER_HEADERS, "Accept": "text/html,application/xhtml+xml"}
        async with httpx.AsyncClient(follow_redirects=True, timeout=self._timeout) as client:
            response = await client.get(self._page_url, headers=headers)
        if not response.is_success:
            raise UpstreamHTTPError(self._page_url, response.status_code)
        return response.text


def extract_photo_urls(html: str) -> list[str]:
    """Return unique CDN photo URLs in page order, with sizing params added."""
    seen: set[str] = set()
    urls: list[str] = []
    for match in CDN_PHOTO_PATTERN.findall(html or ""):
        if match in seen:
            continue
        seen.add(match)
        urls.append(match + CDN_SIZE_PARAMS)
    return urls
