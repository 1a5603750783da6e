import httpx
import structlog

from ...domain.errors import UpstreamHTTPError
from ...domain.ports import CandidateFilter, ImageSource
from ...domain.value_objects import Candidate, ImageSourceType, SearchQuery

logger = structlog.get_logger()


class SerpApiImageSource(ImageSource):
    """SerpAPI Google Images source, photo-only and large."""

    BASE_URL = "https://serpapi.com/search.json"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        max_pages: int = 6,
        target_candidates: int = 30,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._max_pages = max_pages
        self._target_candidates = target_candidates
        self._timeout = timeout

    @property
    def source_type(self) -> ImageSourceType:
        return ImageSourceType.SERPAPI

    async def search(
        self,
        query: SearchQuery,
        candidate_filter: CandidateFilter,
    ) -> list[Candidate]:
        """Walk result pages until enough candidates survive the filter."""
        collected: list[Candidate] = []

        async with httpx.AsyncClient(follow_redirects=True, timeout=self._timeout) as client:
            for page in range(self._max_pages):
                try:
                    results = await self._fetch_page(client, query.text, page)
                except (UpstreamHTTPError, httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
                    # Page lost; remaining pages and the fallback still apply
                    logger.warning("SerpAPI page failed", page=page, error=str(e))
                    continue

                for result in results:
                    candidate = self._to_candidate(result)
                    if candidate and candidate_filter.is_allowed(candidate):
                        collected.append(candidate)

                logger.debug("SerpAPI page collected", page=page, total=len(collected))
                if len(collected) >= self._target_candidates:
                    break

        logger.info("SerpAPI search finished", query=query.base, candidates=len(collected))
        return collected

    async def _fetch_page(self, client: httpx.AsyncClient, text: str, page: int) -> list:
        params = {
            "engine": "google_images",
            "q": text,
            "tbm": "isch",
            "tbs": "itp:photo,isz:l",
            "safe": "active",
            "ijn": str(page),
            "api_key": self._api_key,
        }
        response = await client.get(self._base_url, params=params)
        if not response.is_success:
            raise UpstreamHTTPError(self._base_url, response.status_code)

        data = response.json()
        results = data.get("images_results") if isinstance(data, dict) else None
        return results if isinstance(results, list) else []

    @staticmethod
    def _to_candidate(result) -> Candidate | None:
        if not isinstance(result, dict):
            return None
        url = result.get("original") or result.get("thumbnail") or ""
        if not url:
            return None
        return Candidate(url=url, title=result.get("title") or "")
