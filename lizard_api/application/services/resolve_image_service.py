"""
Image resolution with fallback.

States, in order: primary -> exhausted_candidates -> static_fallback -> failed.
Each request walks them once; nothing is shared between requests.
"""

import random

import httpx
import structlog

from ...domain.catalog import FALLBACK_URLS
from ...domain.errors import AllFallbacksFailed, ImageResolutionError, NoCandidates
from ...domain.ports import CandidateFilter, ImageFetcher, ImageSource
from ...domain.value_objects import (
    Candidate,
    FetchedImage,
    ImageSourceType,
    ResolutionState,
)
from ...infrastructure.logging import Timer
from ..dtos import ResolvedImageDTO
from ..ports.inbound import ResolveImageUseCase
from ..query_builder import QueryBuilder

logger = structlog.get_logger()

NO_IMAGE_FOUND = "no_usable_lizard_found"
NO_KEY_AND_FALLBACK_FAILED = "no_key_and_fallback_failed"


class ResolveImageService(ResolveImageUseCase):
    """Service implementing the resolve image use case."""

    def __init__(
        self,
        source: ImageSource,
        candidate_filter: CandidateFilter,
        fetcher: ImageFetcher,
        query_builder: QueryBuilder | None = None,
        fallback_urls: tuple[str, ...] = FALLBACK_URLS,
        max_tries: int = 15,
        rng: random.Random | None = None,
    ) -> None:
        self._source = source
        self._filter = candidate_filter
        self._fetcher = fetcher
        self._rng = rng or random.Random()
        self._query_builder = query_builder or QueryBuilder(rng=self._rng)
        self._fallback_urls = fallback_urls
        self._max_tries = max_tries

    async def execute(self, user_query: str | None = None) -> ResolvedImageDTO:
        query = self._query_builder.build(user_query)
        state = ResolutionState.PRIMARY
        log = logger.bind(
            source=self._source.source_type.value,
            query=query.base,
            user_supplied=query.user_supplied,
        )

        try:
            candidates = self._usable(await self._source.search(query, self._filter))
        except NoCandidates as e:
            log.warning("No candidates from source", error=str(e))
            candidates = []

        for candidate in candidates[: self._max_tries]:
            image = await self._try_fetch(candidate.url, log)
            if image is not None:
                log.info("Image resolved", state=state.value, url=candidate.url)
                return ResolvedImageDTO(
                    image=image,
                    url=candidate.url,
                    source=self._source.source_type,
                    candidates=len(candidates),
                    query=query.base,
                )

        state = ResolutionState.EXHAUSTED_CANDIDATES
        log.info("Candidates exhausted", state=state.value, candidates=len(candidates))

        state = ResolutionState.STATIC_FALLBACK
        if self._fallback_urls:
            url = self._rng.choice(self._fallback_urls)
            image = await self._try_fetch(url, log)
            if image is not None:
                log.info("Image resolved", state=state.value, url=url)
                return ResolvedImageDTO(
                    image=image,
                    url=url,
                    source=ImageSourceType.STATIC_FALLBACK,
                )

        state = ResolutionState.FAILED
        log.error("All fallbacks failed", state=state.value, candidates=len(candidates))
        raise self._failure(len(candidates))

    async def _try_fetch(self, url: str, log) -> FetchedImage | None:
        """Fetch one URL; any per-candidate failure means "try the next one"."""
        try:
            with Timer() as t:
                image = await self._fetcher.fetch(url)
        except (ImageResolutionError, httpx.HTTPError) as e:
            log.info("Candidate skipped", url=url, error=str(e), error_type=type(e).__name__)
            return None
        log.debug("Candidate fetched", url=url, duration_ms=t.duration_ms)
        return image

    def _usable(self, candidates: list[Candidate]) -> list[Candidate]:
        """Drop repeated URLs, then shuffle uniformly."""
        seen: set[str] = set()
        unique = []
        for candidate in candidates:
            if candidate.url in seen:
                continue
            seen.add(candidate.url)
            unique.append(candidate)
        if not unique:
            raise NoCandidates(self._source.source_type.value)
        self._rng.shuffle(unique)
        return unique

    def _failure(self, candidates: int) -> AllFallbacksFailed:
        if self._source.source_type == ImageSourceType.SERPAPI:
            return AllFallbacksFailed(NO_IMAGE_FOUND, status_code=404, candidates=candidates)
        return AllFallbacksFailed(NO_KEY_AND_FALLBACK_FAILED, status_code=500, candidates=candidates)
