"""
Denylist filter for image candidates.

Rejects:
- Stock, marketplace and merch hosts
- Titles that suggest clipart, toys or generated art
- Vector graphics

Filtering is best-effort: a URL that cannot be parsed is kept.
"""

from urllib.parse import urlparse

import structlog

from ...domain.catalog import BLOCKED_SITES, BLOCKED_WORDS, VECTOR_EXTENSIONS
from ...domain.ports import CandidateFilter
from ...domain.value_objects import Candidate

logger = structlog.get_logger()


class CandidateFilterImpl(CandidateFilter):
    """Substring denylist over host, title and file extension."""

    def __init__(
        self,
        blocked_sites: tuple[str, ...] = BLOCKED_SITES,
        blocked_words: tuple[str, ...] = BLOCKED_WORDS,
        vector_extensions: tuple[str, ...] = VECTOR_EXTENSIONS,
    ) -> None:
        self._blocked_sites = tuple(s.lower() for s in blocked_sites)
        self._blocked_words = tuple(w.lower() for w in blocked_words)
        self._vector_extensions = tuple(e.lower() for e in vector_extensions)

    def is_allowed(self, candidate: Candidate) -> bool:
        if self._is_vector(candidate.url):
            return False
        if self._is_blocked_site(candidate.url):
            logger.debug("Candidate rejected: blocked site", url=candidate.url)
            return False
        if self._has_blocked_word(candidate.title):
            logger.debug("Candidate rejected: blocked word", title=candidate.title)
            return False
        return True

    def _is_blocked_site(self, url: str) -> bool:
        try:
            host = (urlparse(url).hostname or "").lower()
        except ValueError:
            # Unparsable URLs stay in the pool
            return False
        return any(site in host for site in self._blocked_sites)

    def _has_blocked_word(self, title: str) -> bool:
        text = (title or "").lower()
        return any(word in text for word in self._blocked_words)

    def _is_vector(self, url: str) -> bool:
        path = url.lower().split("?", 1)[0].split("#", 1)[0]
        return path.endswith(self._vector_extensions)
