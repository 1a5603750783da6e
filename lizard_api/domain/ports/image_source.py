"""
Outbound port for image candidate sources.

The resolver depends on this abstraction; the concrete source (search API
or page scrape) is picked once at startup.
"""

from abc import ABC, abstractmethod

from ..value_objects import Candidate, ImageSourceType, SearchQuery
from .candidate_filter import CandidateFilter


class ImageSource(ABC):
    """Port for producing image candidates for a query."""

    @property
    @abstractmethod
    def source_type(self) -> ImageSourceType:
        """Return the tag reported in debug responses."""
        ...

    @abstractmethod
    async def search(
        self,
        query: SearchQuery,
        candidate_filter: CandidateFilter,
    ) -> list[Candidate]:
        """
        Collect filtered candidates.

        Sources never raise for upstream failures; a failed call
        contributes no candidates.

        Args:
            query: Query built for this request
            candidate_filter: Applied as results are collected

        Returns:
            Candidates that passed the filter, in source order
        """
        ...
