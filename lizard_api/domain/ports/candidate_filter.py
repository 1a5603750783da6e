"""
Outbound port for candidate screening.

Removes stock-photo, merch and illustration results before any bytes are
fetched.
"""

from abc import ABC, abstractmethod

from ..value_objects import Candidate


class CandidateFilter(ABC):
    """Port for deciding which candidates are worth fetching."""

    @abstractmethod
    def is_allowed(self, candidate: Candidate) -> bool:
        """
        Check a single candidate.

        Args:
            candidate: URL and title reported by a source

        Returns:
            False if the candidate matches a denylist rule
        """
        ...

    def apply(self, candidates: list[Candidate]) -> list[Candidate]:
        """Return the allowed candidates, preserving order."""
        return [c for c in candidates if self.is_allowed(c)]
