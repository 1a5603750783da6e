from abc import ABC, abstractmethod

from ...dtos import ResolvedImageDTO


class ResolveImageUseCase(ABC):
    """Input port for resolving one lizard image."""

    @abstractmethod
    async def execute(self, user_query: str | None = None) -> ResolvedImageDTO:
        """
        Resolve an image for the optional query.

        Raises:
            AllFallbacksFailed: no candidate and no fallback produced an image
        """
        ...
