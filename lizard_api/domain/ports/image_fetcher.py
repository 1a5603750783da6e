from abc import ABC, abstractmethod

from ..value_objects import FetchedImage


class ImageFetcher(ABC):
    """Outbound port for downloading a candidate image."""

    @abstractmethod
    async def fetch(self, url: str) -> FetchedImage:
        """
        Download ``url`` and verify it is an image.

        Raises:
            UpstreamHTTPError: non-success status
            NotAnImage: content type is not image/*
        """
        ...
