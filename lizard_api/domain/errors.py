"""Errors raised while resolving an image.

Everything except ``AllFallbacksFailed`` is handled inside the resolver and
only moves it on to the next candidate.
"""


class ImageResolutionError(Exception):
    """Base class for resolution errors."""


class UpstreamHTTPError(ImageResolutionError):
    """A search API, scrape target or image host answered with a non-2xx status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.url = url
        self.status_code = status_code


class NotAnImage(ImageResolutionError):
    """A successful response whose content type is not image/*."""

    def __init__(self, url: str, content_type: str) -> None:
        super().__init__(f"Non-image content type {content_type!r} from {url}")
        self.url = url
        self.content_type = content_type


class NoCandidates(ImageResolutionError):
    """The source returned nothing, or the filter removed every result."""

    def __init__(self, source: str) -> None:
        super().__init__(f"No usable candidates from {source}")
        self.source = source


class AllFallbacksFailed(ImageResolutionError):
    """Terminal: neither candidates nor the static fallback produced an image."""

    def __init__(self, reason: str, status_code: int, candidates: int = 0) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code
        self.candidates = candidates


class InvalidImageURL(ImageResolutionError):
    """A candidate URL the HTTP client cannot request."""

    def __init__(self, url: str, detail: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {detail}")
        self.url = url
