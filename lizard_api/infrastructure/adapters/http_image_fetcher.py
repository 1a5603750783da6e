import httpx
import structlog

from ...domain.errors import InvalidImageURL, NotAnImage, UpstreamHTTPError
from ...domain.ports import ImageFetcher
from ...domain.value_objects import FetchedImage

logger = structlog.get_logger()

BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept": "image/*,*/*;q=0.8",
}


def extension_for(content_type: str) -> str:
    """Map an image content type to a file extension, defaulting to jpg."""
    ct = content_type.lower()
    if "png" in ct:
        return "png"
    if "jpeg" in ct:
        return "jpg"
    if "gif" in ct:
        return "gif"
    if "webp" in ct:
        return "webp"
    return "jpg"


class HttpImageFetcher(ImageFetcher):
    """Downloads a candidate with a browser-like request."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    async def fetch(self, url: str) -> FetchedImage:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=self._timeout,
        ) as client:
            try:
                response = await client.get(url, headers=BROWSER_HEADERS)
            except httpx.InvalidURL as e:
                # Filter keeps unparsable URLs; they fail here instead
                raise InvalidImageURL(url, str(e)) from e

        if not response.is_success:
            raise UpstreamHTTPError(url, response.status_code)

        content_type = response.headers.get("content-type", "").lower()
        if not content_type.startswith("image/"):
            raise NotAnImage(url, content_type)

        data = response.content
        logger.debug("Image downloaded", url=url, content_type=content_type, size=len(data))
        return FetchedImage(
            data=data,
            content_type=content_type,
            extension=extension_for(content_type),
        )
