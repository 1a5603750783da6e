import random
from unittest.mock import MagicMock

import pytest

from lizard_api.domain.errors import NotAnImage, UpstreamHTTPError
from lizard_api.domain.ports import CandidateFilter, ImageFetcher, ImageSource
from lizard_api.domain.value_objects import (
    Candidate,
    FetchedImage,
    ImageSourceType,
    SearchQuery,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


class StubImageSource(ImageSource):
    """Returns a fixed candidate list and records the queries it saw."""

    def __init__(self, candidates: list[Candidate], source_type=ImageSourceType.SERPAPI) -> None:
        self._candidates = candidates
        self._source_type = source_type
        self.queries: list[SearchQuery] = []

    @property
    def source_type(self) -> ImageSourceType:
        return self._source_type

    async def search(self, query: SearchQuery, candidate_filter: CandidateFilter) -> list[Candidate]:
        self.queries.append(query)
        return candidate_filter.apply(list(self._candidates))


class StubImageFetcher(ImageFetcher):
    """Serves images from a URL -> (content_type, bytes) map; anything else fails."""

    def __init__(self, images: dict[str, tuple[str, bytes]] | None = None) -> None:
        self._images = images or {}
        self.calls: list[str] = []

    async def fetch(self, url: str) -> FetchedImage:
        self.calls.append(url)
        if url not in self._images:
            raise UpstreamHTTPError(url, 404)
        content_type, data = self._images[url]
        if not content_type.startswith("image/"):
            raise NotAnImage(url, content_type)
        ext = "png" if "png" in content_type else "jpg"
        return FetchedImage(data=data, content_type=content_type, extension=ext)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def png_image() -> FetchedImage:
    return FetchedImage(data=PNG_BYTES, content_type="image/png", extension="png")


@pytest.fixture
def stub_source():
    def _make(candidates, source_type=ImageSourceType.SERPAPI):
        return StubImageSource(candidates, source_type)

    return _make


@pytest.fixture
def stub_fetcher():
    def _make(images=None):
        return StubImageFetcher(images)

    return _make


@pytest.fixture
def http_response():
    """Build a mock httpx response."""

    def _make(status_code=200, content_type="image/png", content=PNG_BYTES, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.headers = {"content-type": content_type} if content_type else {}
        response.content = content
        response.text = text
        response.json.return_value = json_data
        return response

    return _make
