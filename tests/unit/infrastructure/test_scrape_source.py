from unittest.mock import AsyncMock, patch

import httpx
import pytest

from lizard_api.domain.value_objects import ImageSourceType, SearchQuery
from lizard_api.infrastructure.adapters import CandidateFilterImpl, ScrapeImageSource
from lizard_api.infrastructure.adapters.scrape_source import extract_photo_urls

QUERY = SearchQuery(base="lizard macro photo", text="lizard macro photo -toy")

SEARCH_PAGE = """
<html><body>
  <img src="https://images.unsplash.com/photo-1546026423-cc4642628d2b?ixlib=rb-4.0.3&w=400">
  <img srcset="https://images.unsplash.com/photo-1546026423-cc4642628d2b?w=800 800w">
  <img src="https://images.unsplash.com/photo-1590691566903-692bf5ca7493?w=400">
  <img src="https://images.unsplash.com/profile-1234?w=32">
  <img src="https://plus.unsplash.com/premium_photo-1661914178454-2d1ae41c9c1b">
</body></html>
"""


class TestExtractPhotoUrls:
    def test_extracts_unique_cdn_photos_in_order(self):
        urls = extract_photo_urls(SEARCH_PAGE)

        assert urls == [
            "https://images.unsplash.com/photo-1546026423-cc4642628d2b?fm=jpg&w=1200&q=80",
            "https://images.unsplash.com/photo-1590691566903-692bf5ca7493?fm=jpg&w=1200&q=80",
        ]

    def test_no_matches(self):
        assert extract_photo_urls("<html>nothing here</html>") == []
        assert extract_photo_urls("") == []


class TestScrapeImageSource:
    @pytest.fixture
    def source(self):
        return ScrapeImageSource()

    def test_source_type(self, source):
        assert source.source_type == ImageSourceType.SCRAPE

    @pytest.mark.asyncio
    async def test_search_returns_candidates(self, source, http_response):
        response = http_response(content_type="text/html", text=SEARCH_PAGE)

        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(return_value=response)
            mock_client.return_value.__aenter__.return_value.get = get

            candidates = await source.search(QUERY, CandidateFilterImpl())

        assert len(candidates) == 2
        assert all(c.title == "" for c in candidates)
        assert get.call_args.args[0] == ScrapeImageSource.DEFAULT_URL

    @pytest.mark.asyncio
    async def test_search_respects_max_candidates(self, http_response):
        source = ScrapeImageSource(max_candidates=1)
        response = http_response(content_type="text/html", text=SEARCH_PAGE)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=response)

            candidates = await source.search(QUERY, CandidateFilterImpl())

        assert len(candidates) == 1

    @pytest.mark.asyncio
    async def test_http_error_returns_empty(self, source, http_response):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=http_response(status_code=503, content_type="text/html")
            )

            candidates = await source.search(QUERY, CandidateFilterImpl())

        assert candidates == []

    @pytest.mark.asyncio
    async def test_network_error_returns_empty(self, source):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            candidates = await source.search(QUERY, CandidateFilterImpl())

        assert candidates == []
