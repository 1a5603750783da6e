"""Tests for the candidate denylist filter."""

from lizard_api.domain.value_objects import Candidate
from lizard_api.infrastructure.adapters import CandidateFilterImpl


class TestCandidateFilter:
    def setup_method(self) -> None:
        self.filter = CandidateFilterImpl()

    def test_plain_photo_passes(self) -> None:
        candidate = Candidate(
            url="https://upload.wikimedia.org/wikipedia/commons/5/50/Common_lizard.jpg",
            title="Common lizard basking",
        )

        assert self.filter.is_allowed(candidate)

    def test_blocked_word_in_title_rejected_case_insensitive(self) -> None:
        candidate = Candidate(url="https://example.com/gecko.jpg", title="Gecko CLIPART set")

        assert not self.filter.is_allowed(candidate)

    def test_blocked_host_rejected(self) -> None:
        candidate = Candidate(
            url="https://www.shutterstock.com/image-photo/green-lizard-260nw-1.jpg",
            title="Green lizard",
        )

        assert not self.filter.is_allowed(candidate)

    def test_blocked_host_matches_subdomains(self) -> None:
        candidate = Candidate(url="https://i.pinimg.com/x.jpg")
        pinterest = Candidate(url="https://www.pinterest.co.uk/pin/123/")

        assert self.filter.is_allowed(candidate)
        assert not self.filter.is_allowed(pinterest)

    def test_unparsable_url_is_kept(self) -> None:
        candidates = [
            Candidate(url="http://[::1/lizard.jpg", title="Lizard"),
            Candidate(url="not a url at all", title="Lizard"),
        ]

        assert all(self.filter.is_allowed(c) for c in candidates)

    def test_vector_extension_rejected(self) -> None:
        assert not self.filter.is_allowed(Candidate(url="https://example.com/lizard.SVG"))
        assert not self.filter.is_allowed(Candidate(url="https://example.com/lizard.svg?w=200"))

    def test_apply_preserves_order(self) -> None:
        candidates = [
            Candidate(url="https://example.com/1.jpg", title="Anole"),
            Candidate(url="https://www.etsy.com/2.jpg", title="Anole"),
            Candidate(url="https://example.com/3.jpg", title="Plush gecko"),
            Candidate(url="https://example.com/4.jpg", title="Iguana"),
        ]

        result = self.filter.apply(candidates)

        assert [c.url for c in result] == [
            "https://example.com/1.jpg",
            "https://example.com/4.jpg",
        ]

    def test_custom_denylists(self) -> None:
        custom = CandidateFilterImpl(blocked_sites=("example.",), blocked_words=("gecko",))

        assert not custom.is_allowed(Candidate(url="https://example.org/a.jpg"))
        assert not custom.is_allowed(Candidate(url="https://other.org/a.jpg", title="Gecko"))
        assert custom.is_allowed(Candidate(url="https://other.org/a.jpg", title="Anole"))
