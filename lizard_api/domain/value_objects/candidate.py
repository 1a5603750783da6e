from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """An image URL reported by a source, not yet verified to be an image."""
    url: str
    title: str = ""


@dataclass(frozen=True)
class FetchedImage:
    """Image bytes that passed the content-type check."""
    data: bytes
    content_type: str
    extension: str

    def __post_init__(self) -> None:
        if not self.content_type.startswith("image/"):
            raise ValueError("Fetched content type must be image/*")

    @property
    def filename(self) -> str:
        return f"lizard.{self.extension}"


@dataclass(frozen=True)
class SearchQuery:
    """Query sent to a search provider."""
    base: str
    text: str
    user_supplied: bool = False
