"""DTOs returned by the image resolver."""

from dataclasses import dataclass

from pydantic import BaseModel

from ...domain.value_objects import FetchedImage, ImageSourceType


@dataclass
class ResolvedImageDTO:
    """Outcome of a successful resolution."""

    image: FetchedImage
    url: str
    source: ImageSourceType
    candidates: int | None = None
    query: str | None = None

    def to_metadata(self) -> "ImageMetadataDTO":
        if self.source == ImageSourceType.STATIC_FALLBACK:
            return ImageMetadataDTO(
                source=self.source.value,
                image=self.url,
                content_type=self.image.content_type,
            )
        return ImageMetadataDTO(
            source=self.source.value,
            candidates=self.candidates,
            picked=self.url,
            content_type=self.image.content_type,
            query=self.query,
        )


class ImageMetadataDTO(BaseModel):
    """Debug (format=json) body for a resolved image."""

    ok: bool = True
    source: str
    content_type: str
    picked: str | None = None
    image: str | None = None
    candidates: int | None = None
    query: str | None = None


class ImageErrorDTO(BaseModel):
    """Body returned when no image could be served."""

    ok: bool = False
    error: str
    candidates: int = 0
