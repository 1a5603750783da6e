from .image_dto import ImageErrorDTO, ImageMetadataDTO, ResolvedImageDTO

__all__ = [
    "ImageErrorDTO",
    "ImageMetadataDTO",
    "ResolvedImageDTO",
]
