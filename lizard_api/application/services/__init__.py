from .resolve_image_service import ResolveImageService

__all__ = ["ResolveImageService"]
