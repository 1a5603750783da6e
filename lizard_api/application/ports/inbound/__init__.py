from .resolve_image import ResolveImageUseCase

__all__ = ["ResolveImageUseCase"]
