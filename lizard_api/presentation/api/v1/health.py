from fastapi import APIRouter, Depends

from ....config import Settings
from ....domain.ports import ImageSource
from ..dependencies import get_image_source, get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health(
    app_settings: Settings = Depends(get_settings),
    source: ImageSource = Depends(get_image_source),
) -> dict:
    """Liveness check; reports which image source is active."""
    return {
        "status": "healthy",
        "service": app_settings.service_name,
        "source": source.source_type.value,
    }
