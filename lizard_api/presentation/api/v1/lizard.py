from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, Response

from ....application.dtos import ImageErrorDTO
from ....application.ports.inbound import ResolveImageUseCase
from ....domain.errors import AllFallbacksFailed
from ..dependencies import get_resolve_image_service

router = APIRouter(tags=["lizard"])


@router.get(
    "/lizard",
    summary="Get a lizard picture",
    description=(
        "Returns image bytes, or JSON metadata about the chosen image when "
        "format=json."
    ),
    responses={
        200: {"content": {"image/*": {}, "application/json": {}}},
        404: {"model": ImageErrorDTO},
        500: {"model": ImageErrorDTO},
    },
)
async def get_lizard(
    q: str | None = Query(None, description="Search term override"),
    response_format: str | None = Query(None, alias="format"),
    service: ResolveImageUseCase = Depends(get_resolve_image_service),
) -> Response:
    """Resolve one image and stream it back."""
    debug = (response_format or "").strip().lower() == "json"

    try:
        resolved = await service.execute(q)
    except AllFallbacksFailed as e:
        body = ImageErrorDTO(error=e.reason, candidates=e.candidates)
        return JSONResponse(status_code=e.status_code, content=body.model_dump())

    if debug:
        return JSONResponse(content=resolved.to_metadata().model_dump(exclude_none=True))

    return Response(
        content=resolved.image.data,
        media_type=resolved.image.content_type,
        headers={"Content-Disposition": f'inline; filename="{resolved.image.filename}"'},
    )


@router.options("/lizard", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
async def preflight_lizard() -> Response:
    """CORS preflight; headers are added by middleware."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
