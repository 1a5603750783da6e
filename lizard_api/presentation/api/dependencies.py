from fastapi import Depends

from ...application.services import ResolveImageService
from ...config import Settings, settings
from ...domain.ports import CandidateFilter, ImageFetcher, ImageSource
from ...infrastructure.adapters import (
    CandidateFilterImpl,
    HttpImageFetcher,
    ImageSourceFactory,
)


def get_settings() -> Settings:
    return settings


def get_image_source(app_settings: Settings = Depends(get_settings)) -> ImageSource:
    return ImageSourceFactory.get_source(app_settings)


def get_candidate_filter() -> CandidateFilter:
    return CandidateFilterImpl()


def get_image_fetcher(app_settings: Settings = Depends(get_settings)) -> ImageFetcher:
    return HttpImageFetcher(timeout=app_settings.http_timeout)


def get_resolve_image_service(
    app_settings: Settings = Depends(get_settings),
    source: ImageSource = Depends(get_image_source),
    candidate_filter: CandidateFilter = Depends(get_candidate_filter),
    fetcher: ImageFetcher = Depends(get_image_fetcher),
) -> ResolveImageService:
    return ResolveImageService(
        source=source,
        candidate_filter=candidate_filter,
        fetcher=fetcher,
        max_tries=app_settings.max_candidate_tries,
    )
