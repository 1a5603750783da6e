from .candidate import Candidate, FetchedImage, SearchQuery
from .image_source_type import ImageSourceType, ResolutionState

__all__ = [
    "Candidate",
    "FetchedImage",
    "ImageSourceType",
    "ResolutionState",
    "SearchQuery",
]
