from enum import Enum


class ImageSourceType(str, Enum):
    """Where the served image came from."""
    SERPAPI = "serpapi"
    SCRAPE = "scrape"
    STATIC_FALLBACK = "static_fallback"


class ResolutionState(str, Enum):
    """Steps of a single resolution, in order."""
    PRIMARY = "primary"
    EXHAUSTED_CANDIDATES = "exhausted_candidates"
    STATIC_FALLBACK = "static_fallback"
    FAILED = "failed"
