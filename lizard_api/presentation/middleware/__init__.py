from .correlation import CorrelationIdMiddleware
from .response_headers import ResponseHeadersMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "ResponseHeadersMiddleware",
]
