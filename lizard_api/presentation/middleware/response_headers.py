"""Cross-origin and cache headers added to every response.

Images are embedded by chat clients on other origins, so every response
(including errors and preflight) allows any origin and carries a shared-cache
policy.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Adds CORS and Cache-Control headers."""

    def __init__(self, app, cache_control: str) -> None:
        super().__init__(app)
        self._cache_control = cache_control

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        response.headers["Cache-Control"] = self._cache_control

        return response
