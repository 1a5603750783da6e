from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from . import __version__
from .config import settings
from .infrastructure.adapters import ImageSourceFactory
from .infrastructure.logging import configure_logging
from .presentation.api.v1 import health, lizard
from .presentation.middleware import CorrelationIdMiddleware, ResponseHeadersMiddleware

configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    source = ImageSourceFactory.get_source(settings)
    logger.info(
        "Starting application",
        service=settings.service_name,
        source=source.source_type.value,
    )
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Lizard Image API",
    description="Serves a single lizard photo for embedding in chat clients",
    version=__version__,
    lifespan=lifespan,
)

# First added = last executed
app.add_middleware(ResponseHeadersMiddleware, cache_control=settings.cache_control)
app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router)
app.include_router(lizard.router, prefix="/api")


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": __version__,
        "image": "/api/lizard",
    }
