"""
Structured logging for the lizard image service.

- JSON output on stdout (picked up by CloudWatch in Lambda)
- Correlation ID per inbound request
- Timing helper for outbound fetches
"""

import logging
import sys
import time
from contextvars import ContextVar

import structlog

# Correlation ID of the request being served
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structlog on top of stdlib logging.

    Args:
        service_name: Added to every log line as ``service``
        level: Minimum stdlib level name (e.g. ``"INFO"``)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            _add_correlation_id,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def _add_correlation_id(logger, method_name, event_dict):
    cid = correlation_id.get()
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def set_correlation_id(cid: str) -> None:
    correlation_id.set(cid)


class Timer:
    """
    Context manager for timing an outbound call.

    Usage:
        with Timer() as t:
            image = await fetcher.fetch(url)
        logger.info("Fetched", duration_ms=t.duration_ms)
    """

    def __init__(self) -> None:
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, rounded to 2 decimal places."""
        return round((self._end - self._start) * 1000, 2)
