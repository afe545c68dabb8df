"""
Logging setup and the per-request access log.
"""
import logging
import time

from fastapi import Request

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

access_logger = logging.getLogger("exercise_tracker.access")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


async def log_requests(request: Request, call_next):
    """
    Log one line per request in the compact access-log form:
    ``METHOD path status content-length - N.NNN ms``.
    """
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    length = response.headers.get("content-length", "-")

    access_logger.info(
        f"{request.method} {path} {response.status_code} {length} - {elapsed_ms:.3f} ms"
    )
    return response
