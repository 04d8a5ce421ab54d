# mediaprobe/services/api/errors.py
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from mediaprobe.common.logging import get_logger
from mediaprobe.domain.errors import (
    FFprobeError,
    MediaProbeError,
    ProbeOutputError,
    ResourceNotFoundError,
    TooManyRedirectsError,
)

logger = get_logger(__name__)

# Most specific first; MediaProbeError is the catch-all.
STATUS_BY_ERROR = (
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (TooManyRedirectsError, status.HTTP_502_BAD_GATEWAY),
    (ProbeOutputError, status.HTTP_502_BAD_GATEWAY),
    (FFprobeError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (MediaProbeError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: MediaProbeError) -> int:
    for exc_type, code in STATUS_BY_ERROR:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def media_probe_error_handler(request: Request, exc: MediaProbeError) -> JSONResponse:
    code = status_for(exc)
    detail = exc.message if isinstance(exc, FFprobeError) else str(exc)
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, code, detail)
    return JSONResponse(status_code=code, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map domain errors to HTTP responses for routes and their dependencies alike
    (the ffprobe adapter is built inside a dependency).
    """
    app.add_exception_handler(MediaProbeError, media_probe_error_handler)
