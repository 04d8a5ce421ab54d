"""
Probe-specific error types.

All errors inherit from MediaProbeError for easy catching. Soft failures
(damaged files, unsupported codecs) are not errors: they surface as
``Movie.valid == False``.
"""
from __future__ import annotations

from typing import Optional


class MediaProbeError(Exception):
    """Base exception for all probe-related failures."""
    pass


class ResourceNotFoundError(MediaProbeError, FileNotFoundError):
    """Raised when a local file is missing or a remote URL is not available."""

    def __init__(self, path: str, status_code: Optional[int] = None, *, remote: bool = False):
        self.path = path
        self.status_code = status_code
        self.remote = remote
        if not remote:
            message = f"the file '{path}' does not exist"
        else:
            message = (
                f"the URL '{path}' does not exist or is not available "
                f"(response code: {status_code if status_code is not None else 'none'})"
            )
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class TooManyRedirectsError(MediaProbeError):
    """Raised when the redirect budget runs out before a terminal response."""

    def __init__(self, url: str, limit: int):
        self.url = url
        self.limit = limit
        super().__init__(f"too many redirects while resolving '{url}' (limit: {limit})")


class ProbeOutputError(MediaProbeError):
    """Raised when ffprobe's standard output is not a JSON object."""

    def __init__(self, output: str):
        self.output = output
        super().__init__(f"Could not parse output from ffprobe:\n{output}")


class FFprobeError(MediaProbeError):
    """Adapter-level error: ffprobe missing, failed to start, or timed out."""

    def __init__(self, message: str, stderr: Optional[str] = None, rc: Optional[int] = None):
        self.message = message
        self.stderr = stderr
        self.rc = rc
        super().__init__(message)
