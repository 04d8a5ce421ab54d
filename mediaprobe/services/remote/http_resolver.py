# mediaprobe/services/remote/http_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from mediaprobe.common.logging import get_logger
from mediaprobe.common.settings import DEFAULT_MAX_REDIRECT_ATTEMPTS
from mediaprobe.domain.errors import ResourceNotFoundError, TooManyRedirectsError

logger = get_logger(__name__)


@dataclass(frozen=True)
class HeadResult:
    url: str                             # last URL requested (after redirects)
    response: Optional[httpx.Response]   # None when the connection itself failed

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def ok(self) -> bool:
        return self.response is not None and self.response.is_success


def _is_redirect(response: httpx.Response) -> bool:
    return 300 <= response.status_code < 400 and "location" in response.headers


def _tls_on_443(url: httpx.URL) -> httpx.URL:
    # port 443 always speaks TLS, even when the URL says http://
    if url.scheme == "http" and url.port == 443:
        return url.copy_with(scheme="https")
    return url


class HttpResolver:
    """
    Verifies a remote resource with HTTP HEAD, following redirects by hand so the
    hop budget is ours: `max_redirects` hops are followed, one more is an error.

    Connection failures (DNS, refused, connect timeout) are not raised here; they
    come back as a HeadResult without a response and `resolve()` reports the
    resource as unavailable.
    """

    def __init__(
        self,
        max_redirects: int = DEFAULT_MAX_REDIRECT_ATTEMPTS,
        timeout_sec: Optional[float] = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if max_redirects < 0:
            raise ValueError("max_redirects must be >= 0")
        self.max_redirects = int(max_redirects)
        self.timeout_sec = timeout_sec
        self._transport = transport

    def head(self, url: str) -> HeadResult:
        with httpx.Client(
            follow_redirects=False,
            timeout=httpx.Timeout(self.timeout_sec),
            transport=self._transport,
        ) as client:
            return self._follow(client, url)

    def resolve(self, url: str) -> str:
        """Return the final URL of a reachable resource, or raise."""
        result = self.head(url)
        if not result.ok:
            raise ResourceNotFoundError(result.url, result.status_code, remote=True)
        return result.url

    # ---- internals ------------------------------------------------------------
    def _follow(self, client: httpx.Client, url: str) -> HeadResult:
        current = _tls_on_443(httpx.URL(url))
        remaining = self.max_redirects
        while True:
            try:
                response = client.head(current)
            except (httpx.ConnectError, httpx.ConnectTimeout) as e:
                logger.warning("HEAD %s failed: %s", current, e)
                return HeadResult(url=str(current), response=None)

            if not _is_redirect(response):
                return HeadResult(url=str(current), response=response)

            if remaining == 0:
                raise TooManyRedirectsError(url, self.max_redirects)
            target = _tls_on_443(current.join(response.headers["location"]))
            logger.info("HEAD %s -> %s %s", current, response.status_code, target)
            current = target
            remaining -= 1
