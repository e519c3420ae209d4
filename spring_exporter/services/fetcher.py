"""HTTP fetcher for the spring metrics endpoint."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from ..config.models import ScrapeTargetConfig
from ..utils.errors import (
    BodyReadError,
    RequestConstructionError,
    ScrapeError,
    StatusError,
    TransportError,
)


@dataclass
class FetchResult:
    """Outcome of a single GET against the endpoint."""

    duration: float  # Seconds from send until headers (or transport error)
    status_code: Optional[int] = None  # None when no response was received
    body: Optional[bytes] = None
    error: Optional[ScrapeError] = None

    @property
    def reachable(self) -> bool:
        """True when any HTTP response arrived, whatever its status."""
        return self.status_code is not None


class SpringFetcher:
    """
    Issues one authenticated GET per scrape cycle.

    The underlying ``httpx.Client`` is created once and reused across cycles.
    Basic auth credentials are always attached, even when both are empty.
    """

    def __init__(
        self,
        config: ScrapeTargetConfig,
        logger: logging.Logger,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize fetcher.

        Args:
            config: Scrape target configuration
            logger: Logger instance
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config
        self.logger = logger.getChild(self.__class__.__name__)
        self._client = httpx.Client(
            auth=httpx.BasicAuth(config.basic_auth_user, config.basic_auth_password),
            verify=not config.insecure,
            timeout=config.timeout_seconds,
            follow_redirects=True,
            transport=transport
        )

    def fetch(self) -> FetchResult:
        """
        Fetch the endpoint once.

        Returns:
            FetchResult: Body, status code, duration and any error after the
                request was sent

        Raises:
            RequestConstructionError: If the request cannot be built; no
                duration is measured in that case
        """
        request = self._build_request()

        start_time = time.perf_counter()
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as e:
            duration = time.perf_counter() - start_time
            return FetchResult(
                duration=duration,
                error=TransportError(f"request to {request.url} failed: {e}")
            )
        duration = time.perf_counter() - start_time

        try:
            body = response.read()
        except httpx.HTTPError as e:
            return FetchResult(
                duration=duration,
                status_code=response.status_code,
                error=BodyReadError(f"error reading response body: {e}")
            )
        finally:
            response.close()

        error = None
        if response.status_code != 200:
            error = StatusError(response.status_code)

        self.logger.debug(
            f"Fetched HTTP {response.status_code} ({len(body)} bytes) "
            f"in {duration:.3f}s"
        )
        return FetchResult(
            duration=duration,
            status_code=response.status_code,
            body=body,
            error=error
        )

    def close(self) -> None:
        """Release the underlying HTTP client."""
        self._client.close()

    def _build_request(self) -> httpx.Request:
        try:
            request = self._client.build_request("GET", self.config.uri)
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            raise RequestConstructionError(f"invalid request URI {self.config.uri!r}: {e}") from e

        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise RequestConstructionError(
                f"invalid request URI {self.config.uri!r}: expected an absolute http(s) URL"
            )
        return request
