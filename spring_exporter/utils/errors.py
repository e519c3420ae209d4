"""Exceptions raised during a scrape cycle."""

from typing import Optional


class ScrapeError(Exception):
    """Base class for everything that can go wrong while scraping the endpoint."""


class RequestConstructionError(ScrapeError):
    """The HTTP request could not be built (malformed URI or unsupported scheme)."""


class TransportError(ScrapeError):
    """No HTTP response was received (DNS, connect, TLS or timeout failure)."""


class StatusError(ScrapeError):
    """A response was received but its status code was not 200."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(
            message or f"there was an error, response code is {status_code}, expected 200"
        )


class BodyReadError(ScrapeError):
    """Reading the response body failed after headers were received."""


class PayloadParseError(ScrapeError):
    """The body is not a flat JSON object of numbers."""
