"""Fetch failures, one class per kind the pipeline may report."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for a failed page retrieval."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InvalidUrl(FetchError):
    """The URL is not an absolute http(s) URL."""


class HttpStatus(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(f"HTTP {status_code}", url=url)
        self.status_code = status_code


class FetchTimeout(FetchError):
    """The request did not complete within the configured timeout."""


class ConnectionFailed(FetchError):
    """Connecting, talking to, or being redirected by the server failed."""


class DecodeFailed(FetchError):
    """The response body could not be turned into text."""


class UnsupportedContentType(DecodeFailed):
    """The response is not a text document."""

    def __init__(self, content_type: str, *, url: str | None = None) -> None:
        super().__init__(f"unsupported content type {content_type!r}", url=url)
        self.content_type = content_type


__all__ = [
    "FetchError",
    "InvalidUrl",
    "HttpStatus",
    "FetchTimeout",
    "ConnectionFailed",
    "DecodeFailed",
    "UnsupportedContentType",
]
