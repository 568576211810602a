"""HTTP fetcher that turns a URL into decoded page text."""

from __future__ import annotations

import codecs

import httpx

from linktitles.config import settings
from linktitles.scraper.errors import (
    ConnectionFailed,
    DecodeFailed,
    FetchTimeout,
    HttpStatus,
    InvalidUrl,
    UnsupportedContentType,
)
from linktitles.scraper.models import RawPage

_TEXT_MEDIA_TYPES = {"application/xml", "application/xhtml+xml"}


def build_client() -> httpx.Client:
    """Return an ``httpx.Client`` configured from ``settings``.

    The client is safe to share between worker threads.
    """
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
    )


def _check_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidUrl(f"invalid URL: {exc}", url=url) from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidUrl("not an absolute http(s) URL", url=url)


def _is_text(content_type: str) -> bool:
    """Return ``True`` if *content_type* names a document we can read as text.

    A missing header is given the benefit of the doubt.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()
    if not media_type:
        return True
    return (
        media_type.startswith("text/")
        or media_type.endswith("+xml")
        or media_type in _TEXT_MEDIA_TYPES
    )


def _read_body(response: httpx.Response, limit: int) -> tuple[bytes, bool]:
    """Read at most *limit* bytes; return ``(body, truncated)``."""
    chunks: list[bytes] = []
    size = 0
    for chunk in response.iter_bytes():
        chunks.append(chunk)
        size += len(chunk)
        if size >= limit:
            return b"".join(chunks)[:limit], True
    return b"".join(chunks), False


def _decode(body: bytes, charset: str | None, truncated: bool, url: str) -> str:
    """Decode *body* using the declared *charset*.

    Without a declared charset the body is read as UTF-8, replacing invalid
    sequences.  A truncated body may end mid-character, so the trailing
    partial sequence is dropped instead of reported.
    """
    if charset is None:
        return body.decode("utf-8", errors="replace")
    try:
        info = codecs.lookup(charset)
    except LookupError as exc:
        raise DecodeFailed(f"unknown charset {charset!r}", url=url) from exc
    if not getattr(info, "_is_text_encoding", True):
        raise DecodeFailed(f"{charset!r} is not a text encoding", url=url)

    try:
        return info.incrementaldecoder().decode(body, final=not truncated)
    except UnicodeDecodeError as exc:
        raise DecodeFailed(f"body is not valid {charset}: {exc.reason}", url=url) from exc
    except Exception as exc:  # noqa: BLE001 - codec internals raise their own types
        raise DecodeFailed(f"cannot decode body as {charset}: {exc}", url=url) from exc


def _get(client: httpx.Client, url: str) -> RawPage:
    with client.stream("GET", url) as response:
        if not response.is_success:
            raise HttpStatus(response.status_code, url=url)

        content_type = response.headers.get("content-type", "")
        if not _is_text(content_type):
            raise UnsupportedContentType(content_type, url=url)

        body, truncated = _read_body(response, settings.max_body_bytes)
        html = _decode(body, response.charset_encoding, truncated, url)
        return RawPage(url=url, html=html, status_code=response.status_code)


def fetch_url(url: str, client: httpx.Client | None = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Uses *client* when given, otherwise a short-lived client built from
    ``settings``.  No retries are attempted.

    Raises:
        FetchError: One of its subclasses, describing why the page could not
            be retrieved as text.
    """
    _check_url(url)

    try:
        if client is not None:
            return _get(client, url)
        with build_client() as own_client:
            return _get(own_client, url)
    except httpx.TimeoutException as exc:
        raise FetchTimeout(f"timed out: {exc}", url=url) from exc
    except httpx.DecodingError as exc:
        raise DecodeFailed(f"bad content encoding: {exc}", url=url) from exc
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
        raise InvalidUrl(f"invalid URL: {exc}", url=url) from exc
    except httpx.RequestError as exc:
        raise ConnectionFailed(f"request failed: {exc}", url=url) from exc
