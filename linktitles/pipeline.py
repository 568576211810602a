"""The per-link pipeline: fetch → extract title → format → emit.

Every link is handled independently.  A failed fetch is reported on the error
stream and the link is dropped; it never stops the links after it.  Fetches
may run in parallel, but lines are always written in input order.
"""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

import httpx

from linktitles.config import settings
from linktitles.formatter import OutputPolicy, format_line
from linktitles.scraper import FetchError, build_client, extract_title, fetch_url


@dataclass
class LinkResult:
    """Outcome of fetching one link."""

    url: str
    title: Optional[str] = None
    error: Optional[FetchError] = None


@dataclass
class RunSummary:
    emitted: int = 0
    skipped: int = 0
    failed: int = 0


def process_link(url: str, client: httpx.Client | None = None) -> LinkResult:
    """Fetch *url* and extract its title, capturing fetch failures.

    Any failure is confined to this link; unexpected exceptions are wrapped
    in a plain :class:`FetchError` so the remaining links still run.
    """
    try:
        raw = fetch_url(url, client=client)
    except FetchError as exc:
        return LinkResult(url=url, error=exc)
    except Exception as exc:  # noqa: BLE001
        error = FetchError(f"unexpected {type(exc).__name__}: {exc}", url=url)
        error.__cause__ = exc
        return LinkResult(url=url, error=error)
    return LinkResult(url=url, title=extract_title(raw.html))


def run(
    links: Iterable[str],
    template: str,
    policy: OutputPolicy,
    out: TextIO | None = None,
    err: TextIO | None = None,
    concurrency: int | None = None,
) -> RunSummary:
    """Process *links* and write one rendered line per emitted link to *out*.

    Up to *concurrency* pages are fetched at once (``1`` is strictly
    sequential); results are consumed in submission order.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    workers = max(1, concurrency or settings.fetch_concurrency)
    summary = RunSummary()

    with build_client() as client, ThreadPoolExecutor(max_workers=workers) as pool:
        results = pool.map(lambda url: process_link(url, client), links)
        for result in results:
            if result.error is not None:
                print(f"[fetch] ✗ {result.url}: {result.error}", file=err)
                summary.failed += 1
                continue

            if result.title is None:
                print(f"(no title for `{result.url}`)", file=err)

            line = format_line(template, result.url, result.title, policy)
            if line is None:
                summary.skipped += 1
                continue

            print(line, file=out, flush=True)
            summary.emitted += 1

    return summary
