"""Reading candidate URLs from a file or standard input."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, Optional


class SourceError(Exception):
    """The link list could not be read at all."""


def read_source(path: Optional[Path] = None) -> str:
    """Return the whole link list from *path*, or from stdin when ``None``."""
    if path is None:
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"failed to load stdin: {exc}") from exc
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"failed to load file {str(path)!r}: {exc}") from exc


def iter_links(contents: str) -> Iterator[str]:
    """Yield each non-blank line of *contents*, trimmed."""
    for line in contents.splitlines():
        line = line.strip()
        if line:
            yield line
