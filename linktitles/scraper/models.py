"""Data models for the scraper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The decoded HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int
