"""Centralised settings for link-titles.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  Command-line options
take precedence over both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    template: str = field(
        default_factory=lambda: os.environ.get("LINK_TEMPLATE", "%title <%url>")
    )
    no_title_text: str = field(
        default_factory=lambda: os.environ.get("NO_TITLE_TEXT", "@@@ NO TITLE @@@")
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("USER_AGENT", "load title tags")
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "10"))
    )
    max_body_bytes: int = field(
        default_factory=lambda: int(os.environ.get("MAX_BODY_BYTES", str(5 * 1024 * 1024)))
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    fetch_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("FETCH_CONCURRENCY", "10"))
    )


# Module-level singleton — import this everywhere:
#   from linktitles.config import settings
settings = Settings()
