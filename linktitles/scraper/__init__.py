"""Scraper package — page fetch & title extraction."""

from linktitles.scraper.errors import FetchError
from linktitles.scraper.extractor import extract_title
from linktitles.scraper.fetcher import build_client, fetch_url
from linktitles.scraper.models import RawPage

__all__ = ["fetch_url", "build_client", "extract_title", "RawPage", "FetchError"]
