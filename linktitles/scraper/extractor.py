"""Title extraction: finds the display title of an HTML document."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup


def _clean(text: str) -> str:
    """Trim *text* and collapse internal whitespace runs to single spaces."""
    return " ".join(text.split())


def extract_title(html: str) -> Optional[str]:
    """Return the text of the first ``<title>`` element in *html*.

    Parsing is best-effort: malformed markup is tolerated by ``html.parser``,
    and if parsing fails outright the document is treated as untitled.  A
    title that is blank after whitespace cleanup counts as no title.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
        tag = soup.find("title")
    except Exception:  # noqa: BLE001 - any parser failure means "no title"
        return None

    if tag is None:
        return None
    title = _clean(tag.get_text(" "))
    return title or None
