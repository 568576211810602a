"""Renders one output line per link from a ``%title`` / ``%url`` template."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_TEMPLATE = "%title <%url>"
NO_TITLE = "@@@ NO TITLE @@@"

_PLACEHOLDER = re.compile(r"%(title|url)")


@dataclass(frozen=True)
class OutputPolicy:
    """How to render a link whose page has no title.

    Either substitute ``fallback_text`` for the title, or skip the line.
    """

    skip_when_no_title: bool = False
    fallback_text: str = NO_TITLE

    @classmethod
    def emit_fallback(cls, text: str = NO_TITLE) -> OutputPolicy:
        return cls(skip_when_no_title=False, fallback_text=text)

    @classmethod
    def skip(cls) -> OutputPolicy:
        return cls(skip_when_no_title=True)

    @classmethod
    def from_flag(cls, skip: bool, fallback_text: str = NO_TITLE) -> OutputPolicy:
        """Build the policy selected by the ``--skip-no-title`` flag."""
        if skip:
            return cls.skip()
        return cls.emit_fallback(fallback_text)


def render(template: str, title: str, url: str) -> str:
    """Substitute *title* and *url* into *template* in a single pass.

    Substituted text is not scanned again, so a title that itself contains
    ``%url`` comes out verbatim.
    """
    values = {"title": title, "url": url}
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], template)


def format_line(
    template: str,
    url: str,
    title: Optional[str],
    policy: OutputPolicy,
) -> Optional[str]:
    """Return the output line for *url*, or ``None`` if it should be omitted."""
    if title is None:
        if policy.skip_when_no_title:
            return None
        title = policy.fallback_text
    return render(template, title, url)
