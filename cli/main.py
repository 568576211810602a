"""link-titles CLI — turns a list of bare URLs into title-annotated lines.

Usage:
    python cli/main.py links.txt
    python cli/main.py --template "[%title](%url)" < links.txt

Rendered lines go to stdout in input order; fetch failures and untitled
pages are reported on stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linktitles.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from linktitles.config import settings
from linktitles.formatter import OutputPolicy
from linktitles.pipeline import run
from linktitles.sources import SourceError, iter_links, read_source

app = typer.Typer(
    name="link-titles",
    help="Fetch each URL in a list and print it annotated with its page title.",
    add_completion=False,
)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None, help="File that contains the URLs, one per line. Reads stdin if omitted."
    ),
    template: Optional[str] = typer.Option(
        None, "--template", "-t", help="Output template. Use %title and %url as placeholders."
    ),
    skip_no_title: bool = typer.Option(
        False, "--skip-no-title", "-s", help="Omit links whose page has no title."
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-j", min=1, help="Number of pages fetched at once."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.1, help="Per-request timeout in seconds."
    ),
) -> None:
    """Print one `%title <%url>` line per URL in PATH (or stdin)."""
    if timeout is not None:
        settings.request_timeout = timeout

    try:
        contents = read_source(path)
    except SourceError as exc:
        typer.echo(f"[link-titles] {exc}", err=True)
        raise typer.Exit(code=1)

    policy = OutputPolicy.from_flag(skip_no_title, settings.no_title_text)
    run(
        iter_links(contents),
        template if template is not None else settings.template,
        policy,
        concurrency=concurrency,
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
