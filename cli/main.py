"""SeedScan CLI — entry-point for crawling the listing site.

Usage:
    python cli/main.py --help

Commands:
    crawl    → fetch every listing page and print the sorted table
    urls     → print the pages a crawl would fetch
    extract  → run the record extractor over a saved listing page
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from seedscan.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from cli.rendering import render_table
from seedscan.config import settings
from seedscan.pipeline import CrawlError, build_page_urls, run_crawl, sort_records
from seedscan.scraper import extract_records_from_html

app = typer.Typer(
    name="seedscan",
    help="Crawl the listing site and summarise popular entries.",
    no_args_is_help=True,
)


@app.command("crawl")
def crawl(
    origin: Optional[str] = typer.Option(None, help="Site origin, e.g. https://example.test."),
    pages: Optional[int] = typer.Option(None, help="Number of 'recent' pages to fetch."),
    workers: Optional[int] = typer.Option(None, help="Number of concurrent workers."),
    min_seeds: Optional[int] = typer.Option(None, help="Popularity threshold."),
    max_attempts: Optional[int] = typer.Option(
        None, help="Attempts per page before giving up (0 = retry forever)."
    ),
    timeout: Optional[float] = typer.Option(None, help="Per-request timeout in seconds."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Crawl every listing page and print the sorted summary table."""
    if origin is not None:
        settings.site_origin = origin.rstrip("/")
    if min_seeds is not None:
        settings.min_seeds = min_seeds
    if timeout is not None:
        settings.request_timeout = timeout
    if verbose:
        settings.verbose = True

    page_urls = build_page_urls(recent_pages=pages)

    try:
        records = run_crawl(page_urls, worker_count=workers, max_attempts=max_attempts)
    except CrawlError as exc:
        typer.echo(f"❌ Crawl aborted: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render_table(records))


@app.command("urls")
def urls(
    origin: Optional[str] = typer.Option(None, help="Site origin, e.g. https://example.test."),
    pages: Optional[int] = typer.Option(None, help="Number of 'recent' pages."),
) -> None:
    """Print the pages a crawl would fetch, one per line."""
    for url in build_page_urls(origin=origin, recent_pages=pages):
        typer.echo(url)


@app.command("extract")
def extract(
    file: Path = typer.Option(..., "--file", help="Saved HTML listing page."),
    origin: Optional[str] = typer.Option(None, help="Origin prefixed to relative links."),
    min_seeds: Optional[int] = typer.Option(None, help="Popularity threshold."),
) -> None:
    """Extract records from a saved listing page and print them as a table."""
    if not file.exists():
        typer.echo(f"❌ No such file: {file}", err=True)
        raise typer.Exit(code=1)

    records = extract_records_from_html(
        file.read_bytes(),
        origin=origin.rstrip("/") if origin else None,
        min_seeds=min_seeds,
    )
    typer.echo(render_table(sort_records(records)))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
