"""Record extraction: turns a parsed listing page into :class:`Record` objects."""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, Tag

from seedscan.config import settings
from seedscan.scraper.models import Record

# Rows of the listing table.  ``html.parser`` never synthesises a <tbody>,
# but saved pages sometimes carry one.
_ROW_SELECTOR = "table#searchResult > tr, table#searchResult > tbody > tr"
_CELLS_PER_ROW = 4

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _normalise_category(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def _parse_seeds(text: str) -> int | None:
    """Return *text* as an ``int``, or ``None`` for placeholders like ``N/A``."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def _absolute_url(origin: str, href: str) -> str:
    """Prefix a site-relative *href* with *origin*."""
    return f"{origin}{href}"


def _category_text(cell: Tag) -> str:
    """Text of the cell's ``<center>`` element; empty when there is none."""
    center = cell.find("center")
    if center is None:
        return ""
    return _normalise_category(center.get_text())


def _first_text(cell: Tag) -> str:
    """First text node under *cell*, ignoring any text nested after it."""
    return next(iter(cell.strings), "")


def _row_to_record(row: Tag, origin: str, min_seeds: int) -> Record | None:
    """Build a :class:`Record` from one ``<tr>``, or ``None`` if it is skipped."""
    cells = row.find_all("td")
    if len(cells) != _CELLS_PER_ROW:
        return None

    seeds = _parse_seeds(_first_text(cells[2]))
    if seeds is None or seeds < min_seeds:
        return None

    anchor = cells[1].select_one("div > a")
    title = anchor.get_text() if anchor is not None else ""
    href = anchor.get("href", "") if anchor is not None else ""

    return Record(
        category=_category_text(cells[0]),
        seeds=seeds,
        title=title,
        url=_absolute_url(origin, href),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_records(
    document: BeautifulSoup | Tag,
    origin: str | None = None,
    min_seeds: int | None = None,
) -> List[Record]:
    """Extract every qualifying listing row from *document*.

    Rows with the wrong number of cells, a non-numeric seed count or fewer
    than *min_seeds* seeds are silently dropped.  The result follows
    document order.  The function never raises for malformed rows and
    never mutates *document*.

    Args:
        document: A parsed listing page.
        origin: Site origin prepended to each relative href.  Defaults to
            ``settings.site_origin``.
        min_seeds: Popularity threshold.  Defaults to ``settings.min_seeds``.
    """
    origin = settings.site_origin if origin is None else origin
    min_seeds = settings.min_seeds if min_seeds is None else min_seeds

    records: List[Record] = []
    for row in document.select(_ROW_SELECTOR):
        record = _row_to_record(row, origin, min_seeds)
        if record is not None:
            records.append(record)
    return records


def extract_records_from_html(
    html: str | bytes,
    origin: str | None = None,
    min_seeds: int | None = None,
) -> List[Record]:
    """Parse *html* and run :func:`extract_records` over it."""
    soup = BeautifulSoup(html, "html.parser")
    try:
        return extract_records(soup, origin=origin, min_seeds=min_seeds)
    finally:
        soup.decompose()
