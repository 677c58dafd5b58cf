"""Utilities for rendering crawl results in the CLI."""

from __future__ import annotations

from typing import List, Sequence

from seedscan.scraper.models import Record

HEADERS = ("Category", "Seeds", "URL")


def _border(widths: Sequence[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "|" + "|".join(f" {c.ljust(w)} " for c, w in zip(cells, widths)) + "|"


def render_table(records: List[Record]) -> str:
    """Render *records* as a left-aligned ASCII table.

    Records are printed in the order given; sorting is the caller's job.

    Args:
        records: Already filtered and sorted records.

    Returns:
        The table, header row included, without a trailing newline.
    """
    rows = [(r.category, str(r.seeds), r.url) for r in records]
    widths = [len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    border = _border(widths)
    lines = [border, _row(HEADERS, widths), border]
    lines.extend(_row(row, widths) for row in rows)
    if rows:
        lines.append(border)
    return "\n".join(lines)
