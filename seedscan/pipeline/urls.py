"""Construction of the fixed list of listing pages to crawl."""

from __future__ import annotations

from typing import Iterable, List

from seedscan.config import settings


def build_page_urls(
    origin: str | None = None,
    recent_pages: int | None = None,
    top_paths: Iterable[str] | None = None,
) -> List[str]:
    """Return the work-item URLs in crawl order.

    ``recent_pages`` sequential ``/recent/<n>`` pages (zero-based) come first,
    followed by one ``/top/<path>`` page per entry of *top_paths*.  Every
    argument defaults to the matching field of ``settings``.
    """
    origin = (settings.site_origin if origin is None else origin).rstrip("/")
    recent_pages = settings.recent_pages if recent_pages is None else recent_pages
    top_paths = settings.top_paths if top_paths is None else top_paths

    urls = [f"{origin}/recent/{page}" for page in range(recent_pages)]
    urls.extend(f"{origin}/top/{path}" for path in top_paths)
    return urls
