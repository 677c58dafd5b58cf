"""HTTP fetch + HTML parse for a single listing page."""

from __future__ import annotations

from typing import List

import httpx
from bs4 import BeautifulSoup

from seedscan.config import settings
from seedscan.scraper.extractor import extract_records
from seedscan.scraper.models import NetworkError, ParseError, Record


def build_client(timeout: float | None = None) -> httpx.Client:
    """Return an ``httpx.Client`` configured for the listing site.

    The client is safe to share between worker threads.
    """
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout if timeout is None else timeout,
        follow_redirects=True,
    )


def _get(client: httpx.Client, url: str) -> bytes:
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        raise NetworkError(url, f"{type(exc).__name__}: {exc}") from exc
    # The status code is deliberately not checked: an error page simply
    # carries no listing rows.
    return response.content


def fetch_and_parse(url: str, client: httpx.Client | None = None) -> List[Record]:
    """Fetch *url* and return the :class:`Record` objects on that page.

    A page without qualifying rows returns an empty list; that is still a
    success.  When *client* is ``None`` a short-lived client is opened and
    closed around the request.

    Raises:
        NetworkError: On timeout, connection failure or other transport error.
        ParseError: If the body cannot be parsed as HTML.
    """
    if client is None:
        with build_client() as own_client:
            body = _get(own_client, url)
    else:
        body = _get(client, url)

    try:
        document = BeautifulSoup(body, "html.parser")
    except Exception as exc:
        raise ParseError(url, f"{type(exc).__name__}: {exc}") from exc

    try:
        return extract_records(document)
    finally:
        document.decompose()
