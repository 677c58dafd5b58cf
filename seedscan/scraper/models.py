"""Data models for the scraper layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One listing row that passed the popularity threshold."""

    category: str
    seeds: int
    title: str
    url: str


class FetchError(Exception):
    """Base class for a failed fetch-and-parse of a single page."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


class NetworkError(FetchError):
    """Timeout, connection failure or any other transport-level error."""


class ParseError(FetchError):
    """The response body could not be decoded or parsed as HTML."""
