"""Scraper package — page fetch & record extraction."""

from seedscan.scraper.extractor import extract_records, extract_records_from_html
from seedscan.scraper.fetcher import build_client, fetch_and_parse
from seedscan.scraper.models import FetchError, NetworkError, ParseError, Record

__all__ = [
    "fetch_and_parse",
    "build_client",
    "extract_records",
    "extract_records_from_html",
    "Record",
    "FetchError",
    "NetworkError",
    "ParseError",
]
