"""Pipeline package — concurrent fetch / parse / aggregate."""

from seedscan.pipeline.aggregator import Aggregator, AggregatorState, CrawlError, sort_records
from seedscan.pipeline.queues import ClosableQueue, QueueClosed
from seedscan.pipeline.runner import run_crawl
from seedscan.pipeline.urls import build_page_urls
from seedscan.pipeline.workers import PageBatch, PageFailure, WorkItem, worker_loop

__all__ = [
    "run_crawl",
    "build_page_urls",
    "sort_records",
    "Aggregator",
    "AggregatorState",
    "CrawlError",
    "ClosableQueue",
    "QueueClosed",
    "WorkItem",
    "PageBatch",
    "PageFailure",
    "worker_loop",
]
