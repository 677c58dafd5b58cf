"""High-level runner for a crawl.

``run_crawl`` wires together the two queues, the worker threads and the
aggregator thread, waits for all of them and hands back the sorted records.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import ExitStack
from functools import partial
from typing import Iterable, List

from seedscan.config import settings
from seedscan.pipeline.aggregator import Aggregator, CrawlError
from seedscan.pipeline.progress import log
from seedscan.pipeline.queues import ClosableQueue
from seedscan.pipeline.workers import Fetch, Message, WorkItem, worker_loop
from seedscan.scraper.fetcher import build_client, fetch_and_parse
from seedscan.scraper.models import Record


def run_crawl(
    urls: Iterable[str],
    fetch: Fetch | None = None,
    worker_count: int | None = None,
    max_attempts: int | None = None,
) -> List[Record]:
    """Fetch every page in *urls* concurrently and return the sorted records.

    Returns only after every worker thread and the aggregator thread have
    finished.  An exception escaping any of those threads is re-raised here.

    Args:
        urls: The work items.  Each must eventually yield one batch.
        fetch: ``url -> list[Record]`` callable.  Defaults to
            :func:`~seedscan.scraper.fetcher.fetch_and_parse` over one
            ``httpx.Client`` shared by all workers.
        worker_count: Pool size.  Defaults to ``settings.worker_count``.
        max_attempts: Per-URL attempt budget, ``0`` for unlimited.  Defaults
            to ``settings.max_attempts``.

    Raises:
        CrawlError: A page ran out of attempts, or the fetcher raised
            something other than a ``FetchError``.
    """
    urls = list(urls)
    worker_count = settings.worker_count if worker_count is None else worker_count
    max_attempts = settings.max_attempts if max_attempts is None else max_attempts
    if worker_count < 1:
        raise ValueError(f"worker_count must be >= 1, got {worker_count}")

    work_queue: ClosableQueue[WorkItem] = ClosableQueue()
    result_queue: ClosableQueue[Message] = ClosableQueue()
    aggregator = Aggregator(len(urls), work_queue, result_queue)

    # The work queue is unbounded, so it can be seeded before any thread runs.
    for url in urls:
        work_queue.put(WorkItem(url))

    with ExitStack() as stack:
        if fetch is None:
            client = stack.enter_context(build_client())
            fetch = partial(fetch_and_parse, client=client)

        log("crawl", f"{len(urls)} page(s), {worker_count} worker(s)")
        with ThreadPoolExecutor(
            max_workers=worker_count + 1, thread_name_prefix="seedscan"
        ) as pool:
            aggregated = pool.submit(aggregator.run)
            workers = [
                pool.submit(worker_loop, work_queue, result_queue, fetch, max_attempts)
                for _ in range(worker_count)
            ]
            # An aggregator crash re-raises here; its own cleanup has already
            # closed the queues, so the workers are on their way out.
            records = aggregated.result()
            for future in workers:
                future.result()

    if aggregator.failure is not None:
        raise CrawlError(aggregator.failure) from aggregator.failure.error
    return records
