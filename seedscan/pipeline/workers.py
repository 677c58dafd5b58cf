"""Worker loop and the messages exchanged between workers and the aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Union

from seedscan.pipeline.progress import log
from seedscan.pipeline.queues import ClosableQueue, QueueClosed
from seedscan.scraper.models import FetchError, Record

Fetch = Callable[[str], List[Record]]


@dataclass(frozen=True)
class WorkItem:
    """One page to fetch.  ``attempt`` counts tries of this URL so far + 1."""

    url: str
    attempt: int = 1

    def retry(self) -> WorkItem:
        return WorkItem(self.url, self.attempt + 1)


@dataclass(frozen=True)
class PageBatch:
    """Records from one successfully fetched page (possibly none)."""

    url: str
    records: List[Record] = field(default_factory=list)


@dataclass(frozen=True)
class PageFailure:
    """A page that will never produce a batch; aborts the crawl."""

    url: str
    attempts: int
    error: BaseException


Message = Union[PageBatch, PageFailure]


def worker_loop(
    work_queue: ClosableQueue[WorkItem],
    result_queue: ClosableQueue[Message],
    fetch: Fetch,
    max_attempts: int = 0,
) -> None:
    """Fetch pages from *work_queue* until it is closed.

    A successful fetch sends a :class:`PageBatch` to *result_queue*.  A
    :class:`FetchError` puts the same URL straight back on *work_queue*;
    once *max_attempts* (when non-zero) is used up, a :class:`PageFailure`
    is sent instead.  Any other exception is reported as a
    :class:`PageFailure` immediately.
    """
    while True:
        try:
            item = work_queue.get()
        except QueueClosed:
            return

        try:
            message = _process(item, work_queue, fetch, max_attempts)
        except QueueClosed:
            return
        except Exception as exc:
            message = PageFailure(item.url, item.attempt, exc)
        if message is None:
            continue

        try:
            result_queue.put(message)
        except QueueClosed:
            return


def _process(
    item: WorkItem,
    work_queue: ClosableQueue[WorkItem],
    fetch: Fetch,
    max_attempts: int,
) -> Message | None:
    """Run one fetch; return the message for the aggregator, or ``None`` on requeue."""
    try:
        records = list(fetch(item.url))
    except FetchError as exc:
        if max_attempts and item.attempt >= max_attempts:
            log("GAVE UP", f"{item.url} after {item.attempt} attempt(s): {exc}")
            return PageFailure(item.url, item.attempt, exc)
        log("RETRY", f"{item.url} (attempt {item.attempt}): {exc}")
        work_queue.put(item.retry())
        return None
    except Exception as exc:
        log("ERROR", f"{item.url}: {type(exc).__name__}: {exc}")
        return PageFailure(item.url, item.attempt, exc)

    log("FETCH", f"✓ {item.url} — {len(records)} record(s)")
    return PageBatch(item.url, records)
