"""The single consumer of page batches.

The aggregator thread is the only owner of the outstanding-page counter and
of the record buffer; workers reach it exclusively through the result queue.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from seedscan.pipeline.progress import log
from seedscan.pipeline.queues import ClosableQueue, QueueClosed
from seedscan.pipeline.workers import Message, PageFailure, WorkItem
from seedscan.scraper.models import Record


class CrawlError(Exception):
    """A page could not be fetched; the crawl was aborted."""

    def __init__(self, failure: PageFailure) -> None:
        super().__init__(
            f"Giving up on {failure.url} after {failure.attempts} attempt(s): "
            f"{failure.error}"
        )
        self.failure = failure


class AggregatorState(str, Enum):
    COLLECTING = "collecting"
    DRAINING = "draining"
    DONE = "done"


def sort_records(records: Iterable[Record]) -> List[Record]:
    """Stable sort by category, then by seed count (both ascending)."""
    return sorted(records, key=lambda r: (r.category, r.seeds))


class Aggregator:
    """Collect one batch per work item, then shut the pipeline down.

    Args:
        expected_pages: Number of work items; the counter starts here and
            drops by one per :class:`PageBatch`.
        work_queue: Closed together with *result_queue* once every page
            is accounted for.
        result_queue: Source of batches and failures.
    """

    def __init__(
        self,
        expected_pages: int,
        work_queue: ClosableQueue[WorkItem],
        result_queue: ClosableQueue[Message],
    ) -> None:
        self.outstanding = expected_pages
        self.state = AggregatorState.COLLECTING
        self.failure: PageFailure | None = None
        self.records: List[Record] = []
        self._buffer: List[Record] = []
        self._work_queue = work_queue
        self._result_queue = result_queue

    def run(self) -> List[Record]:
        """Consume the result queue until done; return the sorted records."""
        try:
            self._collect()
        finally:
            self._shutdown()

        self.records = sort_records(self._buffer)
        self.state = AggregatorState.DONE
        log("AGGREGATE", f"done — {len(self.records)} record(s)")
        return self.records

    def _collect(self) -> None:
        while self.outstanding > 0:
            try:
                message = self._result_queue.get()
            except QueueClosed:
                return

            if isinstance(message, PageFailure):
                self.failure = message
                return

            self._buffer.extend(message.records)
            self.outstanding -= 1
            log(
                "AGGREGATE",
                f"{message.url}: +{len(message.records)} record(s), "
                f"{self.outstanding} page(s) outstanding",
            )

    def _shutdown(self) -> None:
        self.state = AggregatorState.DRAINING
        aborted = self.outstanding > 0
        self._work_queue.close(discard_pending=aborted)
        self._result_queue.close(discard_pending=aborted)
