"""Tagged progress lines for the crawl pipeline.

Lines go to stderr and only when ``settings.verbose`` is on, so stdout is
left to the final table.
"""

from __future__ import annotations

import sys
import threading

from seedscan.config import settings


def log(tag: str, message: str) -> None:
    if not settings.verbose:
        return
    print(f"[{tag}] ({threading.current_thread().name}) {message}", file=sys.stderr, flush=True)
