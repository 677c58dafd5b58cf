"""Centralised settings for SeedScan.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.environ.get(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Target site
    # ------------------------------------------------------------------
    site_origin: str = field(
        default_factory=lambda: os.environ.get(
            "SEEDSCAN_SITE_ORIGIN", "https://pirateproxy.yt"
        ).rstrip("/")
    )
    recent_pages: int = field(
        default_factory=lambda: int(os.environ.get("SEEDSCAN_RECENT_PAGES", "30"))
    )
    top_paths: tuple[str, ...] = field(
        default_factory=lambda: _env_list("SEEDSCAN_TOP_PATHS", "48h200,48h500")
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SEEDSCAN_USER_AGENT",
            "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0",
        )
    )

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    min_seeds: int = field(
        default_factory=lambda: int(os.environ.get("SEEDSCAN_MIN_SEEDS", "100"))
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    worker_count: int = field(
        default_factory=lambda: int(os.environ.get("SEEDSCAN_WORKERS", "32"))
    )
    # 0 means "retry forever".
    max_attempts: int = field(
        default_factory=lambda: int(os.environ.get("SEEDSCAN_MAX_ATTEMPTS", "0"))
    )
    verbose: bool = field(default_factory=lambda: _env_bool("SEEDSCAN_VERBOSE"))


# Module-level singleton — import this everywhere:
#   from seedscan.config import settings
settings = Settings()
