from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    log_level: str

    # Principal used for authenticated writes when --user is not given
    default_user: str | None

    # Query limits
    default_list_limit: int
    default_report_limit: int
    growth_sample_limit: int

    # Feature flags
    demo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    list_limit = int(os.getenv("DEFAULT_LIST_LIMIT", "50"))
    report_limit = int(os.getenv("DEFAULT_REPORT_LIMIT", "20"))
    growth_limit = int(os.getenv("GROWTH_SAMPLE_LIMIT", "100"))
    if min(list_limit, report_limit, growth_limit) <= 0:
        raise RuntimeError(
            "DEFAULT_LIST_LIMIT, DEFAULT_REPORT_LIMIT and GROWTH_SAMPLE_LIMIT must be positive"
        )
    return Settings(
        db_path=os.getenv("DB_PATH", "market.db"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        default_user=os.getenv("MARKET_USER") or None,
        default_list_limit=list_limit,
        default_report_limit=report_limit,
        growth_sample_limit=growth_limit,
        demo=_as_bool(os.getenv("DEMO")),
    )
