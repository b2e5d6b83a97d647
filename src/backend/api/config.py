from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class AppConfig:
    host: str
    port: int
    log_level: str
    scoring_config_path: Optional[str]


def get_app_config() -> AppConfig:
    """
    Load service configuration from environment variables (a local `.env` is honoured).

    Reads:
      RECEIPTS_HOST, PORT, RECEIPTS_LOG_LEVEL, RECEIPTS_SCORING_CONFIG
    """
    log_level = os.getenv("RECEIPTS_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"RECEIPTS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}.")

    return AppConfig(
        host=os.getenv("RECEIPTS_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=_int_env("PORT", 3000),
        log_level=log_level,
        scoring_config_path=os.getenv("RECEIPTS_SCORING_CONFIG", "").strip() or None,
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
