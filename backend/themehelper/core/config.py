"""
ThemeHelper — Configuration
Loads .env automatically, then reads all settings from environment variables.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass(frozen=True)
class AppConfig:
    """Top-level library configuration."""
    items_per_page: int
    max_pages: int
    log_level: str


def _int_env(name: str, default: str) -> int | None:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        return None


def _load_config() -> AppConfig:
    return AppConfig(
        items_per_page=_int_env("THEMEHELPER_ITEMS_PER_PAGE", "25"),
        max_pages=_int_env("THEMEHELPER_MAX_PAGES", "9"),
        log_level=os.getenv("THEMEHELPER_LOG_LEVEL", "INFO").upper(),
    )


def _validate_config(cfg: AppConfig) -> None:
    """Fail fast on unusable pagination defaults."""
    problems: list[str] = []
    if cfg.items_per_page is None or cfg.items_per_page < 1:
        problems.append("THEMEHELPER_ITEMS_PER_PAGE must be a positive integer")
    if cfg.max_pages is None or cfg.max_pages < 5:
        problems.append("THEMEHELPER_MAX_PAGES must be an integer >= 5")
    if problems:
        print(
            f"\n  ERROR: Invalid ThemeHelper configuration: {'; '.join(problems)}\n"
            f"  Fix the values in your environment or backend/.env.\n",
            file=sys.stderr,
        )
        sys.exit(1)


settings = _load_config()
_validate_config(settings)
