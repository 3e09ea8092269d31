"""
ThemeHelper — Logger with duration tracking for hook passes.
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

from themehelper.core.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s | %(levelname)-7s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("themehelper")


@contextmanager
def step_timer(step_name: str, level: int = logging.INFO) -> Generator[None, None, None]:
    """Context manager that logs the start and duration of a setup step."""
    logger.log(level, "▶ %s — started", step_name)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.log(level, "✔ %s — completed in %.0f ms", step_name, elapsed_ms)
