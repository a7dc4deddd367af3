"""Logging setup for the portfolio-site CLI."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Send ``portfolio_site`` logs to stderr via rich, plus ``log_file`` at debug level."""
    logger = logging.getLogger("portfolio_site")
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.handlers.clear()

    console = RichHandler(console=Console(stderr=True), show_path=False, markup=True)
    console.setLevel(level)
    logger.addHandler(console)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(handler)

    return logger


@contextmanager
def log_step(logger: logging.Logger, description: str) -> Iterator[None]:
    """Log ``description`` on entry, and its duration or failure on exit."""
    logger.debug(f"{description}...")
    started = time.perf_counter()
    try:
        yield
    except Exception as exc:
        logger.error(f"{description} failed: {exc}")
        raise
    logger.debug(f"{description} done in {time.perf_counter() - started:.3f}s")
