"""Logging configuration and report metadata for the payment dashboard."""

from __future__ import annotations

import logging
import sys
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime

LOGGER_NAME = "payment_dashboard"


@dataclass
class ReportMetadata:
    """Metadata about a dashboard run, printed alongside the JSON report.

    Attributes:
        records_generated: Number of transactions in the base dataset.
        seed: Random seed used for this run.
        start_date: First day of the one-year transaction window (YYYY-MM-DD).
        status_filter: Filter value the view was computed for.
        duration_seconds: Wall-clock time for generation and aggregation.
    """

    records_generated: int
    seed: int
    start_date: str
    status_filter: str
    duration_seconds: float
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    def to_dict(self) -> dict:
        return asdict(self)


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure and return the package root logger.

    Sets up a stream handler writing to stderr so that stdout remains
    reserved for the JSON report.

    Args:
        level: Logging level as an int or level name. Defaults to INFO.

    Returns:
        Configured logger instance.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger under the package namespace.

    Library modules call this and never attach handlers themselves.

    Args:
        name: The module name for the child logger.

    Returns:
        A child logger that inherits the package configuration.
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
