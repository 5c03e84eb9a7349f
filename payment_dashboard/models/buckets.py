"""Aggregation bucket records consumed by the dashboard charts.

Buckets are ephemeral: they are rebuilt from the filtered transaction
list on every filter change and never mutated.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class MonthlyBucket:
    """Spend, volume, and flagged volume for one calendar month."""

    month: str
    total: int
    count: int
    flagged: int


@dataclass(frozen=True)
class CategoryBucket:
    """Spend and volume for one spending category."""

    name: str
    total: int
    count: int


@dataclass(frozen=True)
class HourlyBucket:
    """Volume and flagged volume for one hour of the day (label ``H:00``)."""

    hour: str
    count: int
    flagged: int


@dataclass(frozen=True)
class WeeklyBucket:
    """Spend and volume for one day of the week."""

    day: str
    total: int
    count: int


@dataclass(frozen=True)
class MerchantBucket:
    merchant: str
    spend: int


@dataclass(frozen=True)
class ModeBucket:
    name: str
    count: int


def buckets_to_dicts(buckets: list[Any]) -> list[dict[str, Any]]:
    """Serialize a bucket list for JSON output."""
    return [asdict(b) for b in buckets]
