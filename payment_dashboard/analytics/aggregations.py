"""Chart aggregations over a transaction sequence.

Every function here is pure: it converts its input to a Polars frame,
groups it, and returns fresh bucket records. Inputs are never modified
and no state is kept between calls.
"""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

from payment_dashboard.models.buckets import (
    CategoryBucket,
    HourlyBucket,
    MerchantBucket,
    ModeBucket,
    MonthlyBucket,
    WeeklyBucket,
)
from payment_dashboard.models.enums import MONTH_LABELS, WEEKDAY_LABELS, Status
from payment_dashboard.models.transaction import Transaction, transactions_to_frame

HOURS_PER_DAY = 24
TOP_MERCHANT_LIMIT = 10

_FLAGGED = (pl.col("status") == Status.FLAGGED.value).sum().alias("flagged")
_TOTAL = pl.col("amount").sum().alias("total")
_COUNT = pl.len().alias("count")


def _zero_filled(frame: pl.DataFrame, key: str, size: int) -> pl.DataFrame:
    """Left-join grouped rows onto every key in ``range(size)``, zeros for gaps."""
    keys = pl.DataFrame({key: list(range(size))}, schema={key: pl.Int64})
    return keys.join(frame, on=key, how="left").fill_null(0).sort(key)


def aggregate_monthly(txns: Sequence[Transaction]) -> list[MonthlyBucket]:
    """Total spend, volume, and flagged volume per calendar month.

    Months are keyed by index rather than label and returned January to
    December. Months without transactions are omitted.

    Args:
        txns: Transactions to aggregate.

    Returns:
        One MonthlyBucket per month present in the input.
    """
    grouped = (
        transactions_to_frame(txns)
        .group_by("month_index")
        .agg(_TOTAL, _COUNT, _FLAGGED)
        .sort("month_index")
    )
    return [
        MonthlyBucket(
            month=MONTH_LABELS[row["month_index"]],
            total=int(row["total"]),
            count=int(row["count"]),
            flagged=int(row["flagged"]),
        )
        for row in grouped.iter_rows(named=True)
    ]


def aggregate_category(txns: Sequence[Transaction]) -> list[CategoryBucket]:
    """Total spend and volume per category, highest spend first.

    Categories with equal totals keep the order of their first appearance.

    Args:
        txns: Transactions to aggregate.

    Returns:
        One CategoryBucket per category present in the input.
    """
    grouped = (
        transactions_to_frame(txns)
        .group_by("category", maintain_order=True)
        .agg(_TOTAL, _COUNT)
        .sort("total", descending=True, maintain_order=True)
    )
    return [
        CategoryBucket(name=row["category"], total=int(row["total"]), count=int(row["count"]))
        for row in grouped.iter_rows(named=True)
    ]


def aggregate_hourly(txns: Sequence[Transaction]) -> list[HourlyBucket]:
    """Volume and flagged volume for each of the 24 hours, zero-filled.

    Args:
        txns: Transactions to aggregate.

    Returns:
        Exactly 24 HourlyBucket records, hour 0 first.
    """
    grouped = transactions_to_frame(txns).group_by("hour").agg(_COUNT, _FLAGGED)
    filled = _zero_filled(grouped, "hour", HOURS_PER_DAY)
    return [
        HourlyBucket(hour=f"{row['hour']}:00", count=int(row["count"]), flagged=int(row["flagged"]))
        for row in filled.iter_rows(named=True)
    ]


def aggregate_day_of_week(txns: Sequence[Transaction]) -> list[WeeklyBucket]:
    """Total spend and volume for each weekday, Monday to Sunday, zero-filled.

    Args:
        txns: Transactions to aggregate.

    Returns:
        Exactly 7 WeeklyBucket records.
    """
    grouped = transactions_to_frame(txns).group_by("weekday").agg(_TOTAL, _COUNT)
    filled = _zero_filled(grouped, "weekday", len(WEEKDAY_LABELS))
    return [
        WeeklyBucket(day=WEEKDAY_LABELS[row["weekday"]], total=int(row["total"]), count=int(row["count"]))
        for row in filled.iter_rows(named=True)
    ]


def top_merchants(
    txns: Sequence[Transaction],
    limit: int = TOP_MERCHANT_LIMIT,
) -> list[MerchantBucket]:
    """Rank merchants by total spend and keep the top ``limit``.

    Args:
        txns: Transactions to aggregate.
        limit: Maximum number of merchants to return.

    Returns:
        MerchantBucket records, highest spend first.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        msg = f"limit must be >= 0, got {limit}"
        raise ValueError(msg)

    grouped = (
        transactions_to_frame(txns)
        .group_by("merchant", maintain_order=True)
        .agg(pl.col("amount").sum().alias("spend"))
        .sort("spend", descending=True, maintain_order=True)
        .head(limit)
    )
    return [
        MerchantBucket(merchant=row["merchant"], spend=int(row["spend"]))
        for row in grouped.iter_rows(named=True)
    ]


def payment_mode_distribution(txns: Sequence[Transaction]) -> list[ModeBucket]:
    """Count transactions per payment mode, in order of first appearance."""
    grouped = (
        transactions_to_frame(txns)
        .group_by("payment_mode", maintain_order=True)
        .agg(_COUNT)
    )
    return [
        ModeBucket(name=row["payment_mode"], count=int(row["count"]))
        for row in grouped.iter_rows(named=True)
    ]
