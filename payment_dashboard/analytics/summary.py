"""Headline KPIs shown above the dashboard charts.

Spend figures follow the active filter. Fraud figures always describe
the full dataset, so switching the filter never changes the fraud rate.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from payment_dashboard.analytics.aggregations import aggregate_category
from payment_dashboard.models.buckets import CategoryBucket
from payment_dashboard.models.transaction import Transaction

NO_DATA = "-"


@dataclass(frozen=True)
class DashboardSummary:
    """Scalar statistics for one dashboard render.

    Attributes:
        total_spend: Sum of filtered amounts.
        transaction_count: Number of filtered transactions.
        average_transaction: Mean filtered amount, 0.0 when nothing matches.
        flagged_count: Flagged transactions in the full dataset.
        flagged_amount: Sum of flagged amounts in the full dataset.
        fraud_rate: Flagged share of the full dataset, in percent.
        top_category: Category with the highest filtered spend, or ``-``.
    """

    total_spend: int
    transaction_count: int
    average_transaction: float
    flagged_count: int
    flagged_amount: int
    fraud_rate: float
    top_category: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def average_transaction(total: int, count: int) -> float:
    """Return total / count, or 0.0 for an empty selection."""
    if count == 0:
        return 0.0
    return total / count


def fraud_rate(flagged: int, total: int) -> float:
    """Return the flagged percentage, or 0.0 for an empty dataset."""
    if total == 0:
        return 0.0
    return flagged / total * 100


def top_category(categories: Sequence[CategoryBucket]) -> str:
    """Return the leading category name, or the ``-`` sentinel when empty."""
    return categories[0].name if categories else NO_DATA


def compute_summary(
    dataset: Sequence[Transaction],
    filtered: Sequence[Transaction],
    categories: Sequence[CategoryBucket] | None = None,
) -> DashboardSummary:
    """Compute the KPI row for one filter value.

    Args:
        dataset: Full, unfiltered dataset (drives fraud figures).
        filtered: Dataset after the status filter (drives spend figures).
        categories: Precomputed category aggregation of ``filtered``, if
            the caller already has it.

    Returns:
        DashboardSummary for the current view.
    """
    if categories is None:
        categories = aggregate_category(filtered)

    total_spend = sum(t.amount for t in filtered)
    flagged = [t for t in dataset if t.is_flagged]

    return DashboardSummary(
        total_spend=total_spend,
        transaction_count=len(filtered),
        average_transaction=average_transaction(total_spend, len(filtered)),
        flagged_count=len(flagged),
        flagged_amount=sum(t.amount for t in flagged),
        fraud_rate=fraud_rate(len(flagged), len(dataset)),
        top_category=top_category(categories),
    )
