"""Dashboard view: everything one render needs for one status filter.

This is the in-process boundary to the presentation layer. The base
dataset is read-only; each call filters and aggregates from scratch.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from payment_dashboard.analytics.aggregations import (
    TOP_MERCHANT_LIMIT,
    aggregate_category,
    aggregate_day_of_week,
    aggregate_hourly,
    aggregate_monthly,
    payment_mode_distribution,
    top_merchants,
)
from payment_dashboard.analytics.filters import filter_by_status
from payment_dashboard.analytics.summary import DashboardSummary, compute_summary
from payment_dashboard.lib.logging_config import get_logger
from payment_dashboard.models.buckets import (
    CategoryBucket,
    HourlyBucket,
    MerchantBucket,
    ModeBucket,
    MonthlyBucket,
    WeeklyBucket,
    buckets_to_dicts,
)
from payment_dashboard.models.enums import StatusFilter
from payment_dashboard.models.transaction import Transaction

logger = get_logger("view")

FLAGGED_PREVIEW_LIMIT = 15
DATA_PREVIEW_LIMIT = 50


@dataclass(frozen=True)
class DashboardView:
    """Aggregated data for one dashboard render.

    Attributes:
        status_filter: Filter the view was computed for.
        dataset: Full base dataset, for raw listing.
        filtered: Transactions passing the filter.
        monthly: Monthly trend buckets.
        categories: Category breakdown, highest spend first.
        hourly: 24 hourly buckets.
        weekly: 7 weekday buckets.
        merchants: Top merchants by spend.
        payment_modes: Payment mode distribution.
        summary: KPI row.
        flagged_preview: Leading flagged transactions of the full dataset.
        data_preview: Leading rows of the filtered dataset.
    """

    status_filter: StatusFilter
    dataset: tuple[Transaction, ...]
    filtered: tuple[Transaction, ...]
    monthly: list[MonthlyBucket]
    categories: list[CategoryBucket]
    hourly: list[HourlyBucket]
    weekly: list[WeeklyBucket]
    merchants: list[MerchantBucket]
    payment_modes: list[ModeBucket]
    summary: DashboardSummary
    flagged_preview: tuple[Transaction, ...]
    data_preview: tuple[Transaction, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the view for JSON output, omitting the full datasets.

        Returns:
            Dictionary with the filter, summary, chart buckets, and previews.
        """
        return {
            "status_filter": self.status_filter.value,
            "summary": self.summary.to_dict(),
            "monthly": buckets_to_dicts(self.monthly),
            "categories": buckets_to_dicts(self.categories),
            "hourly": buckets_to_dicts(self.hourly),
            "weekly": buckets_to_dicts(self.weekly),
            "top_merchants": buckets_to_dicts(self.merchants),
            "payment_modes": buckets_to_dicts(self.payment_modes),
            "flagged_preview": [t.to_dict() for t in self.flagged_preview],
            "data_preview": [t.to_dict() for t in self.data_preview],
        }


def build_view(
    dataset: Sequence[Transaction],
    status_filter: StatusFilter | str | None = StatusFilter.ALL,
    *,
    top_merchant_limit: int = TOP_MERCHANT_LIMIT,
    flagged_preview_limit: int = FLAGGED_PREVIEW_LIMIT,
    data_preview_limit: int = DATA_PREVIEW_LIMIT,
) -> DashboardView:
    """Filter the dataset and compute every chart and KPI for it.

    Args:
        dataset: Full base dataset, sorted by timestamp.
        status_filter: All, Success, or Flagged; anything else means All.
        top_merchant_limit: Length of the merchant ranking.
        flagged_preview_limit: Rows in the flagged table.
        data_preview_limit: Rows in the raw data table.

    Returns:
        DashboardView for the selected filter.

    Raises:
        ValueError: If any limit is negative.
    """
    for name, limit in (
        ("flagged_preview_limit", flagged_preview_limit),
        ("data_preview_limit", data_preview_limit),
    ):
        if limit < 0:
            msg = f"{name} must be >= 0, got {limit}"
            raise ValueError(msg)

    selected = StatusFilter.parse(status_filter)
    filtered = filter_by_status(dataset, selected)
    categories = aggregate_category(filtered)
    flagged = [t for t in dataset if t.is_flagged]

    logger.debug(
        "Building view for filter %s (%d of %d transactions)",
        selected.value,
        len(filtered),
        len(dataset),
    )

    return DashboardView(
        status_filter=selected,
        dataset=tuple(dataset),
        filtered=tuple(filtered),
        monthly=aggregate_monthly(filtered),
        categories=categories,
        hourly=aggregate_hourly(filtered),
        weekly=aggregate_day_of_week(filtered),
        merchants=top_merchants(filtered, top_merchant_limit),
        payment_modes=payment_mode_distribution(filtered),
        summary=compute_summary(dataset, filtered, categories),
        flagged_preview=tuple(flagged[:flagged_preview_limit]),
        data_preview=tuple(filtered[:data_preview_limit]),
    )
