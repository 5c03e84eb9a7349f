"""Transaction record, its columnar schema, and conversion to Polars."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import polars as pl

from payment_dashboard.models.enums import (
    MONTH_LABELS,
    WEEKDAY_LABELS,
    Category,
    PaymentMode,
    Status,
)
from payment_dashboard.models.merchant import is_registered_merchant

ID_PREFIX = "TXN"
ID_WIDTH = 5


def format_transaction_id(sequence: int) -> str:
    """Format a 1-based sequence number as a zero-padded transaction ID.

    Args:
        sequence: Position of the record in generation order, starting at 1.

    Returns:
        ID string such as ``TXN00042``.
    """
    return f"{ID_PREFIX}{sequence:0{ID_WIDTH}d}"


@dataclass(frozen=True)
class Transaction:
    """A single synthetic payment event.

    Calendar fields (month, day, hour, day of week) are properties of
    ``timestamp`` so they can never disagree with it.

    Attributes:
        id: Sequential zero-padded identifier (TXN00001).
        timestamp: Naive datetime of the payment.
        category: Spending category.
        merchant: Merchant name, registered under ``category``.
        amount: Positive integer amount in rupees.
        status: Success or Flagged, assigned by the fraud heuristic.
        payment_mode: How the payment was initiated.
    """

    id: str
    timestamp: datetime
    category: Category
    merchant: str
    amount: int
    status: Status
    payment_mode: PaymentMode

    def __post_init__(self) -> None:
        # Coerce raw strings so hand-built records compare equal to generated ones
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "status", Status(self.status))
        object.__setattr__(self, "payment_mode", PaymentMode(self.payment_mode))

        if not is_registered_merchant(self.category, self.merchant):
            msg = f"Merchant {self.merchant!r} is not registered for category {self.category!r}"
            raise ValueError(msg)
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            msg = f"Amount must be an integer, got {self.amount!r}"
            raise ValueError(msg)
        if self.amount <= 0:
            msg = f"Amount must be positive, got {self.amount}"
            raise ValueError(msg)

    @property
    def month(self) -> str:
        return MONTH_LABELS[self.month_index]

    @property
    def month_index(self) -> int:
        """Zero-based calendar month (January is 0)."""
        return self.timestamp.month - 1

    @property
    def day(self) -> int:
        return self.timestamp.day

    @property
    def hour(self) -> int:
        return self.timestamp.hour

    @property
    def day_of_week(self) -> str:
        return WEEKDAY_LABELS[self.timestamp.weekday()]

    @property
    def is_flagged(self) -> bool:
        return self.status is Status.FLAGGED

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-safe values, including the derived calendar fields.

        Returns:
            Dictionary keyed by field name.
        """
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "day_of_week": self.day_of_week,
            "category": self.category.value,
            "merchant": self.merchant,
            "amount": self.amount,
            "status": self.status.value,
            "payment_mode": self.payment_mode.value,
        }


@dataclass
class TransactionSchema:
    """Defines the columnar schema used by the aggregation layer."""

    @staticmethod
    def polars_schema() -> dict[str, pl.DataType]:
        """Return the Polars schema for a transaction frame.

        Returns:
            Dictionary mapping column names to Polars data types.
        """
        return {
            "id": pl.Utf8,
            "timestamp": pl.Datetime("us"),
            "month_index": pl.Int64,
            "hour": pl.Int64,
            "weekday": pl.Int64,
            "category": pl.Utf8,
            "merchant": pl.Utf8,
            "amount": pl.Int64,
            "status": pl.Utf8,
            "payment_mode": pl.Utf8,
        }


def transactions_to_frame(txns: Sequence[Transaction]) -> pl.DataFrame:
    """Build a Polars DataFrame from transaction records, preserving order.

    An empty sequence produces an empty frame with the full schema so that
    downstream group-bys never see missing columns.

    Args:
        txns: Transactions to convert.

    Returns:
        Polars DataFrame with one row per transaction.
    """
    return pl.DataFrame(
        {
            "id": [t.id for t in txns],
            "timestamp": [t.timestamp for t in txns],
            "month_index": [t.month_index for t in txns],
            "hour": [t.hour for t in txns],
            "weekday": [t.timestamp.weekday() for t in txns],
            "category": [t.category.value for t in txns],
            "merchant": [t.merchant for t in txns],
            "amount": [t.amount for t in txns],
            "status": [t.status.value for t in txns],
            "payment_mode": [t.payment_mode.value for t in txns],
        },
        schema=TransactionSchema.polars_schema(),
    )
