"""Status filter applied before every aggregation."""

from __future__ import annotations

from collections.abc import Sequence

from payment_dashboard.models.enums import StatusFilter
from payment_dashboard.models.transaction import Transaction


def filter_by_status(
    txns: Sequence[Transaction],
    status: StatusFilter | str | None,
) -> list[Transaction]:
    """Return the transactions matching a status filter, in original order.

    ``All`` (and any unrecognized value) keeps every transaction.

    Args:
        txns: Base dataset.
        status: Filter value from the presentation layer.

    Returns:
        New list; the input sequence is never modified.
    """
    selected = StatusFilter.parse(status)
    if selected is StatusFilter.ALL:
        return list(txns)
    return [t for t in txns if t.status.value == selected.value]
