"""Command-line parameter validation for the dashboard runner."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import date, datetime

from payment_dashboard.models.enums import StatusFilter


@dataclass
class ValidationError:
    """Represents a single validation failure.

    Attributes:
        field: Name of the invalid parameter.
        message: Human-readable error description.
    """

    field: str
    message: str


@dataclass
class ValidatedParams:
    """Validated and normalized run parameters.

    Attributes:
        count: Number of transactions to generate.
        start_date: First day of the one-year window.
        status: Status filter for the computed view.
        seed: Random seed (may be auto-generated).
    """

    count: int
    start_date: date
    status: StatusFilter
    seed: int


def validate_params(
    *,
    count: int,
    start_date: str | date,
    status: str | None,
    seed: int | None,
) -> ValidatedParams | list[ValidationError]:
    """Validate and normalize all run parameters.

    An unrecognized status is not an error: it falls back to ``All`` so the
    dashboard always renders.

    Args:
        count: Requested number of transactions.
        start_date: Start date string (YYYY-MM-DD) or date.
        status: Raw status filter value.
        seed: Random seed or None for auto-generated.

    Returns:
        ValidatedParams on success, or a list of ValidationError on failure.
    """
    errors: list[ValidationError] = []

    if count < 0:
        errors.append(ValidationError("count", f"Count must be >= 0, got {count}"))

    parsed_start: date | None = None
    if isinstance(start_date, date):
        parsed_start = start_date
    else:
        try:
            parsed_start = datetime.strptime(start_date, "%Y-%m-%d").date()
        except ValueError:
            errors.append(
                ValidationError(
                    "start_date",
                    f"Invalid date format '{start_date}', expected YYYY-MM-DD",
                )
            )

    if seed is not None and seed < 0:
        errors.append(ValidationError("seed", f"Seed must be >= 0, got {seed}"))

    if errors:
        return errors

    effective_seed = seed if seed is not None else secrets.randbelow(2**31)

    return ValidatedParams(
        count=count,
        start_date=parsed_start,  # type: ignore[arg-type]
        status=StatusFilter.parse(status),
        seed=effective_seed,
    )
