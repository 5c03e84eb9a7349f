"""Synthetic payment transaction generator.

Draws timestamps uniformly over a one-year window, categories and
merchants uniformly from the reference tables, and integer amounts
uniformly from a bounded range, then labels each record with the fraud
heuristic. All randomness flows through one NumPy Generator, so a seed
reproduces the dataset exactly.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime, timedelta

from numpy.random import Generator

from payment_dashboard.generators.fraud_rules import FraudRule
from payment_dashboard.lib.logging_config import get_logger
from payment_dashboard.models.enums import Category, PaymentMode, Status
from payment_dashboard.models.merchant import select_merchant
from payment_dashboard.models.transaction import Transaction, format_transaction_id

logger = get_logger("transaction_generator")

DEFAULT_START_DATE = date(2024, 1, 1)
WINDOW_DAYS = 365
SECONDS_PER_DAY = 86_400
AMOUNT_MIN = 50
AMOUNT_MAX = 8000

CATEGORIES: tuple[Category, ...] = tuple(Category)
PAYMENT_MODES: tuple[PaymentMode, ...] = tuple(PaymentMode)


def generate_timestamps(
    rng: Generator,
    count: int,
    start_date: date,
) -> list[datetime]:
    """Generate timestamps uniformly within the 365-day window.

    Each timestamp is a whole-day offset in [0, 364] plus a second-of-day
    offset in [0, 86399], anchored at midnight of ``start_date``.

    Args:
        rng: NumPy random generator instance.
        count: Number of timestamps to generate.
        start_date: First day of the window.

    Returns:
        List of naive datetime objects, in draw order.
    """
    anchor = datetime(start_date.year, start_date.month, start_date.day)
    day_offsets = rng.integers(0, WINDOW_DAYS, size=count)
    second_offsets = rng.integers(0, SECONDS_PER_DAY, size=count)
    return [
        anchor + timedelta(days=int(d), seconds=int(s))
        for d, s in zip(day_offsets, second_offsets, strict=True)
    ]


def generate_transaction(
    rng: Generator,
    sequence: int,
    timestamp: datetime,
    *,
    fraud_rule: FraudRule,
    amount_min: int = AMOUNT_MIN,
    amount_max: int = AMOUNT_MAX,
) -> Transaction:
    """Generate one transaction at the given instant.

    Args:
        rng: NumPy random generator instance.
        sequence: 1-based sequence number used for the ID.
        timestamp: Instant of the transaction.
        fraud_rule: Heuristic that assigns the status.
        amount_min: Smallest amount (inclusive).
        amount_max: Largest amount (inclusive).

    Returns:
        A new Transaction.
    """
    category = CATEGORIES[int(rng.integers(0, len(CATEGORIES)))]
    merchant = select_merchant(rng, category)
    amount = int(rng.integers(amount_min, amount_max + 1))
    result = fraud_rule.evaluate(amount, timestamp.hour, rng)
    payment_mode = PAYMENT_MODES[int(rng.integers(0, len(PAYMENT_MODES)))]

    return Transaction(
        id=format_transaction_id(sequence),
        timestamp=timestamp,
        category=category,
        merchant=merchant,
        amount=amount,
        status=result.status,
        payment_mode=payment_mode,
    )


def generate_transactions(
    count: int,
    rng: Generator,
    *,
    start_date: date = DEFAULT_START_DATE,
    fraud_rule: FraudRule | None = None,
    amount_min: int = AMOUNT_MIN,
    amount_max: int = AMOUNT_MAX,
) -> list[Transaction]:
    """Generate the base dataset, sorted ascending by timestamp.

    IDs follow draw order, so after sorting they are unique but not
    necessarily increasing.

    Args:
        count: Number of transactions to generate.
        rng: NumPy random generator instance (seeded for reproducibility).
        start_date: First day of the one-year window.
        fraud_rule: Fraud heuristic thresholds. Defaults to FraudRule().
        amount_min: Smallest amount (inclusive).
        amount_max: Largest amount (inclusive).

    Returns:
        List of exactly ``count`` transactions.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        msg = f"Count must be >= 0, got {count}"
        raise ValueError(msg)

    rule = fraud_rule or FraudRule()

    if count == 0:
        logger.info("Generating 0 transactions, returning empty dataset")
        return []

    timestamps = generate_timestamps(rng, count, start_date)
    txns = [
        generate_transaction(
            rng,
            i + 1,
            ts,
            fraud_rule=rule,
            amount_min=amount_min,
            amount_max=amount_max,
        )
        for i, ts in enumerate(timestamps)
    ]
    txns.sort(key=lambda t: t.timestamp)

    statuses = Counter(t.status for t in txns)
    logger.info(
        "Generated %d transactions starting %s (%d flagged)",
        count,
        start_date.isoformat(),
        statuses[Status.FLAGGED],
    )
    return txns
