"""Shared test fixtures for the payment dashboard generator and aggregations."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import numpy as np
import pytest

from payment_dashboard.generators.transaction_generator import generate_transactions
from payment_dashboard.models.enums import Category, PaymentMode, Status
from payment_dashboard.models.merchant import merchants_for
from payment_dashboard.models.transaction import Transaction, format_transaction_id

# ---------------------------------------------------------------------------
# Generator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def default_seed() -> int:
    """Provide a deterministic seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(default_seed: int) -> np.random.Generator:
    """Provide a seeded NumPy random generator."""
    return np.random.default_rng(default_seed)


@pytest.fixture
def small_count() -> int:
    """Provide a small record count for fast test execution."""
    return 500


@pytest.fixture
def dataset(default_seed: int, small_count: int) -> list[Transaction]:
    """Provide a seeded synthetic dataset of ``small_count`` transactions."""
    return generate_transactions(small_count, np.random.default_rng(default_seed))


@pytest.fixture
def config_dir() -> Path:
    """Provide the repository's config directory."""
    return Path(__file__).resolve().parent.parent / "config"


# ---------------------------------------------------------------------------
# Hand-built transactions
# ---------------------------------------------------------------------------


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Provide a factory for hand-built transactions with sensible defaults.

    The merchant defaults to the first merchant registered for the
    category; IDs are sequential per test.

    Returns:
        Factory accepting keyword overrides.
    """
    sequence = itertools.count(1)

    def _make(
        *,
        amount: int = 100,
        category: Category = Category.SHOPPING,
        merchant: str | None = None,
        timestamp: datetime | None = None,
        hour: int = 12,
        status: Status = Status.SUCCESS,
        payment_mode: PaymentMode = PaymentMode.UPI_ID,
    ) -> Transaction:
        return Transaction(
            id=format_transaction_id(next(sequence)),
            timestamp=timestamp or datetime(2024, 1, 1, hour),
            category=category,
            merchant=merchant or merchants_for(category)[0],
            amount=amount,
            status=status,
            payment_mode=payment_mode,
        )

    return _make
