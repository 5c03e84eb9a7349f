"""YAML config loader for the dataset generator and dashboard views.

Loads configuration from YAML, merges it over built-in defaults,
validates ranges, and materializes a frozen DashboardConfig.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from payment_dashboard.generators.fraud_rules import FraudRule
from payment_dashboard.lib.logging_config import get_logger

logger = get_logger("config_loader")

DEFAULTS: dict[str, dict[str, Any]] = {
    "generator": {
        "count": 500,
        "start_date": "2024-01-01",
        "seed": None,
        "amount_min": 50,
        "amount_max": 8000,
    },
    "fraud": {
        "odd_hour_amount": 6000,
        "odd_hour_cutoff": 5,
        "high_amount": 7000,
        "high_amount_probability": 0.3,
    },
    "views": {
        "top_merchants": 10,
        "flagged_preview": 15,
        "data_preview": 50,
    },
}


@dataclass(frozen=True)
class DashboardConfig:
    """Validated settings for one dashboard process.

    Attributes:
        count: Number of transactions to generate.
        start_date: First day of the 365-day window.
        seed: Random seed, or None for a fresh random dataset.
        amount_min: Smallest generated amount (inclusive).
        amount_max: Largest generated amount (inclusive).
        fraud: Fraud heuristic thresholds.
        top_merchants: Length of the top-merchant ranking.
        flagged_preview: Rows in the flagged-transactions table.
        data_preview: Rows in the raw data table.
    """

    count: int = 500
    start_date: date = date(2024, 1, 1)
    seed: int | None = None
    amount_min: int = 50
    amount_max: int = 8000
    fraud: FraudRule = FraudRule()
    top_merchants: int = 10
    flagged_preview: int = 15
    data_preview: int = 50

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> DashboardConfig:
        """Build a DashboardConfig from a validated config dictionary.

        Args:
            config: Dictionary with generator, fraud, and views sections.

        Returns:
            Frozen DashboardConfig instance.
        """
        gen = config["generator"]
        fraud = config["fraud"]
        views = config["views"]
        return cls(
            count=gen["count"],
            start_date=_parse_date(gen["start_date"]),
            seed=gen["seed"],
            amount_min=gen["amount_min"],
            amount_max=gen["amount_max"],
            fraud=FraudRule(
                odd_hour_amount=fraud["odd_hour_amount"],
                odd_hour_cutoff=fraud["odd_hour_cutoff"],
                high_amount=fraud["high_amount"],
                high_amount_probability=float(fraud["high_amount_probability"]),
            ),
            top_merchants=views["top_merchants"],
            flagged_preview=views["flagged_preview"],
            data_preview=views["data_preview"],
        )


def _parse_date(value: str | date) -> date:
    # PyYAML already turns unquoted ISO dates into date objects
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def merge_defaults(user_config: dict[str, Any] | None) -> dict[str, Any]:
    """Shallow-merge each known section of a user config over the defaults.

    Args:
        user_config: Parsed YAML mapping, or None for an empty file.

    Returns:
        New dictionary containing every default key.
    """
    merged = copy.deepcopy(DEFAULTS)
    for section, values in (user_config or {}).items():
        if section not in merged:
            logger.warning("Ignoring unknown config section %r", section)
        elif isinstance(values, dict):
            merged[section].update(values)
    return merged


def load_config(config_path: Path) -> dict[str, Any]:
    """Load, merge, and validate configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Parsed configuration dictionary with defaults filled in.

    Raises:
        FileNotFoundError: If config file does not exist.
        ValueError: If config values are out of valid range.
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    with open(config_path) as f:
        config = merge_defaults(yaml.safe_load(f))

    _validate_config(config)
    logger.debug("Config loaded from %s", config_path)
    return config


def load_dashboard_config(config_path: Path | None = None) -> DashboardConfig:
    """Load a DashboardConfig, using built-in defaults when no file is given.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Validated DashboardConfig.
    """
    if config_path is None:
        config = merge_defaults(None)
        _validate_config(config)
        return DashboardConfig.from_dict(config)
    return DashboardConfig.from_dict(load_config(config_path))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_config(config: dict[str, Any]) -> None:
    """Validate configuration values.

    Args:
        config: Configuration dictionary to validate.

    Raises:
        ValueError: If any config value is invalid.
    """
    gen = config["generator"]
    fraud = config["fraud"]
    views = config["views"]

    count = gen["count"]
    if not _is_int(count) or count < 0:
        msg = f"count must be a non-negative integer, got {count!r}"
        raise ValueError(msg)

    try:
        _parse_date(gen["start_date"])
    except (TypeError, ValueError) as exc:
        msg = f"start_date must be YYYY-MM-DD, got {gen['start_date']!r}"
        raise ValueError(msg) from exc

    seed = gen["seed"]
    if seed is not None and (not _is_int(seed) or seed < 0):
        msg = f"seed must be a non-negative integer or null, got {seed!r}"
        raise ValueError(msg)

    amount_min, amount_max = gen["amount_min"], gen["amount_max"]
    if not (_is_int(amount_min) and _is_int(amount_max)) or not 0 < amount_min <= amount_max:
        msg = f"amount range must satisfy 0 < amount_min <= amount_max, got [{amount_min!r}, {amount_max!r}]"
        raise ValueError(msg)

    for key in ("odd_hour_amount", "high_amount"):
        if not _is_int(fraud[key]) or fraud[key] < 0:
            msg = f"fraud {key} must be a non-negative integer, got {fraud[key]!r}"
            raise ValueError(msg)

    cutoff = fraud["odd_hour_cutoff"]
    if not _is_int(cutoff) or not 0 <= cutoff <= 24:
        msg = f"fraud odd_hour_cutoff must be between 0 and 24, got {cutoff!r}"
        raise ValueError(msg)

    probability = fraud["high_amount_probability"]
    if isinstance(probability, bool) or not isinstance(probability, (int, float)) or not 0 <= probability <= 1:
        msg = f"fraud high_amount_probability must be between 0 and 1, got {probability!r}"
        raise ValueError(msg)

    for key, limit in views.items():
        if not _is_int(limit) or limit < 0:
            msg = f"views {key} must be a non-negative integer, got {limit!r}"
            raise ValueError(msg)
