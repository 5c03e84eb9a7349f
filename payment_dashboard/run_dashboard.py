"""Payment Dashboard Report.

Generates the synthetic payment dataset, applies a status filter, and
prints every chart aggregation and KPI as JSON to stdout. Nothing is
written to disk; each run builds a fresh dataset.

Usage:
    payment-dashboard [OPTIONS]

Examples:
    payment-dashboard
    payment-dashboard --count 1000 --seed 42
    payment-dashboard --status Flagged --config config/dashboard.yaml
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

import numpy as np

from payment_dashboard.analytics.view import build_view
from payment_dashboard.generators.transaction_generator import generate_transactions
from payment_dashboard.lib.config_loader import load_dashboard_config
from payment_dashboard.lib.logging_config import ReportMetadata, setup_logging
from payment_dashboard.lib.validators import validate_params
from payment_dashboard.models.enums import StatusFilter


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for a dashboard run.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Compute payment dashboard aggregations over synthetic data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  payment-dashboard\n"
            "  payment-dashboard --count 1000 --seed 42\n"
            "  payment-dashboard --status Flagged\n"
        ),
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of transactions to generate (default: from config, 500)",
    )
    parser.add_argument(
        "--start-date",
        type=str,
        default=None,
        help="First day of the one-year window, YYYY-MM-DD (default: 2024-01-01)",
    )
    parser.add_argument(
        "--status",
        type=str,
        default=StatusFilter.ALL.value,
        help="Status filter: All, Success, or Flagged (default: All)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible generation (default: random)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: built-in settings)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level for stderr output (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for a dashboard run.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        config = load_dashboard_config(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    result = validate_params(
        count=args.count if args.count is not None else config.count,
        start_date=args.start_date if args.start_date is not None else config.start_date,
        status=args.status,
        seed=args.seed if args.seed is not None else config.seed,
    )

    if isinstance(result, list):
        for error in result:
            logger.error("Validation error [%s]: %s", error.field, error.message)
        return 1

    params = result
    start_time = time.monotonic()

    try:
        dataset = generate_transactions(
            params.count,
            np.random.default_rng(params.seed),
            start_date=params.start_date,
            fraud_rule=config.fraud,
            amount_min=config.amount_min,
            amount_max=config.amount_max,
        )
        view = build_view(
            dataset,
            params.status,
            top_merchant_limit=config.top_merchants,
            flagged_preview_limit=config.flagged_preview,
            data_preview_limit=config.data_preview,
        )
    except Exception:
        logger.exception("Dashboard computation failed")
        return 1

    metadata = ReportMetadata(
        records_generated=len(dataset),
        seed=params.seed,
        start_date=params.start_date.isoformat(),
        status_filter=view.status_filter.value,
        duration_seconds=round(time.monotonic() - start_time, 3),
    )
    print(json.dumps({"metadata": metadata.to_dict(), "dashboard": view.to_dict()}, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
