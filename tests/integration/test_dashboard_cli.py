"""Integration tests for the end-to-end dashboard run."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from payment_dashboard.run_dashboard import main


def _run(capsys: pytest.CaptureFixture[str], argv: list[str]) -> tuple[int, dict]:
    exit_code = main(argv)
    out = capsys.readouterr().out
    return exit_code, json.loads(out) if exit_code == 0 else {}


class TestDashboardRun:
    """Tests for the complete generate, filter, and aggregate run."""

    def test_generates_requested_count(self, capsys) -> None:
        """The report describes exactly the requested number of records."""
        exit_code, report = _run(capsys, ["--count", "300", "--seed", "42"])
        assert exit_code == 0
        assert report["metadata"]["records_generated"] == 300
        assert report["metadata"]["seed"] == 42
        assert report["dashboard"]["summary"]["transaction_count"] == 300

    def test_report_shapes(self, capsys) -> None:
        """Fixed-shape charts are always complete."""
        _, report = _run(capsys, ["--count", "200", "--seed", "1"])
        dashboard = report["dashboard"]
        assert len(dashboard["hourly"]) == 24
        assert [w["day"] for w in dashboard["weekly"]] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert len(dashboard["top_merchants"]) == 10
        assert len(dashboard["data_preview"]) == 50

    def test_flagged_filter(self, capsys) -> None:
        """The Flagged filter narrows tables and charts, not the fraud rate."""
        _, all_report = _run(capsys, ["--count", "500", "--seed", "42"])
        _, flagged_report = _run(capsys, ["--count", "500", "--seed", "42", "--status", "Flagged"])
        flagged = flagged_report["dashboard"]
        assert flagged["status_filter"] == "Flagged"
        assert all(row["status"] == "Flagged" for row in flagged["data_preview"])
        assert flagged["summary"]["fraud_rate"] == all_report["dashboard"]["summary"]["fraud_rate"]
        assert flagged["summary"]["transaction_count"] == flagged["summary"]["flagged_count"]

    def test_unknown_status_fails_open(self, capsys) -> None:
        """A malformed status still renders the All view."""
        exit_code, report = _run(capsys, ["--count", "50", "--seed", "3", "--status", "Nope"])
        assert exit_code == 0
        assert report["dashboard"]["status_filter"] == "All"
        assert report["metadata"]["status_filter"] == "All"

    def test_same_seed_same_report(self, capsys) -> None:
        """A fixed seed reproduces the dashboard content."""
        _, r1 = _run(capsys, ["--count", "250", "--seed", "9"])
        _, r2 = _run(capsys, ["--count", "250", "--seed", "9"])
        assert r1["dashboard"] == r2["dashboard"]

    def test_zero_count(self, capsys) -> None:
        """Zero records produces an empty but well-formed report."""
        exit_code, report = _run(capsys, ["--count", "0", "--seed", "1"])
        assert exit_code == 0
        dashboard = report["dashboard"]
        assert dashboard["monthly"] == []
        assert len(dashboard["hourly"]) == 24
        assert dashboard["summary"]["average_transaction"] == 0.0
        assert dashboard["summary"]["top_category"] == "-"

    def test_config_file_values(self, capsys, tmp_path: Path) -> None:
        """Config file settings apply when no flag overrides them."""
        path = tmp_path / "dashboard.yaml"
        path.write_text(
            "generator:\n"
            "  count: 80\n"
            "  seed: 5\n"
            "views:\n"
            "  top_merchants: 3\n"
            "  data_preview: 10\n"
        )
        _, report = _run(capsys, ["--config", str(path)])
        assert report["metadata"]["records_generated"] == 80
        assert report["metadata"]["seed"] == 5
        assert len(report["dashboard"]["top_merchants"]) == 3
        assert len(report["dashboard"]["data_preview"]) == 10

    def test_flags_override_config(self, capsys, tmp_path: Path) -> None:
        """Command-line flags take precedence over the config file."""
        path = tmp_path / "dashboard.yaml"
        path.write_text("generator:\n  count: 80\n")
        _, report = _run(capsys, ["--config", str(path), "--count", "20", "--seed", "2"])
        assert report["metadata"]["records_generated"] == 20


class TestDashboardRunErrors:
    """Tests for invalid input handling."""

    def test_negative_count_exits_1(self, capsys) -> None:
        """Validation errors return exit code 1 and print no report."""
        assert main(["--count", "-1"]) == 1
        assert capsys.readouterr().out == ""

    def test_bad_start_date_exits_1(self, capsys) -> None:
        """A malformed start date is a validation error."""
        assert main(["--start-date", "Jan 1 2024"]) == 1
        assert "start_date" in capsys.readouterr().err

    def test_missing_config_exits_1(self, tmp_path: Path) -> None:
        """A missing config file is reported, not raised."""
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1

    def test_invalid_config_exits_1(self, tmp_path: Path) -> None:
        """An out-of-range config value is reported, not raised."""
        path = tmp_path / "bad.yaml"
        path.write_text("fraud:\n  high_amount_probability: 2\n")
        assert main(["--config", str(path)]) == 1
