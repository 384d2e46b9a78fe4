"""Tests for main module."""

import json
from datetime import timedelta
from pathlib import Path

import pytest

from time_debt.domain.debt import Goal, GoalReport
from time_debt.main import main, render_report


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch) -> None:
    for name in ("DAILY_MAX", "TIMEZONE", "SNAPSHOT_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_main_prints_report(snapshot_path: Path, capsys) -> None:
    main([str(snapshot_path), "--today", "2000-01-10"])

    captured = capsys.readouterr()
    assert "Time Debt" in captured.out
    assert "Total debt: 2:00:00" in captured.out
    assert "Example Project  6:00:00" in captured.out


def test_main_prints_status_json(snapshot_path: Path, capsys) -> None:
    main(
        [str(snapshot_path), "--today", "2000-01-10", "--daily-max", "5:00", "--json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "total_debt": 18000,
        "daily_max": 18000,
        "goals": [{"name": "Example Project", "time": 21600}],
    }


def test_main_rejects_malformed_daily_max(snapshot_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(snapshot_path), "--daily-max", "lots"])

    assert excinfo.value.code == 2


def test_render_report_without_projects() -> None:
    assert render_report(None) == "Time Debt\nNo projects configured."


def test_render_report_aligns_names() -> None:
    report = GoalReport(
        goals=[
            Goal(name="Art", time=timedelta(minutes=5)),
            Goal(name="Physics", time=-timedelta(hours=1)),
        ],
        total_debt=timedelta(0),
    )

    assert render_report(report).splitlines() == [
        "Time Debt",
        "Total debt: 0:00:00",
        "  Art      0:05:00",
        "  Physics  -1:00:00",
    ]


def test_main_rejects_unknown_timezone(snapshot_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(snapshot_path), "--timezone", "Bad/Zone"])

    assert excinfo.value.code == 2
