"""Tests for scripts/income_tracker.py — argument validation and commands."""
import sys
from pathlib import Path
from unittest import mock

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from portfolio.holdings.storage import HoldingStore
from scripts.income_tracker import main


@pytest.fixture(autouse=True)
def no_profile_client():
    with mock.patch("portfolio.holdings.names.default_client", return_value=None):
        yield


@pytest.fixture
def holdings_file(tmp_path):
    return tmp_path / "holdings.json"


def _run(holdings_file, *argv):
    return main(["--file", str(holdings_file), *argv])


def test_add_with_table_name(holdings_file, capsys):
    assert _run(holdings_file, "add", "7203", "100", "75") == 0
    out = capsys.readouterr().out
    assert "トヨタ自動車" in out
    assert "¥7,500" in out
    [h] = HoldingStore(holdings_file).load()
    assert h.display_name == "トヨタ自動車"


def test_add_updates_existing(holdings_file):
    _run(holdings_file, "add", "ko", "10", "1.5", "--name", "Coca-Cola")
    _run(holdings_file, "add", "KO", "20", "1.6")
    [h] = HoldingStore(holdings_file).load()
    assert h.quantity == 20
    assert h.current_rate == 1.6
    assert len(h.history) == 2


@pytest.mark.parametrize("argv", [
    ["add", "  ", "10", "1"],
    ["add", "KO", "ten", "1"],
    ["add", "KO", "10", "abc"],
    ["add", "KO", "10", "nan"],
    ["add", "KO", "10", "inf"],
    ["add", "KO", "10", "1e309"],
    ["add", "KO", "infinity", "1"],
])
def test_add_rejects_invalid_input(holdings_file, capsys, argv):
    assert _run(holdings_file, *argv) == 1
    assert "Error:" in capsys.readouterr().out
    assert not holdings_file.exists()


def test_infinite_rate_keeps_store_readable(holdings_file, capsys):
    _run(holdings_file, "add", "KO", "10", "1.5")
    assert _run(holdings_file, "add", "KO", "10", "inf") == 1
    [h] = HoldingStore(holdings_file).load()
    assert h.current_rate == 1.5
    capsys.readouterr()

    assert _run(holdings_file, "list") == 0
    assert _run(holdings_file, "trend") == 0
    assert "¥15" in capsys.readouterr().out


def test_add_rejects_negative(holdings_file, capsys):
    assert _run(holdings_file, "add", "KO", "10", "-1") == 1
    assert "non-negative" in capsys.readouterr().out


def test_remove(holdings_file, capsys):
    _run(holdings_file, "add", "A", "10", "100")
    _run(holdings_file, "add", "B", "5", "200")
    a = HoldingStore(holdings_file).load()[0]
    capsys.readouterr()

    assert _run(holdings_file, "remove", a.id) == 0
    assert [h.ticker for h in HoldingStore(holdings_file).load()] == ["B"]
    assert "¥1,000" in capsys.readouterr().out


def test_remove_unknown(holdings_file):
    _run(holdings_file, "add", "A", "10", "100")
    assert _run(holdings_file, "remove", "nope") == 0
    assert len(HoldingStore(holdings_file).load()) == 1


def test_list_empty(holdings_file, capsys):
    assert _run(holdings_file, "list") == 0
    assert "No holdings tracked." in capsys.readouterr().out


def test_trend(holdings_file, capsys):
    _run(holdings_file, "add", "A", "10", "100")
    capsys.readouterr()
    assert _run(holdings_file, "trend") == 0
    out = capsys.readouterr().out
    assert "# Dividend Income Trend" in out
    assert "¥1,000" in out


def test_lookup(holdings_file, capsys):
    assert _run(holdings_file, "lookup", "9432") == 0
    assert "日本電信電話" in capsys.readouterr().out
    assert _run(holdings_file, "lookup", "ZZZZ") == 1
