# tests/test_comparison.py
"""
Tests for the batch MC-vs-BS comparison report and the command line.
"""

import math
from pathlib import Path

import pandas as pd
import pytest

from mcoptions.common.config import DEFAULT_QUOTES_FILE
from mcoptions.data.quote_loader import OptionQuote, load_quotes
from mcoptions.reporting.cli import build_parser, main
from mcoptions.reporting.comparison import (
    RESULT_COLUMNS,
    classify_moneyness,
    compare_quote,
    format_report,
    percentage_error,
    run_comparison,
    summarize,
)
from mcoptions.simulation.rng import derive_seed

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def quotes():
    return [
        OptionQuote("AAPL", 189.50, 190.00, 0.053, 0.24, 30, 5.10),
        OptionQuote("MSFT", 415.20, 400.00, 0.053, 0.27, 45, None),
        OptionQuote("TSLA", 175.30, 200.00, 0.053, 0.58, 90, 12.40),
    ]


@pytest.fixture
def results_df():
    return pd.DataFrame(
        {
            "ticker": ["A", "B", "C", "D"],
            "moneyness": ["ATM", "ITM", "OTM", "ATM"],
            "spot": [100.0, 110.0, 90.0, 100.0],
            "strike": [100.0, 100.0, 100.0, 101.0],
            "volatility": [0.2, 0.2, 0.3, 0.25],
            "days_to_expiry": [30, 60, 90, 14],
            "mc_price": [10.05, 12.0, 3.0, 2.0],
            "bs_price": [10.0, 12.1, 2.95, 2.04],
            "mc_bs_error_pct": [0.5, -0.8, 1.5, -2.0],
            "market_price": [10.2, float("nan"), 3.1, float("nan")],
            "market_error_pct": [-1.5, float("nan"), -3.2, float("nan")],
        },
        columns=RESULT_COLUMNS,
    )


@pytest.fixture
def quotes_file(tmp_path):
    path = tmp_path / "quotes.csv"
    path.write_text(
        "# ticker,S0,K,r,sigma,days,market\n"
        "AAPL,189.50,190.00,0.053,0.24,30,5.10\n"
        "garbage line\n"
        "SPY,512.40,510.00,0.053,0.14,14\n"
    )
    return path


# =============================================================================
# Helpers
# =============================================================================


class TestHelpers:
    @pytest.mark.parametrize(
        "spot, strike, expected",
        [(103.0, 100.0, "ITM"), (97.0, 100.0, "OTM"), (100.0, 100.0, "ATM"), (101.0, 100.0, "ATM")],
    )
    def test_classify_moneyness(self, spot, strike, expected):
        assert classify_moneyness(spot, strike) == expected

    def test_percentage_error(self):
        assert percentage_error(11.0, 10.0) == pytest.approx(10.0)
        assert percentage_error(9.0, 10.0) == pytest.approx(-10.0)
        assert math.isnan(percentage_error(1.0, 0.0))


# =============================================================================
# Comparison
# =============================================================================


class TestComparison:
    def test_compare_quote_close_to_black_scholes(self, quotes):
        row = compare_quote(quotes[0], n_sim=50_000, seed=1)
        assert row["ticker"] == "AAPL"
        assert row["moneyness"] == "ATM"
        assert abs(row["mc_bs_error_pct"]) < 5.0
        assert row["market_price"] == 5.10
        assert math.isfinite(row["market_error_pct"])

    def test_compare_quote_without_market_price(self, quotes):
        row = compare_quote(quotes[1], n_sim=1000, seed=1)
        assert math.isnan(row["market_price"])
        assert math.isnan(row["market_error_pct"])

    def test_run_comparison_reproducible(self, quotes):
        first = run_comparison(quotes, n_sim=2000, base_seed=42)
        second = run_comparison(quotes, n_sim=2000, base_seed=42)
        pd.testing.assert_frame_equal(first, second)
        assert list(first.columns) == RESULT_COLUMNS
        assert len(first) == 3

    def test_records_use_derived_seeds(self, quotes):
        batch = run_comparison(quotes, n_sim=2000, base_seed=42)
        alone = compare_quote(quotes[2], n_sim=2000, seed=derive_seed(42, 2))
        assert batch.iloc[2]["mc_price"] == alone["mc_price"]

    def test_different_base_seed_changes_estimates(self, quotes):
        a = run_comparison(quotes, n_sim=2000, base_seed=1)
        b = run_comparison(quotes, n_sim=2000, base_seed=2)
        assert not a["mc_price"].equals(b["mc_price"])
        pd.testing.assert_series_equal(a["bs_price"], b["bs_price"])


class TestSummary:
    def test_summarize(self, results_df):
        summary = summarize(results_df)
        assert summary.total == 4
        assert summary.within_tolerance == 2
        assert summary.avg_abs_error_pct == pytest.approx(1.2)
        assert summary.within_tolerance_share == pytest.approx(50.0)

    def test_custom_tolerance(self, results_df):
        assert summarize(results_df, tolerance_pct=2.5).within_tolerance == 4

    def test_format_report(self, results_df):
        report = format_report(results_df)
        for ticker in ("A", "B", "C", "D"):
            assert f"| {ticker:<5} |" in report
        assert "N/A" in report
        assert "$10.20 (-1.5%)" in report
        assert "SUMMARY: 4 options tested" in report
        assert "2/4 (50.0%)" in report
        assert "Avg MC-BS error: 1.20%" in report

    def test_format_empty_report(self):
        empty = pd.DataFrame(columns=RESULT_COLUMNS)
        assert "No valid option data found." in format_report(empty)


# =============================================================================
# Command line
# =============================================================================


class TestCli:
    def test_price_command(self, capsys):
        assert main(["price", "--simulations", "20000", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert "European Call Option Pricing" in out
        assert "Monte Carlo Price" in out
        assert "Black-Scholes Price: $10.4506" in out

    def test_price_put_command(self, capsys):
        assert main(["price", "--put", "--simulations", "5000"]) == 0
        assert "European Put Option Pricing" in capsys.readouterr().out

    def test_price_invalid_input(self, capsys):
        assert main(["price", "--spot", "-1"]) == 2
        assert "Error" in capsys.readouterr().err

    def test_compare_command(self, quotes_file, capsys):
        assert main(["compare", str(quotes_file), "2000", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Seed: 3 (fixed)" in out
        assert "AAPL" in out and "SPY" in out
        assert "SUMMARY: 2 options tested" in out

    def test_compare_random_seed(self, quotes_file, capsys):
        assert main(["compare", str(quotes_file), "1000", "--random"]) == 0
        assert "(random)" in capsys.readouterr().out

    def test_compare_missing_file(self, tmp_path, capsys):
        assert main(["compare", str(tmp_path / "nope.csv")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_seed_and_random_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["compare", "x.csv", "--seed", "1", "--random"])

    def test_default_quotes_file_is_read_from_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert "tests" not in Path(DEFAULT_QUOTES_FILE).parts
        Path(DEFAULT_QUOTES_FILE).write_text("AAPL,189.50,190.00,0.053,0.24,30,5.10\n")
        args = build_parser().parse_args(["compare"])
        assert args.csv_file == DEFAULT_QUOTES_FILE
        assert load_quotes(args.csv_file)["ticker"].tolist() == ["AAPL"]
