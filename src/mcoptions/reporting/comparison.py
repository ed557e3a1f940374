# src/mcoptions/reporting/comparison.py
"""
Batch comparison of Monte Carlo and Black-Scholes call prices.

Each quote gets its own generator seeded with derive_seed(base_seed, i),
so a report is reproducible for a fixed base seed and independent of how
many records precede a given one in the stream.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from mcoptions.common.config import DEFAULT_SEED, DEFAULT_TOLERANCE_PCT
from mcoptions.data.quote_loader import OptionQuote
from mcoptions.pricing_models.black_scholes import price_call_bs
from mcoptions.pricing_models.monte_carlo import MonteCarloPricer
from mcoptions.simulation.rng import XorShift32, derive_seed
from mcoptions.utils.decorators.timing import timeit

logger = logging.getLogger(__name__)

ITM_RATIO = 1.02
OTM_RATIO = 0.98

RESULT_COLUMNS = [
    "ticker",
    "moneyness",
    "spot",
    "strike",
    "volatility",
    "days_to_expiry",
    "mc_price",
    "bs_price",
    "mc_bs_error_pct",
    "market_price",
    "market_error_pct",
]

__all__ = [
    "ComparisonSummary",
    "classify_moneyness",
    "percentage_error",
    "compare_quote",
    "run_comparison",
    "summarize",
    "format_report",
]


@dataclass(frozen=True)
class ComparisonSummary:
    total: int
    within_tolerance: int
    avg_abs_error_pct: float
    tolerance_pct: float = DEFAULT_TOLERANCE_PCT

    @property
    def within_tolerance_share(self) -> float:
        return 100.0 * self.within_tolerance / self.total if self.total else 0.0


def classify_moneyness(spot: float, strike: float) -> str:
    ratio = spot / strike
    if ratio > ITM_RATIO:
        return "ITM"
    if ratio < OTM_RATIO:
        return "OTM"
    return "ATM"


def percentage_error(estimate: float, reference: float) -> float:
    """(estimate - reference) / reference * 100; NaN when the reference is zero."""
    if reference == 0:
        return math.nan
    return (estimate - reference) / reference * 100.0


def compare_quote(
    quote: OptionQuote,
    n_sim: int,
    seed: int,
    use_numba: bool = False,
) -> dict:
    """Price one quote both ways and return a result row."""
    S0, K, r, sigma, T = quote.to_params().as_tuple()

    pricer = MonteCarloPricer(n_sim, generator=XorShift32(seed), use_numba=use_numba)
    mc_price = pricer.price(S0, K, r, sigma, T, "call")
    bs_price = price_call_bs(S0, K, r, sigma, T)

    market_price = quote.market_price if quote.has_market_price else math.nan
    market_error = (
        percentage_error(mc_price, market_price) if quote.has_market_price else math.nan
    )

    return {
        "ticker": quote.ticker,
        "moneyness": classify_moneyness(S0, K),
        "spot": S0,
        "strike": K,
        "volatility": sigma,
        "days_to_expiry": quote.days_to_expiry,
        "mc_price": mc_price,
        "bs_price": bs_price,
        "mc_bs_error_pct": percentage_error(mc_price, bs_price),
        "market_price": market_price,
        "market_error_pct": market_error,
    }


@timeit
def run_comparison(
    quotes: Iterable[OptionQuote],
    n_sim: int,
    base_seed: int = DEFAULT_SEED,
    use_numba: bool = False,
) -> pd.DataFrame:
    rows = []
    for i, quote in enumerate(quotes):
        rows.append(compare_quote(quote, n_sim, derive_seed(base_seed, i), use_numba))
        logger.debug("Priced %s (record %d)", quote.ticker, i)
    logger.info("Compared %d quotes with %d simulations each", len(rows), n_sim)
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summarize(
    results: pd.DataFrame, tolerance_pct: float = DEFAULT_TOLERANCE_PCT
) -> ComparisonSummary:
    """Count of records with |MC-BS error| below tolerance and the mean absolute error."""
    errors = results["mc_bs_error_pct"].astype(float).abs()
    total = len(results)
    within = int((errors < tolerance_pct).sum())
    avg = float(errors.mean()) if total else math.nan
    return ComparisonSummary(
        total=total,
        within_tolerance=within,
        avg_abs_error_pct=avg,
        tolerance_pct=tolerance_pct,
    )


def _format_market(price: float, error_pct: float) -> str:
    if np.isnan(price):
        return "N/A"
    return f"${price:.2f} ({error_pct:+.1f}%)"


def format_report(results: pd.DataFrame, summary: Optional[ComparisonSummary] = None) -> str:
    """Fixed-width comparison table followed by a summary line."""
    if summary is None:
        summary = summarize(results)

    header = (
        f"| {'Stock':<5} | {'M':<3} | {'Price':>8} | {'Strike':>8} | {'Vol':>6} | "
        f"{'Exp':>4} | {'MC':>8} | {'BS':>8} | {'MC-BS':>7} | {'Market (error)':<18} |"
    )
    rule = "-" * len(header)
    lines = [rule, header, rule]

    for row in results.itertuples(index=False):
        lines.append(
            f"| {row.ticker:<5} | {row.moneyness:<3} | ${row.spot:7.2f} | ${row.strike:7.2f} | "
            f"{row.volatility * 100:5.1f}% | {row.days_to_expiry:3d}d | ${row.mc_price:7.2f} | "
            f"${row.bs_price:7.2f} | {row.mc_bs_error_pct:+6.2f}% | "
            f"{_format_market(row.market_price, row.market_error_pct):<18} |"
        )

    lines.append(rule)
    if summary.total:
        lines.append(
            f"SUMMARY: {summary.total} options tested | "
            f"MC within {summary.tolerance_pct:g}% of BS: {summary.within_tolerance}/{summary.total} "
            f"({summary.within_tolerance_share:.1f}%) | "
            f"Avg MC-BS error: {summary.avg_abs_error_pct:.2f}%"
        )
    else:
        lines.append("No valid option data found.")
    return "\n".join(lines)
