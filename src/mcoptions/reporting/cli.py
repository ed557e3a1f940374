# src/mcoptions/reporting/cli.py
"""
Command line entry point.

    mcoptions price --spot 100 --strike 100 --rate 0.05 --volatility 0.2 --maturity 1
    mcoptions compare real_stocks.csv 500000 --seed 42
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from mcoptions.common.config import (
    DEFAULT_COMPARE_SIMULATIONS,
    DEFAULT_NUM_SIMULATIONS,
    DEFAULT_QUOTES_FILE,
    DEFAULT_SEED,
    DEFAULT_TOLERANCE_PCT,
    LOG_LEVEL,
)
from mcoptions.common.logging_config import setup_logging
from mcoptions.data.quote_loader import iter_quotes, load_quotes
from mcoptions.exceptions.data_exceptions import MissingDataError
from mcoptions.exceptions.pricing_exceptions import PricingError
from mcoptions.pricing_models.black_scholes import black_scholes
from mcoptions.pricing_models.monte_carlo import MonteCarloPricer
from mcoptions.reporting.comparison import (
    format_report,
    percentage_error,
    run_comparison,
    summarize,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcoptions",
        description="Monte Carlo vs Black-Scholes European option pricing",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    parser.add_argument(
        "--numba", action="store_true", help="Run the draw loop in a Numba kernel"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    price = sub.add_parser("price", help="Price a single option")
    price.add_argument("--spot", type=float, default=100.0, help="Initial stock price S0")
    price.add_argument("--strike", type=float, default=100.0, help="Strike price K")
    price.add_argument("--rate", type=float, default=0.05, help="Risk-free rate r")
    price.add_argument("--volatility", type=float, default=0.2, help="Volatility sigma")
    price.add_argument("--maturity", type=float, default=1.0, help="Time to expiry T in years")
    price.add_argument(
        "--simulations", type=int, default=DEFAULT_NUM_SIMULATIONS, help="Number of draws"
    )
    price.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Generator seed")
    price.add_argument("--put", action="store_true", help="Price a put instead of a call")

    compare = sub.add_parser("compare", help="Compare MC and BS over a quotes file")
    compare.add_argument("csv_file", nargs="?", default=DEFAULT_QUOTES_FILE)
    compare.add_argument(
        "n_sim", nargs="?", type=int, default=DEFAULT_COMPARE_SIMULATIONS,
        help="Simulations per option",
    )
    seeding = compare.add_mutually_exclusive_group()
    seeding.add_argument("-s", "--seed", type=int, default=42, help="Base seed")
    seeding.add_argument(
        "-r", "--random", action="store_true",
        help="Use a time-based seed (different results each run)",
    )
    return parser


def _run_price(args) -> int:
    option_type = "put" if args.put else "call"
    pricer = MonteCarloPricer(args.simulations, seed=args.seed, use_numba=args.numba)
    params = (args.spot, args.strike, args.rate, args.volatility, args.maturity)

    result = pricer.price_with_std_error(*params, option_type=option_type)
    bs_price = black_scholes(*params, option_type=option_type)
    error = result.price - bs_price
    error_pct = percentage_error(result.price, bs_price)

    print(f"=== European {option_type.capitalize()} Option Pricing ===")
    print("Parameters:")
    print(f"  S0 (Initial Price):  ${args.spot:.2f}")
    print(f"  K  (Strike Price):   ${args.strike:.2f}")
    print(f"  r  (Risk-free Rate): {args.rate * 100:.2f}%")
    print(f"  σ  (Volatility):     {args.volatility * 100:.2f}%")
    print(f"  T  (Time to Expiry): {args.maturity:.2f} years")
    print(f"  Simulations:         {args.simulations}")
    print(f"  Seed:                {args.seed}\n")
    print("Results:")
    print(f"  Monte Carlo Price:   ${result.price:.4f} (± {result.std_error:.4f})")
    print(f"  Black-Scholes Price: ${bs_price:.4f}")
    print(f"  Error:               ${error:.4f} ({error_pct:.2f}%)")

    if abs(error_pct) < DEFAULT_TOLERANCE_PCT:
        print(f"\nMonte Carlo result is within {DEFAULT_TOLERANCE_PCT:g}% of Black-Scholes")
    else:
        print("\nWARNING: Large discrepancy detected! Check for bugs.")
    return 0


def _run_compare(args) -> int:
    seed = int(time.time()) & 0xFFFFFFFF if args.random else args.seed
    try:
        quotes = load_quotes(args.csv_file)
    except MissingDataError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Usage: mcoptions compare [csv_file] [n_simulations] [--random|-r] [--seed|-s N]",
            file=sys.stderr,
        )
        return 1

    print(f"Loading options from: {args.csv_file}")
    print(f"Simulations per option: {args.n_sim}")
    print(f"Seed: {seed}{' (random)' if args.random else ' (fixed)'}")

    results = run_comparison(iter_quotes(quotes), args.n_sim, base_seed=seed, use_numba=args.numba)
    print(format_report(results, summarize(results)))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run from command line."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "price":
            return _run_price(args)
        return _run_compare(args)
    except PricingError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
