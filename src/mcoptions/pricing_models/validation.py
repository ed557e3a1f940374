# src/mcoptions/pricing_models/validation.py
"""
Option Pricing Validation Utilities.

Provides validation functions for ensuring pricing consistency:
- Put-Call Parity checks
- Arbitrage bounds validation
- Monte Carlo convergence tests

Usage:
    >>> from mcoptions.pricing_models.validation import validate_put_call_parity
    >>> is_valid, error = validate_put_call_parity(10.45, 5.57, S0=100, K=100, r=0.05, T=1.0)
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from mcoptions.simulation.rng import derive_seed


def validate_put_call_parity(
    call_price: float,
    put_price: float,
    S0: float,
    K: float,
    r: float,
    T: float,
    tolerance: float = 1e-4,
) -> Tuple[bool, float]:
    """
    Validate put-call parity for European options.

    C - P = S0 - K * exp(-rT)

    Returns:
        Tuple of (is_valid, absolute_error).
    """
    expected_diff = S0 - K * np.exp(-r * T)
    actual_diff = call_price - put_price
    error = float(abs(actual_diff - expected_diff))
    return error <= tolerance, error


def validate_arbitrage_bounds(
    price: float,
    S0: float,
    K: float,
    r: float,
    T: float,
    option_type: str,
) -> Tuple[bool, str]:
    """
    Check if option price satisfies no-arbitrage bounds.

    For calls: max(0, S0 - K*e^(-rT)) <= C <= S0
    For puts: max(0, K*e^(-rT) - S0) <= P <= K*e^(-rT)

    Returns:
        Tuple of (is_valid, violation_message).
    """
    pv_K = K * np.exp(-r * T)

    if option_type == "call":
        lower_bound = max(0.0, S0 - pv_K)
        upper_bound = S0
    else:
        lower_bound = max(0.0, pv_K - S0)
        upper_bound = pv_K

    label = option_type.capitalize()
    if price < lower_bound - 1e-6:
        return False, f"{label} price {price:.4f} below lower bound {lower_bound:.4f}"
    if price > upper_bound + 1e-6:
        return False, f"{label} price {price:.4f} above upper bound {upper_bound:.4f}"
    return True, "OK"


def monte_carlo_convergence_test(
    price_function: Callable[[int, int], float],
    reference_price: Optional[float] = None,
    n_trials: int = 10,
    base_sims: int = 10000,
    multipliers: Sequence[int] = (1, 4, 16),
    base_seed: int = 1,
) -> Dict:
    """
    Test Monte Carlo convergence by increasing simulation count.

    Args:
        price_function: Callable (num_simulations, seed) -> price.
        reference_price: Exact price; if None the trial mean is used.
        n_trials: Number of independently seeded trials at each count.
        base_sims: Starting simulation count.
        multipliers: Simulation counts are base_sims * multiplier.
        base_seed: Trial i uses derive_seed(base_seed, i) at every count.

    Returns:
        Dict with per-count statistics, the RMS errors, the 1/sqrt(N)
        prediction from the first count, and whether errors shrink.
    """
    results = {}
    sim_counts = [base_sims * m for m in multipliers]

    for n_sims in sim_counts:
        prices = np.array(
            [price_function(n_sims, derive_seed(base_seed, i)) for i in range(n_trials)]
        )
        center = prices.mean() if reference_price is None else reference_price
        results[n_sims] = {
            "mean": float(prices.mean()),
            "std": float(prices.std()),
            "rms_error": float(np.sqrt(np.mean((prices - center) ** 2))),
        }

    rms = [results[n]["rms_error"] for n in sim_counts]
    expected_rate = [rms[0] * np.sqrt(sim_counts[0] / n) for n in sim_counts]

    return {
        "results": results,
        "rms_errors": rms,
        "expected_rate": expected_rate,
        "converging": all(e2 <= e1 for e1, e2 in zip(rms[:-1], rms[1:])),
    }
