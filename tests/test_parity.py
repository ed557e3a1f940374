import numpy as np
import pytest

from mcoptions.pricing_models.black_scholes import black_scholes
from mcoptions.pricing_models.monte_carlo import MonteCarloPricer
from mcoptions.pricing_models.validation import (
    validate_arbitrage_bounds,
    validate_put_call_parity,
)


@pytest.mark.parametrize(
    "S0, K, r, sigma, T",
    [
        (100, 100, 0.05, 0.2, 1.0),  # ATM
        (110, 100, 0.02, 0.3, 0.5),  # ITM Call
        (90, 100, 0.05, 0.15, 2.0),  # OTM Call
        (100, 100, 0.05, 0.0, 1.0),  # Deterministic
    ],
)
def test_put_call_parity(S0, K, r, sigma, T):
    """
    Verifies C - P = S0 - K * exp(-rT)
    """
    call_price = black_scholes(S0, K, r, sigma, T, option_type="call")
    put_price = black_scholes(S0, K, r, sigma, T, option_type="put")

    lhs = call_price - put_price
    rhs = S0 - K * np.exp(-r * T)

    # Floating point arithmetic requires a small tolerance
    assert np.isclose(lhs, rhs, atol=1e-5), f"Parity violated: {lhs} != {rhs}"

    is_valid, error = validate_put_call_parity(call_price, put_price, S0, K, r, T)
    assert is_valid
    assert error < 1e-5


def test_monte_carlo_parity_with_shared_stream():
    # Same seed => same terminal prices; C - P = e^{-rT} * mean(S_T - K)
    S0, K, r, sigma, T = 100.0, 105.0, 0.05, 0.25, 1.0
    call = MonteCarloPricer(200_000, seed=9).price(S0, K, r, sigma, T, "call")
    put = MonteCarloPricer(200_000, seed=9).price(S0, K, r, sigma, T, "put")

    is_valid, error = validate_put_call_parity(call, put, S0, K, r, T, tolerance=0.3)
    assert is_valid, f"MC parity error {error}"


def test_parity_violation_detected():
    is_valid, error = validate_put_call_parity(12.0, 5.0, 100, 100, 0.05, 1.0)
    assert not is_valid
    assert error > 1.0


class TestArbitrageBounds:
    def test_black_scholes_within_bounds(self):
        for option_type in ("call", "put"):
            price = black_scholes(100, 95, 0.05, 0.3, 0.75, option_type=option_type)
            ok, msg = validate_arbitrage_bounds(price, 100, 95, 0.05, 0.75, option_type)
            assert ok, msg

    def test_call_above_spot_flagged(self):
        ok, msg = validate_arbitrage_bounds(120.0, 100, 95, 0.05, 1.0, "call")
        assert not ok
        assert "above upper bound" in msg

    def test_put_below_intrinsic_flagged(self):
        ok, msg = validate_arbitrage_bounds(0.0, 50, 100, 0.0, 1.0, "put")
        assert not ok
        assert "below lower bound" in msg
