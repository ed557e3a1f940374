# src/mcoptions/pricing_models/black_scholes.py

import logging
import math
from typing import Literal, Union

import numpy as np
from scipy.special import erf

from mcoptions.common.validation import validate_option_inputs, validate_option_type
from mcoptions.exceptions.pricing_exceptions import (
    DegenerateInputError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

__all__ = ["normal_cdf", "black_scholes", "price_call_bs", "price_put_bs"]

SQRT_2 = math.sqrt(2.0)


def normal_cdf(x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Standard normal CDF via Phi(x) = 0.5 * (1 + erf(x / sqrt(2)))."""
    result = 0.5 * (1.0 + erf(np.divide(x, SQRT_2)))
    return float(result) if np.ndim(result) == 0 else result


def _deterministic_price(
    S0: float, K: float, r: float, T: float, option_type: str
) -> float:
    # With no diffusion S_T = S0*e^{rT}; discounting gives max(S0 - K*e^{-rT}, 0)
    pv_K = K * math.exp(-r * T)
    if option_type == "call":
        return max(S0 - pv_K, 0.0)
    return max(pv_K - S0, 0.0)


def black_scholes(
    S0: float,
    K: float,
    r: float,
    sigma: float,
    T: float,
    option_type: Literal["call", "put"] = "call",
    on_degenerate: Literal["intrinsic", "raise"] = "intrinsic",
) -> float:
    """
    Black-Scholes price of a European option on a non-dividend stock.

    Parameters:
        S0: Spot price of the underlying asset
        K: Strike price
        r: Risk-free interest rate (continuously compounded)
        sigma: Volatility of the underlying asset
        T: Time to maturity (in years)
        option_type: "call" or "put"
        on_degenerate: What to do when sigma == 0 or T == 0, where d1/d2 are
            undefined. "intrinsic" returns the discounted deterministic
            payoff, "raise" raises DegenerateInputError.

    Returns:
        Option price (float)
    """
    validate_option_inputs(S0, K, r, sigma, T)
    validate_option_type(option_type)
    if on_degenerate not in ("intrinsic", "raise"):
        raise InvalidArgumentError("on_degenerate", on_degenerate, "'intrinsic' or 'raise'")

    sqrt_T = math.sqrt(T)
    vol_sqrt_T = sigma * sqrt_T
    if vol_sqrt_T == 0.0:
        if on_degenerate == "raise":
            raise DegenerateInputError(sigma, T)
        logger.debug(
            "Degenerate input sigma=%s T=%s; using deterministic payoff", sigma, T
        )
        return _deterministic_price(S0, K, r, T, option_type)

    d1 = (math.log(S0 / K) + (r + 0.5 * sigma * sigma) * T) / vol_sqrt_T
    d2 = d1 - vol_sqrt_T
    discount = math.exp(-r * T)

    if option_type == "call":
        return S0 * normal_cdf(d1) - K * discount * normal_cdf(d2)
    return K * discount * normal_cdf(-d2) - S0 * normal_cdf(-d1)


def price_call_bs(S0: float, K: float, r: float, sigma: float, T: float) -> float:
    """Closed-form European call, C = S0*N(d1) - K*e^{-rT}*N(d2)."""
    return black_scholes(S0, K, r, sigma, T, option_type="call")


def price_put_bs(S0: float, K: float, r: float, sigma: float, T: float) -> float:
    return black_scholes(S0, K, r, sigma, T, option_type="put")
