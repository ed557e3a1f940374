# src/mcoptions/common/validation.py

import math
import numbers
from typing import List

import pandas as pd

from mcoptions.exceptions.pricing_exceptions import InvalidArgumentError

OPTION_TYPES = ("call", "put")


def validate_option_inputs(S0: float, K: float, r: float, sigma: float, T: float) -> None:
    """Reject inputs outside the Black-Scholes domain. Never clamps."""
    for name, value in (("S0", S0), ("K", K), ("r", r), ("sigma", sigma), ("T", T)):
        if not isinstance(value, numbers.Real) or not math.isfinite(value):
            raise InvalidArgumentError(name, value, "a finite real number")
    if S0 <= 0:
        raise InvalidArgumentError("S0", S0, "positive")
    if K <= 0:
        raise InvalidArgumentError("K", K, "positive")
    if sigma < 0:
        raise InvalidArgumentError("sigma", sigma, "non-negative")
    if T < 0:
        raise InvalidArgumentError("T", T, "non-negative")


def validate_num_simulations(n_sim) -> int:
    if isinstance(n_sim, bool) or not isinstance(n_sim, numbers.Integral):
        raise InvalidArgumentError("n_sim", n_sim, "an integer")
    if n_sim < 1:
        raise InvalidArgumentError("n_sim", n_sim, "at least 1")
    return int(n_sim)


def validate_option_type(option_type: str) -> str:
    if option_type not in OPTION_TYPES:
        raise InvalidArgumentError("option_type", option_type, "'call' or 'put'")
    return option_type


def check_required_columns(df: pd.DataFrame, required_columns: List[str]) -> None:
    missing = set(required_columns) - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")
