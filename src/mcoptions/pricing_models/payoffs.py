# src/mcoptions/pricing_models/payoffs.py
"""European exercise values at expiry. Scalars or NumPy arrays."""

from typing import Callable, Union

import numpy as np

from mcoptions.common.validation import validate_option_type

ArrayLike = Union[float, np.ndarray]

__all__ = ["call_payoff", "put_payoff", "get_payoff"]


def call_payoff(S: ArrayLike, K: ArrayLike) -> ArrayLike:
    """max(S - K, 0)"""
    if np.ndim(S) or np.ndim(K):
        return np.maximum(np.subtract(S, K), 0.0)
    return float(S - K) if S > K else 0.0


def put_payoff(S: ArrayLike, K: ArrayLike) -> ArrayLike:
    """max(K - S, 0)"""
    if np.ndim(S) or np.ndim(K):
        return np.maximum(np.subtract(K, S), 0.0)
    return float(K - S) if K > S else 0.0


def get_payoff(option_type: str) -> Callable[[ArrayLike, ArrayLike], ArrayLike]:
    validate_option_type(option_type)
    return call_payoff if option_type == "call" else put_payoff
