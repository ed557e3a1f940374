# src/mcoptions/simulation/gbm_numba.py
"""
Numba-JIT payoff accumulation.

Runs the whole xorshift32 -> Box-Muller -> GBM -> payoff loop in compiled
code and hands the final generator state back, so a run can continue on
the pure Python path with the same stream. Compiled lazily on first use.

Optimizations:
    - Single pass, O(1) memory
    - nogil=True so callers may run independent generators in threads
"""

import importlib.util
import math
from functools import lru_cache
from typing import Tuple

from mcoptions.simulation.rng import MAX_UNIFORM, MIN_UNIFORM, XorShift32

NUMBA_AVAILABLE = importlib.util.find_spec("numba") is not None

__all__ = ["NUMBA_AVAILABLE", "accumulate_payoffs_numba"]


@lru_cache(maxsize=None)
def _compile_kernel():
    from numba import njit

    @njit(nogil=True)
    def kernel(state, n_paths, S0, drift, vol, K, is_call, u_min, u_max):
        mask = 0xFFFFFFFF
        scale = 4294967295.0
        two_pi = 2.0 * math.pi

        x = state
        total = 0.0
        total_sq = 0.0
        for _ in range(n_paths):
            x ^= (x << 13) & mask
            x ^= x >> 17
            x ^= (x << 5) & mask
            u1 = u_max if x == mask else x / scale

            x ^= (x << 13) & mask
            x ^= x >> 17
            x ^= (x << 5) & mask
            u2 = u_max if x == mask else x / scale

            if u1 < u_min:
                u1 = u_min
            z = math.sqrt(-2.0 * math.log(u1)) * math.cos(two_pi * u2)
            s_t = S0 * math.exp(drift + vol * z)

            payoff = s_t - K if is_call else K - s_t
            if payoff < 0.0:
                payoff = 0.0
            total += payoff
            total_sq += payoff * payoff

        return total, total_sq, x

    return kernel


def accumulate_payoffs_numba(
    generator: XorShift32,
    S0: float,
    K: float,
    r: float,
    sigma: float,
    T: float,
    n_paths: int,
    option_type: str = "call",
) -> Tuple[float, float]:
    """
    Sum and sum of squares of undiscounted payoffs over ``n_paths`` draws.

    Advances ``generator`` exactly as the Python path would.
    """
    if not NUMBA_AVAILABLE:
        raise RuntimeError("Numba not available")

    kernel = _compile_kernel()
    drift = (r - 0.5 * sigma * sigma) * T
    vol = sigma * math.sqrt(T)

    total, total_sq, state = kernel(
        generator.state,
        n_paths,
        float(S0),
        drift,
        vol,
        float(K),
        option_type == "call",
        MIN_UNIFORM,
        MAX_UNIFORM,
    )
    generator.state = state
    return float(total), float(total_sq)
