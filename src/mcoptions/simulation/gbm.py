# src/mcoptions/simulation/gbm.py
"""
Terminal-price GBM under the risk-neutral measure.

Uses the exact solution, no time stepping:
    S_T = S0 * exp((r - 0.5*sigma^2)*T + sigma*sqrt(T)*Z)

The -0.5*sigma^2 term is the Ito correction that keeps E[S_T] = S0*e^{rT}.
"""

import math

import numpy as np

from mcoptions.simulation.gaussian import BoxMullerSampler, standard_normals
from mcoptions.simulation.rng import XorShift32

__all__ = ["GBMSimulator", "simulate_terminal_prices"]


class GBMSimulator:
    """Draws single terminal prices from a ``BoxMullerSampler``."""

    def __init__(self, sampler: BoxMullerSampler):
        self.sampler = sampler

    @classmethod
    def from_generator(cls, generator: XorShift32) -> "GBMSimulator":
        return cls(BoxMullerSampler(generator))

    def terminal_price(self, S0: float, r: float, sigma: float, T: float) -> float:
        z = self.sampler.next_standard_normal()
        return S0 * math.exp((r - 0.5 * sigma * sigma) * T + sigma * math.sqrt(T) * z)


def simulate_terminal_prices(
    generator: XorShift32,
    S0: float,
    r: float,
    sigma: float,
    T: float,
    n_paths: int,
) -> np.ndarray:
    """Vectorised block of ``n_paths`` terminal prices, same stream order as the scalar path."""
    drift = (r - 0.5 * sigma * sigma) * T
    vol = sigma * math.sqrt(T)

    z = standard_normals(generator, n_paths)
    return S0 * np.exp(drift + vol * z)
