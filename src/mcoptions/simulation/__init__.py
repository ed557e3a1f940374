# src/mcoptions/simulation/__init__.py
"""
Random number and terminal-price simulation backends for Monte Carlo pricing.

Pipeline:
    XorShift32 -> BoxMullerSampler -> GBMSimulator
"""

from mcoptions.simulation.gaussian import BoxMullerSampler, box_muller, standard_normals
from mcoptions.simulation.gbm import GBMSimulator, simulate_terminal_prices
from mcoptions.simulation.gbm_numba import NUMBA_AVAILABLE, accumulate_payoffs_numba
from mcoptions.simulation.rng import (
    XorShift32,
    derive_seed,
    get_default_generator,
    seed_generator,
)

__all__ = [
    "XorShift32",
    "seed_generator",
    "get_default_generator",
    "derive_seed",
    "BoxMullerSampler",
    "box_muller",
    "standard_normals",
    "GBMSimulator",
    "simulate_terminal_prices",
    "accumulate_payoffs_numba",
    "NUMBA_AVAILABLE",
]
