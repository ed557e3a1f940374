# src/mcoptions/simulation/gaussian.py
"""
Box-Muller standard normal sampling on top of a uniform generator.

Each normal consumes two uniforms (u1, u2) in that order:

    Z = sqrt(-2 ln u1) * cos(2 pi u2)

The paired sine variate is discarded unless ``cache_pair`` is enabled,
in which case it is returned by the following call.
"""

import math
from typing import Optional

import numpy as np

from mcoptions.simulation.rng import MIN_UNIFORM, XorShift32

__all__ = ["BoxMullerSampler", "box_muller", "standard_normals"]

TWO_PI = 2.0 * math.pi


class BoxMullerSampler:
    """Standard normal sampler driven by an explicit ``XorShift32``."""

    def __init__(self, generator: XorShift32, cache_pair: bool = False):
        self.generator = generator
        self.cache_pair = cache_pair
        self._cached: Optional[float] = None

    def next_standard_normal(self) -> float:
        if self._cached is not None:
            z, self._cached = self._cached, None
            return z

        u1 = max(self.generator.next_uniform(), MIN_UNIFORM)
        u2 = self.generator.next_uniform()
        radius = math.sqrt(-2.0 * math.log(u1))
        angle = TWO_PI * u2

        if self.cache_pair:
            self._cached = radius * math.sin(angle)
        return radius * math.cos(angle)

    def reset(self) -> None:
        """Drop any cached sine variate."""
        self._cached = None


def box_muller(u1: np.ndarray, u2: np.ndarray) -> np.ndarray:
    """Vectorised cosine branch of Box-Muller with the ``u1 > 0`` guard."""
    u1 = np.maximum(u1, MIN_UNIFORM)
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(TWO_PI * u2)


def standard_normals(generator: XorShift32, n: int) -> np.ndarray:
    """
    Draw ``n`` standard normals as an array.

    Uniforms are taken interleaved (u1, u2, u1, u2, ...), so the generator
    ends in the same state as after ``n`` scalar ``next_standard_normal``
    calls without pair caching.
    """
    u = generator.uniforms(2 * n)
    return box_muller(u[0::2], u[1::2])
