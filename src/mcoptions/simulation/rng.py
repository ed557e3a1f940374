# src/mcoptions/simulation/rng.py
"""
Xorshift32 uniform generator.

A single 32-bit word of state is advanced by three xor-shift steps
(<<13, >>17, <<5) per draw, giving a full period of 2^32 - 1 over the
nonzero states. Zero is absorbing, so seeding with 0 substitutes 1.

Generators are plain objects: pass one explicitly into the samplers to
isolate a run. A module-level default instance backs the procedural
``seed_generator`` interface.

Usage:
    >>> gen = XorShift32(42)
    >>> u = gen.next_uniform()
    >>> block = gen.uniforms(1024)
"""

import numpy as np

from mcoptions.common.config import DEFAULT_SEED

__all__ = [
    "XorShift32",
    "UINT32_MAX",
    "MAX_UNIFORM",
    "MIN_UNIFORM",
    "seed_generator",
    "get_default_generator",
    "derive_seed",
]

UINT32_MASK = 0xFFFFFFFF
UINT32_MAX = 4294967295.0

# x / (2^32 - 1) reaches 1.0 for the single raw value 2^32 - 1
MAX_UNIFORM = float(np.nextafter(1.0, 0.0))
MIN_UNIFORM = 1.0 / UINT32_MAX


def _coerce_seed(value: int) -> int:
    value = int(value) & UINT32_MASK
    return value if value != 0 else 1


class XorShift32:
    """Marsaglia xorshift32 pseudo-random generator (not cryptographic)."""

    __slots__ = ("_state",)

    def __init__(self, seed: int = DEFAULT_SEED):
        self._state = 1
        self.seed(seed)

    def seed(self, value: int) -> None:
        self._state = _coerce_seed(value)

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        # Resuming a stream advanced elsewhere (e.g. a compiled kernel)
        value = int(value)
        if not 0 < value <= UINT32_MASK:
            raise ValueError(f"xorshift32 state must be in [1, 2^32 - 1], got {value}")
        self._state = value

    def copy(self) -> "XorShift32":
        twin = XorShift32.__new__(XorShift32)
        twin._state = self._state
        return twin

    def next_uint32(self) -> int:
        x = self._state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self._state = x
        return x

    def next_uniform(self) -> float:
        """Uniform double in [0, 1), strictly positive for this generator."""
        x = self.next_uint32()
        if x == UINT32_MASK:
            return MAX_UNIFORM
        return x / UINT32_MAX

    def uint32_block(self, n: int) -> np.ndarray:
        """
        Next ``n`` raw outputs as a uint32 array.

        Consumes the stream exactly like ``n`` calls to ``next_uint32``.
        """
        out = np.empty(n, dtype=np.uint32)
        x = self._state
        for i in range(n):
            x ^= (x << 13) & UINT32_MASK
            x ^= x >> 17
            x ^= (x << 5) & UINT32_MASK
            out[i] = x
        self._state = x
        return out

    def uniforms(self, n: int) -> np.ndarray:
        """Next ``n`` uniforms in [0, 1) as a float64 array."""
        u = self.uint32_block(n).astype(np.float64) / UINT32_MAX
        return np.minimum(u, MAX_UNIFORM, out=u)

    def __repr__(self) -> str:
        return f"XorShift32(state={self._state})"


def derive_seed(base: int, index: int) -> int:
    """Seed for the ``index``-th independent stream derived from ``base``."""
    return (int(base) + int(index)) & UINT32_MASK


_default_generator = XorShift32(DEFAULT_SEED)


def seed_generator(seed: int) -> None:
    """Reseed the module default generator."""
    _default_generator.seed(seed)


def get_default_generator() -> XorShift32:
    return _default_generator
