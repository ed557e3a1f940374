# src/mcoptions/pricing_models/monte_carlo.py

import logging
import math
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import numpy as np

from mcoptions.common.config import DEFAULT_BATCH_SIZE, DEFAULT_NUM_SIMULATIONS, DEFAULT_SEED
from mcoptions.common.validation import (
    validate_num_simulations,
    validate_option_inputs,
    validate_option_type,
)
from mcoptions.exceptions.montecarlo_exceptions import MonteCarloError
from mcoptions.exceptions.pricing_exceptions import InvalidArgumentError
from mcoptions.pricing_models.payoffs import get_payoff
from mcoptions.simulation.gbm import simulate_terminal_prices
from mcoptions.simulation.gbm_numba import NUMBA_AVAILABLE, accumulate_payoffs_numba
from mcoptions.simulation.rng import XorShift32, get_default_generator
from mcoptions.utils.decorators.timing import timeit

logger = logging.getLogger(__name__)

__all__ = ["MonteCarloPricer", "MonteCarloResult", "price_call_mc", "price_put_mc"]


@dataclass(frozen=True)
class MonteCarloResult:
    """Discounted Monte Carlo estimate with its standard error."""

    price: float
    std_error: float
    num_simulations: int

    def confidence_interval(self, z: float = 1.96) -> Tuple[float, float]:
        half_width = z * self.std_error
        return self.price - half_width, self.price + half_width


class MonteCarloPricer:
    """
    Monte Carlo pricer for European options under risk-neutral GBM.

    Features:
    - Exact terminal-price sampling (no time stepping)
    - Explicit xorshift32 generator per pricer, bit-reproducible per seed
    - Batched NumPy evaluation or a Numba kernel for the draw loop
    - Standard error of the estimate
    - Input validation for parameters
    """

    def __init__(
        self,
        num_simulations: int = DEFAULT_NUM_SIMULATIONS,
        seed: Optional[int] = None,
        generator: Optional[XorShift32] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        use_numba: bool = False,
    ):
        self.num_simulations = validate_num_simulations(num_simulations)
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            raise InvalidArgumentError("batch_size", batch_size, "a positive integer")
        if use_numba and not NUMBA_AVAILABLE:
            raise MonteCarloError("Numba not installed; cannot enable acceleration")

        if generator is None:
            generator = XorShift32(DEFAULT_SEED if seed is None else seed)
        elif seed is not None:
            generator.seed(seed)

        self.seed = seed
        self.generator = generator
        self.batch_size = batch_size
        self.use_numba = use_numba

    def reseed(self, seed: int) -> None:
        self.seed = seed
        self.generator.seed(seed)

    def _accumulate_payoffs(
        self, S0: float, K: float, r: float, sigma: float, T: float, option_type: str
    ) -> Tuple[float, float]:
        """Sum and sum of squares of undiscounted payoffs over all draws."""
        if self.use_numba:
            return accumulate_payoffs_numba(
                self.generator, S0, K, r, sigma, T, self.num_simulations, option_type
            )

        payoff = get_payoff(option_type)
        total = 0.0
        total_sq = 0.0
        remaining = self.num_simulations
        while remaining > 0:
            n_batch = min(self.batch_size, remaining)
            terminal_prices = simulate_terminal_prices(
                self.generator, S0, r, sigma, T, n_batch
            )
            payoffs = payoff(terminal_prices, K)
            total += float(np.sum(payoffs))
            total_sq += float(np.dot(payoffs, payoffs))
            remaining -= n_batch
        return total, total_sq

    @timeit
    def price_with_std_error(
        self,
        S0: float,
        K: float,
        r: float,
        sigma: float,
        T: float,
        option_type: Literal["call", "put"] = "call",
    ) -> MonteCarloResult:
        """
        Estimate the option price and the standard error of the estimate.

        Args:
            S0: Spot price
            K: Strike price
            r: Risk-free rate
            sigma: Volatility
            T: Time to maturity (years)
            option_type: 'call' or 'put'

        Returns:
            MonteCarloResult

        Raises:
            MonteCarloError: if the simulated payoffs overflow to inf
        """
        validate_option_inputs(S0, K, r, sigma, T)
        validate_option_type(option_type)

        n = self.num_simulations
        total, total_sq = self._accumulate_payoffs(S0, K, r, sigma, T, option_type)
        if not (math.isfinite(total) and math.isfinite(total_sq)):
            raise MonteCarloError(
                f"Payoff sums overflowed for S0={S0}, r={r}, sigma={sigma}, T={T}"
            )

        avg_payoff = total / n
        discount = math.exp(-r * T)
        price = avg_payoff * discount

        if n > 1:
            variance = max((total_sq - n * avg_payoff * avg_payoff) / (n - 1), 0.0)
            std_error = discount * math.sqrt(variance / n)
        else:
            std_error = 0.0

        logger.debug(
            "MC %s S0=%s K=%s r=%s sigma=%s T=%s n=%d -> %.6f (se %.6f)",
            option_type, S0, K, r, sigma, T, n, price, std_error,
        )
        return MonteCarloResult(price=price, std_error=std_error, num_simulations=n)

    def price(
        self,
        S0: float,
        K: float,
        r: float,
        sigma: float,
        T: float,
        option_type: Literal["call", "put"] = "call",
    ) -> float:
        """Discounted average payoff: exp(-rT) * mean(payoff(S_T, K))."""
        return self.price_with_std_error(S0, K, r, sigma, T, option_type).price


def price_call_mc(
    S0: float,
    K: float,
    r: float,
    sigma: float,
    T: float,
    n_sim: int,
    generator: Optional[XorShift32] = None,
) -> float:
    """
    Monte Carlo European call price.

    Draws from ``generator``, or from the module default generator
    (see ``seed_generator``) when none is given.
    """
    if generator is None:
        generator = get_default_generator()
    return MonteCarloPricer(n_sim, generator=generator).price(S0, K, r, sigma, T, "call")


def price_put_mc(
    S0: float,
    K: float,
    r: float,
    sigma: float,
    T: float,
    n_sim: int,
    generator: Optional[XorShift32] = None,
) -> float:
    if generator is None:
        generator = get_default_generator()
    return MonteCarloPricer(n_sim, generator=generator).price(S0, K, r, sigma, T, "put")
