from mcoptions.pricing_models.black_scholes import (
    black_scholes,
    normal_cdf,
    price_call_bs,
    price_put_bs,
)
from mcoptions.pricing_models.monte_carlo import (
    MonteCarloPricer,
    MonteCarloResult,
    price_call_mc,
    price_put_mc,
)
from mcoptions.pricing_models.params import OptionParameters
from mcoptions.pricing_models.payoffs import call_payoff, get_payoff, put_payoff

__all__ = [
    "OptionParameters",
    "call_payoff",
    "put_payoff",
    "get_payoff",
    "normal_cdf",
    "black_scholes",
    "price_call_bs",
    "price_put_bs",
    "MonteCarloPricer",
    "MonteCarloResult",
    "price_call_mc",
    "price_put_mc",
]
