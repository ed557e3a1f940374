# Expose main modules for easier imports
from mcoptions import common, data, exceptions, pricing_models, simulation, utils
from mcoptions.pricing_models import (
    call_payoff,
    price_call_bs,
    price_call_mc,
    put_payoff,
)
from mcoptions.simulation import seed_generator

__version__ = "0.1.0"

__all__ = [
    "common",
    "data",
    "exceptions",
    "pricing_models",
    "simulation",
    "utils",
    "seed_generator",
    "price_call_mc",
    "price_call_bs",
    "call_payoff",
    "put_payoff",
]
