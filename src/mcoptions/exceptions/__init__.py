from mcoptions.exceptions.data_exceptions import (
    DataError,
    MissingDataError,
    InvalidDataFormatError,
)
from mcoptions.exceptions.montecarlo_exceptions import MonteCarloError
from mcoptions.exceptions.pricing_exceptions import (
    PricingError,
    InvalidArgumentError,
    DegenerateInputError,
)

__all__ = [
    "PricingError",
    "InvalidArgumentError",
    "DegenerateInputError",
    "MonteCarloError",
    "DataError",
    "MissingDataError",
    "InvalidDataFormatError",
]
