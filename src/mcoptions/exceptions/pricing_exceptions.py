class PricingError(Exception):
    """Base class for pricing-related errors."""

    pass


class InvalidArgumentError(PricingError, ValueError):
    """Raised when an option input or simulation count is out of its domain."""

    def __init__(self, field: str, value, requirement: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: must be {requirement}.")


class DegenerateInputError(PricingError):
    """Raised when the closed-form price is undefined (zero volatility or maturity)."""

    def __init__(self, sigma: float, T: float):
        super().__init__(
            f"Black-Scholes d1/d2 undefined for sigma={sigma}, T={T}; "
            "sigma * sqrt(T) must be positive."
        )
