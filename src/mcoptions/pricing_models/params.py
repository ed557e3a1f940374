# src/mcoptions/pricing_models/params.py

from dataclasses import asdict, dataclass
from typing import Dict

from mcoptions.common.config import DAYS_PER_YEAR
from mcoptions.common.validation import validate_option_inputs


@dataclass(frozen=True)
class OptionParameters:
    """
    Immutable inputs of one pricing request.

    Attributes:
        spot: Initial stock price S0 (> 0)
        strike: Strike K (> 0)
        rate: Continuously compounded risk-free rate r
        volatility: Annualised volatility sigma (>= 0)
        maturity: Time to expiry T in years (>= 0)
    """

    spot: float
    strike: float
    rate: float
    volatility: float
    maturity: float

    def __post_init__(self):
        validate_option_inputs(
            self.spot, self.strike, self.rate, self.volatility, self.maturity
        )

    @classmethod
    def from_days(
        cls,
        spot: float,
        strike: float,
        rate: float,
        volatility: float,
        days_to_expiry: float,
    ) -> "OptionParameters":
        """Build from calendar days to expiry (days / 365)."""
        return cls(spot, strike, rate, volatility, days_to_expiry / DAYS_PER_YEAR)

    @property
    def moneyness(self) -> float:
        return self.spot / self.strike

    def as_tuple(self):
        """(S0, K, r, sigma, T) in pricer argument order."""
        return self.spot, self.strike, self.rate, self.volatility, self.maturity

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
