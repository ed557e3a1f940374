from mcoptions.exceptions.pricing_exceptions import PricingError


class MonteCarloError(PricingError):
    """Base exception for Monte Carlo pricer"""
