import dataclasses
import logging

import numpy as np
import pytest

from mcoptions.common.logging_config import setup_logging
from mcoptions.common.validation import (
    validate_num_simulations,
    validate_option_inputs,
    validate_option_type,
)
from mcoptions.exceptions import InvalidArgumentError, PricingError
from mcoptions.pricing_models.params import OptionParameters
from mcoptions.utils.decorators.timing import timeit


class TestOptionParameters:
    def test_fields(self):
        params = OptionParameters(100.0, 95.0, 0.05, 0.2, 0.5)
        assert params.as_tuple() == (100.0, 95.0, 0.05, 0.2, 0.5)
        assert params.moneyness == pytest.approx(100.0 / 95.0)
        assert params.to_dict()["volatility"] == 0.2

    def test_immutable(self):
        params = OptionParameters(100.0, 95.0, 0.05, 0.2, 0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.spot = 1.0

    def test_from_days(self):
        params = OptionParameters.from_days(100.0, 100.0, 0.05, 0.2, 365)
        assert params.maturity == 1.0

    def test_zero_volatility_and_maturity_allowed(self):
        OptionParameters(100.0, 100.0, 0.05, 0.0, 0.0)

    @pytest.mark.parametrize(
        "args",
        [
            (0.0, 100.0, 0.05, 0.2, 1.0),
            (100.0, -1.0, 0.05, 0.2, 1.0),
            (100.0, 100.0, 0.05, -0.01, 1.0),
            (100.0, 100.0, 0.05, 0.2, -0.01),
        ],
    )
    def test_invalid(self, args):
        with pytest.raises(InvalidArgumentError):
            OptionParameters(*args)


class TestValidation:
    def test_accepts_numpy_scalars(self):
        validate_option_inputs(np.float64(100.0), np.float64(90.0), 0.01, 0.3, np.float32(1.0))
        assert validate_num_simulations(np.int64(10)) == 10

    def test_rejects_non_numbers(self):
        with pytest.raises(InvalidArgumentError):
            validate_option_inputs("100", 100.0, 0.05, 0.2, 1.0)

    def test_error_carries_field(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_num_simulations(0)
        assert exc_info.value.field == "n_sim"
        assert exc_info.value.value == 0
        assert isinstance(exc_info.value, PricingError)

    def test_option_type(self):
        assert validate_option_type("put") == "put"
        with pytest.raises(InvalidArgumentError):
            validate_option_type("CALL")


def test_timeit_logs_duration(caplog):
    @timeit
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="mcoptions.utils.decorators.timing"):
        assert add(2, 3) == 5
    assert any("[timing]" in r.getMessage() and "add" in r.getMessage() for r in caplog.records)


def test_setup_logging_accepts_lowercase():
    setup_logging("debug")


def test_slow_marker_registered(pytestconfig):
    assert any(line.startswith("slow:") for line in pytestconfig.getini("markers"))
