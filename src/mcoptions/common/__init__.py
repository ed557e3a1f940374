from mcoptions.common.config import (
    PROJECT_NAME,
    DEFAULT_SEED,
    DEFAULT_NUM_SIMULATIONS,
    DEFAULT_BATCH_SIZE,
    DAYS_PER_YEAR,
)
from mcoptions.common.logging_config import setup_logging
from mcoptions.common.validation import (
    validate_option_inputs,
    validate_num_simulations,
    validate_option_type,
    check_required_columns,
)

__all__ = [
    "PROJECT_NAME",
    "DEFAULT_SEED",
    "DEFAULT_NUM_SIMULATIONS",
    "DEFAULT_BATCH_SIZE",
    "DAYS_PER_YEAR",
    "setup_logging",
    "validate_option_inputs",
    "validate_num_simulations",
    "validate_option_type",
    "check_required_columns",
]
