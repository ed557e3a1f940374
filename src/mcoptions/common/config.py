# src/mcoptions/common/config.py

import os

# General project config
PROJECT_NAME = "mc-options"
DEFAULT_QUOTES_FILE = os.getenv("MCOPTIONS_QUOTES_FILE", "real_stocks.csv")

# Simulation defaults
DEFAULT_SEED = int(os.getenv("MCOPTIONS_SEED", "123456"))
DEFAULT_NUM_SIMULATIONS = 1_000_000
DEFAULT_COMPARE_SIMULATIONS = 500_000
DEFAULT_BATCH_SIZE = int(os.getenv("MCOPTIONS_BATCH_SIZE", "65536"))

# Market conventions
DAYS_PER_YEAR = 365.0
DEFAULT_TOLERANCE_PCT = 1.0

# Logging config
LOG_LEVEL = os.getenv("MCOPTIONS_LOG_LEVEL", "INFO")
