# src/mcoptions/common/logging_config.py

import logging

from mcoptions.common.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


""" Example usage:

from mcoptions.common.logging_config import setup_logging

setup_logging()  # call once on app start
logger = logging.getLogger(__name__)

"""
