"""
Logging setup - one basicConfig call for the whole application.
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # pymongo heartbeats are noisy at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
