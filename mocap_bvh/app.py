"""
Logging setup for the inspector application.
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger('mocap_bvh').setLevel(level)
