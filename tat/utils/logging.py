"""
tat/utils/logging.py

Root logger configuration for command-line use.

Library modules only create module loggers; handlers are installed here.
"""

import logging
import sys
from typing import Union


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = "INFO") -> None:
    """
    Configure the root logger.

    Uses the format "timestamp - logger name - level - message" and a
    StreamHandler writing to stdout.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )
