"""
Utilities: logging setup for the command-line front-end.
"""

from tat.utils.logging import setup_logging

__all__ = ["setup_logging"]
