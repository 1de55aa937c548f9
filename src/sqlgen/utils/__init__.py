"""
Utility helpers shared across sqlgen packages.
"""

from .logging import StatementContextFilter, configure_logging, get_logger, time_call

__all__ = ["StatementContextFilter", "configure_logging", "get_logger", "time_call"]
