"""Logging utility for geolines"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Optional

LOGGER = logging.getLogger('geolines')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

# Messages already logged by warn_once, keyed before %-formatting
_WARNINGS = set()


def warn_once(warning: str, *args, logger: Optional[logging.Logger] = None):
    """
    Logs a warning the first time a message is seen in this process.

    Args:
        warning:
            The message, optionally with %-style placeholders for args

        logger:
            (Default the package logger) The logger to emit through
    """
    if warning in _WARNINGS:
        return

    (logger or LOGGER).warning(warning, *args)
    _WARNINGS.add(warning)
