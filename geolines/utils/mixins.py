"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional

from geolines.utils.logging import warn_once


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class its own logger, named for its module and class (e.g.
    'geolines.geodesy.SpheroidCalculator') so records propagate to the package logger.
    One-time warnings share the package-wide registry in geolines.utils.logging.
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = f'{_class.__module__}.{_class.__name__}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg: str, *args):
        """Logs a warning through this instance's logger, once per process"""
        warn_once(msg, *args, logger=self.logger)
