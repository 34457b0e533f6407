"""Utility functions for pySounding package

This module contains utility functions used by various parts of the codebase.
"""

import logging
import sys
import time
import warnings
from datetime import datetime, timezone

import numpy as np
import pandas as pd

# Setup a default logging instance for this module
LOG = logging.getLogger("pysounding")
LOG.addHandler(logging.NullHandler())


class CustomFormatter(logging.Formatter):
    """A custom log formatter class."""

    def format(self, record):
        """Return a string!"""
        return (
            f"[{time.strftime('%H:%M:%S', time.localtime(record.created))} "
            f"{(record.relativeCreated / 1000.0):6.3f} "
            f"{record.filename}:{record.lineno} {record.funcName}] "
            f"{record.getMessage()}"
        )


def logger(name="pysounding", level=None):
    """Get pysounding's logger with a stream handler attached.

    Args:
      name (str): The name of the logger to get, default pysounding
      level (logging.LEVEL): The log level for this logger, default is
        WARNING for non interactive sessions, INFO otherwise

    Returns:
      logger instance
    """
    ch = logging.StreamHandler()
    ch.setFormatter(CustomFormatter())
    log = logging.getLogger(name)
    log.addHandler(ch)
    if level is None and sys.stdout.isatty():
        level = logging.INFO
    log.setLevel(level if level is not None else logging.WARNING)
    return log


def utc(year=None, month=1, day=1, hour=0, minute=0, second=0, microsecond=0):
    """Create a datetime instance with tzinfo=timezone.utc

    When no arguments are provided, returns `datetime.now(timezone.utc)`.

    Returns:
      datetime with tzinfo set
    """
    if year is None:
        return datetime.now(timezone.utc)
    return datetime(
        year, month, day, hour, minute, second, microsecond
    ).replace(tzinfo=timezone.utc)


def ensure_utc(valid):
    """Return ``valid`` as a timezone aware UTC datetime.

    Naive values are assumed to be UTC already, with a warning.

    Args:
      valid (datetime, np.datetime64, pd.Timestamp or None): the timestamp

    Returns:
      datetime with tzinfo set, or None
    """
    if valid is None:
        return None
    if isinstance(valid, np.datetime64):
        valid = pd.Timestamp(valid).to_pydatetime()
    elif isinstance(valid, pd.Timestamp):
        valid = valid.to_pydatetime()
    if getattr(valid, "tzinfo", None) is None:
        warnings.warn("tzinfo is not set on valid, defaulting to UTC")
        return valid.replace(tzinfo=timezone.utc)
    return valid.astimezone(timezone.utc)
