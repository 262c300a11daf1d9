# backend/applicant_tracker/core/log.py
"""
Process logging setup. Modules only ever call logging.getLogger(__name__);
this installs the single stdout handler they all propagate to.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the `applicant_tracker` logger hierarchy. Safe to call more than
    once; existing handlers are replaced instead of stacked.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    root = logging.getLogger("applicant_tracker")
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    return root


__all__ = ["configure_logging", "LOG_FORMAT"]
