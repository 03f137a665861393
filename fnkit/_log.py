"""Library logger.

fnkit never configures logging itself: a NullHandler keeps it silent
until the host application attaches handlers to the "fnkit" logger."""

from __future__ import annotations

import logging

logger = logging.getLogger("fnkit")
logger.addHandler(logging.NullHandler())

__all__ = ("logger",)
