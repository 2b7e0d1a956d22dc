# -*- coding: utf-8 -*-

# ReqGuard
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""loguru sink setup for applications embedding ReqGuard."""

import sys
from typing import Optional

from loguru import logger

from reqguard.config import LOG_LEVEL

_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None) -> int:
    """
    Replace loguru's default sink with a stderr sink at the configured level.

    Args:
        level: Log level name; defaults to LOG_LEVEL from config

    Returns:
        Handler id of the new sink (pass to logger.remove() to detach it)
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or LOG_LEVEL).upper(), format=_LOG_FORMAT)
