# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Tuipe Contributors
#
# This file is part of Tuipe.
#
# Tuipe is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Tuipe is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import os
import sys
from pathlib import Path

from loguru import logger

LOG_LEVEL_ENV = "TUIPE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def configure_logging(verbose: bool = False) -> None:
    """
    Send log records to stderr.

    --verbose forces DEBUG; otherwise TUIPE_LOG_LEVEL picks the level
    (default WARNING).
    """
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def ensure_parent_dir(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
