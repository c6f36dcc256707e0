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

from tuipe.core.errors import ConfigError

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ERROR = 2


def exit_code_for_error(error: BaseException) -> int:
    """
    Exit code for an error that reached the entry point.
    Policy:
      - ConfigError (bad flags or config values) => EXIT_USAGE
      - anything else (store, word list, I/O) => EXIT_ERROR
    """
    if isinstance(error, ConfigError):
        return EXIT_USAGE
    return EXIT_ERROR
