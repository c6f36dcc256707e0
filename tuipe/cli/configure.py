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
import shlex
import subprocess

from loguru import logger

from tuipe.cli._io import ensure_parent_dir
from tuipe.cli.exitcodes import EXIT_OK
from tuipe.core.config import default_config_template
from tuipe.core.errors import ConfigError
from tuipe.core.paths import default_config_path

DEFAULT_EDITOR = "vi"


def run(*, path_only: bool = False) -> int:
    """
    Create the config file from the template if needed and open it in $EDITOR.

    Args:
        path_only: Print the config path and return without touching anything
    """
    path = default_config_path()
    if path_only:
        print(path)
        return EXIT_OK

    try:
        ensure_parent_dir(path)
        if not path.exists():
            path.write_text(default_config_template(), encoding="utf-8")
            logger.info(f"created {path}")
    except OSError as e:
        raise ConfigError(code="config_write_failed", message=f"failed to write config: {e}") from e

    command = shlex.split((os.environ.get("EDITOR") or "").strip() or DEFAULT_EDITOR)
    if not command:
        raise ConfigError(code="editor_empty", message="editor command is empty")

    try:
        subprocess.run([*command, str(path)], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise ConfigError(code="editor_failed", message=f"failed to open editor: {e}") from e
    return EXIT_OK
