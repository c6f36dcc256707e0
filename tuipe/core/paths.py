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

"""
XDG base-directory helpers.

Config and word lists live under $XDG_CONFIG_HOME/tuipe, the session
database under $XDG_DATA_HOME/tuipe.
"""

import os
from pathlib import Path

APP_DIR = "tuipe"


def _home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def xdg_config_home() -> Path:
    value = os.environ.get("XDG_CONFIG_HOME")
    if value:
        return Path(value)
    home = _home()
    return home / ".config" if home else Path(".")


def xdg_data_home() -> Path:
    value = os.environ.get("XDG_DATA_HOME")
    if value:
        return Path(value)
    home = _home()
    return home / ".local" / "share" if home else Path(".")


def default_config_path() -> Path:
    return xdg_config_home() / APP_DIR / "config.yaml"


def default_wordlist_dir() -> Path:
    return xdg_config_home() / APP_DIR / "wordlists"


def default_wordlist_path(lang: str) -> Path:
    return default_wordlist_dir() / f"{lang}.txt"


def default_db_path() -> Path:
    return xdg_data_home() / APP_DIR / "tuipe.db"
