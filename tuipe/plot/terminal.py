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
What the output sink can do: is it a terminal, and how wide is it.
"""

import os
from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class TerminalCapabilities(Protocol):
    def is_interactive(self) -> bool: ...

    def columns(self) -> int | None: ...


class StreamCapabilities:
    """TerminalCapabilities backed by a real text stream (stdout, a file, StringIO...)."""

    def __init__(self, stream: Any) -> None:
        self._stream = stream

    def is_interactive(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False

    def columns(self) -> int | None:
        fileno = getattr(self._stream, "fileno", None)
        if fileno is None:
            return None
        try:
            size = os.get_terminal_size(fileno())
        except (OSError, ValueError):
            return None
        return size.columns if size.columns > 0 else None


class FixedCapabilities:
    """Static answers, for callers that already know the terminal (and for tests)."""

    def __init__(self, *, interactive: bool = False, columns: int | None = None) -> None:
        self._interactive = interactive
        self._columns = columns

    def is_interactive(self) -> bool:
        return self._interactive

    def columns(self) -> int | None:
        return self._columns


def color_disabled_by_env(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get("NO_COLOR", ""))


def should_use_color(
    capabilities: TerminalCapabilities,
    mode: ColorMode = ColorMode.AUTO,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """
    NO_COLOR always wins; otherwise ALWAYS/NEVER are honoured and AUTO
    follows whether the sink is interactive.
    """
    if color_disabled_by_env(environ):
        return False
    mode = ColorMode(mode)
    if mode is ColorMode.NEVER:
        return False
    if mode is ColorMode.ALWAYS:
        return True
    return capabilities.is_interactive()
