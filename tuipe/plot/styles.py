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

from collections.abc import Sequence
from dataclasses import dataclass

COLOR_RESET = "\x1b[0m"


@dataclass(frozen=True, slots=True)
class LineStyle:
    """
    Periodic on/off pattern along the horizontal dot axis.

    A dot column `x` is drawn when ``abs(x) % period < on``.
    """

    name: str
    period: int
    on: int

    def allows(self, x: int) -> bool:
        if self.period <= 1:
            return True
        return abs(x) % self.period < self.on


@dataclass(frozen=True, slots=True)
class AnsiColor:
    name: str
    code: str

    def wrap(self, text: str) -> str:
        return f"{self.code}{text}{COLOR_RESET}"


SOLID = LineStyle(name="solid", period=1, on=1)
DASHED = LineStyle(name="dashed", period=6, on=3)
DOTTED = LineStyle(name="dotted", period=4, on=1)
DASHDOT = LineStyle(name="dashdot", period=8, on=3)

DEFAULT_LINE_STYLES: tuple[LineStyle, ...] = (SOLID, DASHED, DOTTED, DASHDOT)

DEFAULT_PALETTE: tuple[AnsiColor, ...] = (
    AnsiColor(name="cyan", code="\x1b[36m"),
    AnsiColor(name="magenta", code="\x1b[35m"),
    AnsiColor(name="yellow", code="\x1b[33m"),
    AnsiColor(name="green", code="\x1b[32m"),
    AnsiColor(name="blue", code="\x1b[34m"),
)


@dataclass(frozen=True, slots=True)
class PlotTheme:
    """
    Dash styles and colors assigned to series by position.

    Series `i` uses ``line_styles[i % len(line_styles)]`` and
    ``palette[i % len(palette)]``.
    """

    line_styles: tuple[LineStyle, ...] = DEFAULT_LINE_STYLES
    palette: tuple[AnsiColor, ...] = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        if not self.line_styles:
            raise ValueError("PlotTheme needs at least one line style.")
        if not self.palette:
            raise ValueError("PlotTheme needs at least one palette color.")

    @classmethod
    def of(cls, line_styles: Sequence[LineStyle], palette: Sequence[AnsiColor]) -> "PlotTheme":
        return cls(line_styles=tuple(line_styles), palette=tuple(palette))

    def style_for(self, index: int) -> LineStyle:
        return self.line_styles[index % len(self.line_styles)]

    def color_for(self, index: int) -> AnsiColor:
        return self.palette[index % len(self.palette)]
