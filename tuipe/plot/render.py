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
Multi-series Braille line charts for the terminal.

Layout of a rendered plot:

    <title>                                   (optional)
    Scaled per series; see min/max below.
    <name>: min=<v> max=<v>                   (one per series)
    100% │ ⠁⠒⠤...                             (height rows)
         │ ...
     50% │ ...
      0% │ ...
    Legend: ⠁ A (solid)  ⠁ B (dashed)
    <blank line>

Each series is scaled to its own min/max, so the axis is labelled in percent
of that range rather than in data units.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TextIO

from tuipe.plot.braille import glyph
from tuipe.plot.compose import CombinedCell, compose
from tuipe.plot.raster import SeriesRange, rasterize
from tuipe.plot.resample import resample
from tuipe.plot.styles import PlotTheme
from tuipe.plot.terminal import (
    ColorMode,
    StreamCapabilities,
    TerminalCapabilities,
    should_use_color,
)

DEFAULT_PLOT_HEIGHT = 10
MIN_PLOT_WIDTH = 10
TERMINAL_WIDTH_FALLBACK = 80

AXIS_LABEL_TOP = "100%"
AXIS_LABEL_MID = "50%"
AXIS_LABEL_BOTTOM = "0%"
AXIS_SEPARATOR = " │ "
AXIS_GUTTER_WIDTH = len(AXIS_LABEL_TOP) + len(AXIS_SEPARATOR)

SCALE_NOTE = "Scaled per series; see min/max below."
LEGEND_PREFIX = "Legend: "
LEGEND_MARKER = glyph(0x01)


@dataclass(frozen=True, slots=True)
class Series:
    """A named numeric series to plot."""

    name: str
    values: Sequence[float]


def plot_width_for(total_width: int) -> int:
    """Plot columns left over once the axis gutter takes its share of `total_width`."""
    if total_width <= 0:
        return MIN_PLOT_WIDTH
    return max(total_width - AXIS_GUTTER_WIDTH, MIN_PLOT_WIDTH)


def axis_labels(height: int) -> list[str]:
    labels = [""] * max(height, 0)
    if height <= 0:
        return labels
    labels[0] = AXIS_LABEL_TOP
    if height > 2:
        labels[height // 2] = AXIS_LABEL_MID
    if height > 1:
        labels[height - 1] = AXIS_LABEL_BOTTOM
    return labels


class PlotRenderer:
    """
    Renders named series as overlapping, independently scaled line charts.

    The renderer holds only immutable configuration; every call builds its
    own grids, so one instance can be shared freely.
    """

    def __init__(self, theme: PlotTheme | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        self._theme = theme or PlotTheme()
        self._environ = environ

    @property
    def theme(self) -> PlotTheme:
        return self._theme

    def render(
        self,
        series: Iterable[Series],
        *,
        title: str | None = None,
        width: int | None = None,
        height: int | None = None,
        color: ColorMode | str = ColorMode.AUTO,
        capabilities: TerminalCapabilities | None = None,
    ) -> str:
        """
        Render `series` to text.

        Args:
            series: Series to plot; empty ones are skipped
            title: Optional first line
            width: Total available width in columns (axis gutter included);
                   None asks `capabilities` for the terminal width
            height: Plot height in rows (default 10)
            color: Color mode; NO_COLOR in the environment always disables color
            capabilities: What the output sink supports (default: not a terminal)

        Returns:
            The plot, newline terminated, or "" when no series has values
        """
        live = [s for s in series if len(s.values) > 0]
        if not live:
            return ""

        caps = capabilities or StreamCapabilities(None)
        plot_height = height if height and height > 0 else DEFAULT_PLOT_HEIGHT
        plot_width = self._resolve_width(width, caps)

        scaled = [resample(s.values, plot_width) for s in live]
        ranges = [SeriesRange.of(values) for values in scaled]
        grids = [
            rasterize(values, ranges[i], plot_height, self._theme.style_for(i)) for i, values in enumerate(scaled)
        ]
        cells = compose(grids)

        use_color = should_use_color(caps, ColorMode(color), self._environ)

        lines: list[str] = []
        if title:
            lines.append(title)
        lines.append(SCALE_NOTE)
        for s, r in zip(live, ranges):
            lines.append(f"{s.name}: min={r.min:.2f} max={r.max:.2f}")

        gutter = len(AXIS_LABEL_TOP)
        for label, row in zip(axis_labels(plot_height), cells):
            lines.append(f"{label:>{gutter}}{AXIS_SEPARATOR}{self._render_row(row, use_color)}")

        lines.append(self._render_legend(live, use_color))
        lines.append("")
        return "\n".join(lines) + "\n"

    def plot(
        self,
        sink: TextIO,
        series: Iterable[Series],
        *,
        title: str | None = None,
        width: int | None = None,
        height: int | None = None,
        color: ColorMode | str = ColorMode.AUTO,
        capabilities: TerminalCapabilities | None = None,
    ) -> None:
        """Render and write to `sink`; color and width detection look at `sink` itself."""
        text = self.render(
            series,
            title=title,
            width=width,
            height=height,
            color=color,
            capabilities=capabilities or StreamCapabilities(sink),
        )
        if text:
            sink.write(text)

    def _resolve_width(self, width: int | None, caps: TerminalCapabilities) -> int:
        if width is None:
            width = caps.columns() or TERMINAL_WIDTH_FALLBACK
        return plot_width_for(width)

    def _render_row(self, row: Sequence[CombinedCell], use_color: bool) -> str:
        out: list[str] = []
        for cell in row:
            ch = glyph(cell.mask)
            if use_color and cell.owner is not None:
                out.append(self._theme.color_for(cell.owner).wrap(ch))
            else:
                out.append(ch)
        return "".join(out)

    def _render_legend(self, series: Sequence[Series], use_color: bool) -> str:
        parts: list[str] = []
        for i, s in enumerate(series):
            label = f"{LEGEND_MARKER} {s.name} ({self._theme.style_for(i).name})"
            if use_color:
                label = self._theme.color_for(i).wrap(label)
            parts.append(label)
        return LEGEND_PREFIX + "  ".join(parts)


def render_plot(
    series: Iterable[Series],
    *,
    title: str | None = None,
    width: int | None = None,
    height: int | None = None,
    color: ColorMode | str = ColorMode.AUTO,
    capabilities: TerminalCapabilities | None = None,
) -> str:
    """
    Render with the default theme.

    Without `capabilities` the output is treated as not a terminal: `width=None`
    resolves to 80 columns and AUTO color is off. Use `PlotRenderer.plot` or
    pass `StreamCapabilities(sys.stdout)` to detect the real terminal.
    """
    return PlotRenderer().render(
        series,
        title=title,
        width=width,
        height=height,
        color=color,
        capabilities=capabilities,
    )
