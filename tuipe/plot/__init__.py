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

from tuipe.plot.braille import DotGrid, dot_mask, glyph
from tuipe.plot.compose import CombinedCell, compose
from tuipe.plot.raster import SeriesRange, line_points, rasterize, value_to_row
from tuipe.plot.render import PlotRenderer, Series, axis_labels, plot_width_for, render_plot
from tuipe.plot.resample import block_bounds, resample
from tuipe.plot.styles import DEFAULT_LINE_STYLES, DEFAULT_PALETTE, AnsiColor, LineStyle, PlotTheme
from tuipe.plot.terminal import (
    ColorMode,
    FixedCapabilities,
    StreamCapabilities,
    TerminalCapabilities,
    should_use_color,
)

__all__ = [
    "Series",
    "SeriesRange",
    "PlotRenderer",
    "PlotTheme",
    "LineStyle",
    "AnsiColor",
    "DEFAULT_LINE_STYLES",
    "DEFAULT_PALETTE",
    "ColorMode",
    "TerminalCapabilities",
    "StreamCapabilities",
    "FixedCapabilities",
    "DotGrid",
    "CombinedCell",
    "resample",
    "block_bounds",
    "rasterize",
    "value_to_row",
    "line_points",
    "compose",
    "dot_mask",
    "glyph",
    "axis_labels",
    "plot_width_for",
    "render_plot",
    "should_use_color",
]
