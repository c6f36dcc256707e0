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

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from tuipe.plot.braille import DOTS_PER_CELL_X, DOTS_PER_CELL_Y, DotGrid
from tuipe.plot.styles import SOLID, LineStyle

# Ranges narrower than this are widened by one unit on each side.
DEGENERATE_RANGE_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class SeriesRange:
    """Vertical scale of one series (already widened when degenerate)."""

    min: float
    max: float

    @classmethod
    def of(cls, values: Sequence[float]) -> "SeriesRange":
        finite = [v for v in values if math.isfinite(v)]
        lo = min(finite) if finite else 0.0
        hi = max(finite) if finite else 0.0
        if abs(hi - lo) < DEGENERATE_RANGE_EPSILON:
            lo -= 1
            hi += 1
        return cls(min=lo, max=hi)


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def value_to_row(value: float, lo: float, hi: float, rows: int) -> int:
    """
    Map `value` onto a dot row in ``[0, rows - 1]``; row 0 is the top (the max).
    """
    if rows <= 1:
        return 0
    pos = (value - lo) / (hi - lo)
    if not math.isfinite(pos):
        return rows - 1
    row = _round_half_away((1 - pos) * (rows - 1))
    return min(max(row, 0), rows - 1)


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """
    Bresenham line from (x0, y0) to (x1, y1), both endpoints included.

    Works for every octant; consecutive points differ by at most one step on
    each axis.
    """
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def rasterize(
    values: Sequence[float],
    value_range: SeriesRange,
    height: int,
    style: LineStyle = SOLID,
) -> DotGrid:
    """
    Draw one resampled series onto a fresh ``height x len(values)`` DotGrid.

    Sample `x` lands on dot column ``2 * x``; neighbouring samples are joined
    by a line, and only dot columns allowed by `style` are lit.
    """
    grid = DotGrid(width=len(values), height=height)
    rows = height * DOTS_PER_CELL_Y

    prev: tuple[int, int] | None = None
    for x, value in enumerate(values):
        px = x * DOTS_PER_CELL_X
        py = value_to_row(value, value_range.min, value_range.max, rows)
        if prev is None:
            if style.allows(px):
                grid.set_dot(px, py)
        else:
            for dot_x, dot_y in line_points(prev[0], prev[1], px, py):
                if style.allows(dot_x):
                    grid.set_dot(dot_x, dot_y)
        prev = (px, py)

    return grid
