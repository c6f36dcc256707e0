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
Braille dot-grid addressing.

Every character cell holds a 2 (wide) x 4 (tall) grid of dots. Unicode maps
the 8-bit dot mask of a cell directly onto U+2800..U+28FF:

    col 0  col 1
    0x01   0x08     row 0
    0x02   0x10     row 1
    0x04   0x20     row 2
    0x40   0x80     row 3
"""

DOTS_PER_CELL_X = 2
DOTS_PER_CELL_Y = 4

BRAILLE_BASE = 0x2800

# Indexed as DOT_BITS[col][row].
DOT_BITS: tuple[tuple[int, ...], ...] = (
    (0x01, 0x02, 0x04, 0x40),
    (0x08, 0x10, 0x20, 0x80),
)


def dot_mask(col: int, row: int) -> int:
    """Bit for the dot at sub-position (col, row) of a cell, 0 when out of range."""
    if 0 <= col < DOTS_PER_CELL_X and 0 <= row < DOTS_PER_CELL_Y:
        return DOT_BITS[col][row]
    return 0


def glyph(mask: int) -> str:
    return chr(BRAILLE_BASE + (mask & 0xFF))


class DotGrid:
    """
    One series' canvas: `height` x `width` cells of 8-bit dot masks.

    Dots are addressed in dot coordinates (``2*width`` columns,
    ``4*height`` rows, origin top-left); dots outside the canvas are ignored.
    """

    __slots__ = ("width", "height", "masks")

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.masks: list[list[int]] = [[0] * self.width for _ in range(self.height)]

    @property
    def dot_columns(self) -> int:
        return self.width * DOTS_PER_CELL_X

    @property
    def dot_rows(self) -> int:
        return self.height * DOTS_PER_CELL_Y

    def set_dot(self, x: int, y: int) -> None:
        if x < 0 or y < 0:
            return
        cell_x, sub_x = divmod(x, DOTS_PER_CELL_X)
        cell_y, sub_y = divmod(y, DOTS_PER_CELL_Y)
        if cell_y >= self.height or cell_x >= self.width:
            return
        self.masks[cell_y][cell_x] |= DOT_BITS[sub_x][sub_y]

    def mask(self, cell_x: int, cell_y: int) -> int:
        if 0 <= cell_y < self.height and 0 <= cell_x < self.width:
            return self.masks[cell_y][cell_x]
        return 0

    def lit_cells(self) -> set[tuple[int, int]]:
        """Cells with at least one dot, as (cell_x, cell_y)."""
        return {(x, y) for y, row in enumerate(self.masks) for x, m in enumerate(row) if m}
