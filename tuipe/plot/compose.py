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

from tuipe.plot.braille import DotGrid


@dataclass(frozen=True, slots=True)
class CombinedCell:
    """
    A display cell after merging all series.

    `owner` is the lowest series index that lit a dot in this cell; it picks
    the one color the cell is drawn in.
    """

    mask: int = 0
    owner: int | None = None


EMPTY_CELL = CombinedCell()


def compose(grids: Sequence[DotGrid]) -> list[list[CombinedCell]]:
    """OR all series' dot masks cell by cell, remembering the first contributor."""
    if not grids:
        return []

    height = grids[0].height
    width = grids[0].width
    rows: list[list[CombinedCell]] = []
    for y in range(height):
        row: list[CombinedCell] = []
        for x in range(width):
            mask = 0
            owner: int | None = None
            for index, grid in enumerate(grids):
                cell_mask = grid.mask(x, y)
                if not cell_mask:
                    continue
                if owner is None:
                    owner = index
                mask |= cell_mask
            row.append(CombinedCell(mask=mask, owner=owner) if mask else EMPTY_CELL)
        rows.append(row)
    return rows
