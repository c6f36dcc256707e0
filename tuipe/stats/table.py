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

from collections.abc import Collection, Sequence


def format_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    right_align: Collection[int] = (),
) -> list[str]:
    """
    Lay out a plain-text table.

    Columns are as wide as their widest cell and separated by one space;
    columns listed in `right_align` are padded on the left.
    """
    col_count = max([len(headers), *(len(r) for r in rows)], default=0)
    if col_count == 0:
        return []

    widths = [0] * col_count
    for line in (headers, *rows):
        for i, cell in enumerate(line):
            widths[i] = max(widths[i], len(cell))

    lines: list[str] = []
    if headers:
        lines.append(_format_row(headers, widths, right_align))
    for row in rows:
        lines.append(_format_row(row, widths, right_align))
    return lines


def _format_row(row: Sequence[str], widths: Sequence[int], right_align: Collection[int]) -> str:
    cells = []
    for i, width in enumerate(widths):
        cell = row[i] if i < len(row) else ""
        cells.append(cell.rjust(width) if i in right_align else cell.ljust(width))
    return " ".join(cells)
