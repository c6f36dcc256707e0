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
Fit a numeric series to an exact number of plot columns.

Longer series are block-averaged, shorter ones are linearly interpolated.
"""

import math
from collections.abc import Sequence


def block_bounds(length: int, width: int) -> list[tuple[int, int]]:
    """
    Partition `length` input samples into `width` contiguous blocks.

    Each block is a half-open ``(start, end)`` index range. A block that
    would be empty after flooring is widened to one sample, and no block
    extends past `length`.
    """
    bounds: list[tuple[int, int]] = []
    for i in range(width):
        start = i * length // width
        end = (i + 1) * length // width
        if end <= start:
            end = start + 1
        if end > length:
            end = length
        bounds.append((start, end))
    return bounds


def resample(values: Sequence[float], width: int) -> list[float]:
    """
    Resample `values` to exactly `width` points.

    Args:
        values: Input samples, in order
        width: Number of output points

    Returns:
        A new list of `width` floats (empty when there is nothing to resample)
    """
    n = len(values)
    if n == 0 or width <= 0:
        return []

    if n == width:
        return list(values)

    if n > width:
        out: list[float] = []
        for start, end in block_bounds(n, width):
            block = values[start:end]
            out.append(sum(block) / len(block))
        return out

    if width == 1:
        return [values[0]]

    if n == 1:
        return [values[0]] * width

    out = []
    last = n - 1
    for i in range(width):
        pos = i * last / (width - 1)
        idx = math.floor(pos)
        if idx >= last:
            out.append(values[last])
            continue
        frac = pos - idx
        out.append(values[idx] * (1 - frac) + values[idx + 1] * frac)
    return out
