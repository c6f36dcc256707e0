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

SPARK_CHARS = " .:-=+*#%@"


def session_metrics(correct: int, incorrect: int, duration_ms: int) -> tuple[float, float, float]:
    """
    Typing rates for a session.

    Returns:
        (wpm, cpm, accuracy); a word is five correct characters and
        accuracy is a 0-1 ratio. All zero for a non-positive duration.
    """
    if duration_ms <= 0:
        return 0.0, 0.0, 0.0
    minutes = duration_ms / 60000.0
    wpm = (correct / 5.0) / minutes
    cpm = correct / minutes
    total = correct + incorrect
    accuracy = correct / total if total > 0 else 0.0
    return wpm, cpm, accuracy


def moving_average(values: Sequence[float], window: int) -> list[float]:
    """Trailing mean over `window` values; the first points average what is available."""
    if window <= 1 or not values:
        return list(values)
    out: list[float] = []
    total = 0.0
    for i, value in enumerate(values):
        total += value
        if i >= window:
            total -= values[i - window]
        out.append(total / min(i + 1, window))
    return out


def sparkline(values: Sequence[float]) -> str:
    """One character per value, from blank (lowest) to '@' (highest)."""
    if not values:
        return ""
    lo = min(values)
    hi = max(values)
    if abs(hi - lo) < 1e-9:
        return SPARK_CHARS[len(SPARK_CHARS) // 2] * len(values)
    top = len(SPARK_CHARS) - 1
    chars = []
    for v in values:
        idx = int((v - lo) / (hi - lo) * top + 0.5)
        chars.append(SPARK_CHARS[min(max(idx, 0), top)])
    return "".join(chars)
