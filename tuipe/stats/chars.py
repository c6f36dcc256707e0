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

from tuipe.model.types import CharAggregate


def top_chars_by_frequency(aggs: Sequence[CharAggregate], n: int) -> list[str]:
    """The `n` most typed characters, most frequent first (ties by character)."""
    if n <= 0 or not aggs:
        return []
    ranked = sorted(aggs, key=lambda a: (-a.total, a.char))
    return [a.char for a in ranked[:n]]


def select_weak_chars(aggs: Sequence[CharAggregate], top: int) -> set[str]:
    """
    First characters of the `top` lowest-accuracy aggregates.

    A non-positive or oversized `top` selects every aggregate.
    """
    if not aggs:
        return set()
    ranked = sorted(aggs, key=lambda a: (a.accuracy, a.char))
    if top <= 0 or top > len(ranked):
        top = len(ranked)
    return {a.char[0] for a in ranked[:top] if a.char}


def parse_chars(text: str) -> list[str]:
    """
    Parse a --char selection.

    "a,b,th" -> ["a", "b", "th"]; without commas every character counts:
    "abc" -> ["a", "b", "c"].
    """
    text = text.strip()
    if not text:
        return []
    if "," in text:
        return [part.strip() for part in text.split(",") if part.strip()]
    return list(text)
