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

import random
from collections.abc import Collection, Sequence


class WordGenerator:
    """
    Builds practice texts from a word list.

    Each picked word is capitalized with probability `caps_pct` and gets one
    trailing punctuation character from `punct_set` with probability
    `punct_pct`.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(
        self,
        words: Sequence[str],
        count: int,
        caps_pct: float,
        punct_pct: float,
        punct_set: str,
    ) -> list[str]:
        """Pick `count` words uniformly."""
        if not words:
            return []
        return [self._decorate(self._rng.choice(words), caps_pct, punct_pct, punct_set) for _ in range(count)]

    def generate_weighted(
        self,
        words: Sequence[str],
        count: int,
        caps_pct: float,
        punct_pct: float,
        punct_set: str,
        weak_chars: Collection[str],
        factor: float,
    ) -> list[str]:
        """Pick `count` words, weighting each by `1 + (weak characters in it) * factor`."""
        if not words:
            return []
        weights = [1.0 + sum(1 for ch in word if ch in weak_chars) * factor for word in words]
        picked = self._rng.choices(words, weights=weights, k=count)
        return [self._decorate(word, caps_pct, punct_pct, punct_set) for word in picked]

    def _decorate(self, word: str, caps_pct: float, punct_pct: float, punct_set: str) -> str:
        if word and caps_pct > 0 and self._rng.random() <= caps_pct:
            word = word[0].upper() + word[1:]
        if punct_set and punct_pct > 0 and self._rng.random() <= punct_pct:
            word += self._rng.choice(punct_set)
        return word
