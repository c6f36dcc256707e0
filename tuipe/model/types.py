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

from dataclasses import dataclass
from datetime import datetime

DEFAULT_LANG = "en"
DEFAULT_WORDS = 25
DEFAULT_CAPS = 0.5
DEFAULT_PUNCT = 0.5
DEFAULT_PUNCT_SET = ".,!?;:\"'{}()[]-=/<>`"
DEFAULT_WEAK_TOP = 8
DEFAULT_WEAK_FACTOR = 2.0
DEFAULT_WEAK_WINDOW = 20
DEFAULT_CURVE_WINDOW = 20


@dataclass(frozen=True, slots=True)
class PracticeConfig:
    """Settings for a practice run."""

    lang: str = DEFAULT_LANG
    words: int = DEFAULT_WORDS
    caps_pct: float = DEFAULT_CAPS
    punct_pct: float = DEFAULT_PUNCT
    punct_set: str = DEFAULT_PUNCT_SET
    focus_weak: bool = False
    weak_top: int = DEFAULT_WEAK_TOP
    weak_factor: float = DEFAULT_WEAK_FACTOR
    weak_window: int = DEFAULT_WEAK_WINDOW


@dataclass(frozen=True, slots=True)
class StatsConfig:
    """Filters and options for stats output."""

    lang: str = ""
    since: datetime | None = None
    last: int = 0
    curve_window: int = DEFAULT_CURVE_WINDOW
    chars: str = ""


@dataclass(frozen=True, slots=True)
class SessionStats:
    """A completed typing session."""

    started_at: datetime
    ended_at: datetime
    lang: str
    words: int
    caps_pct: float
    punct_pct: float
    punct_set: str
    wordlist_path: str
    correct_nonspace: int
    incorrect_nonspace: int
    duration_ms: int


@dataclass(frozen=True, slots=True)
class CharStats:
    """Per-character counters for one session."""

    char: str
    correct: int = 0
    incorrect: int = 0
    latency_sum_ms: int = 0
    latency_count: int = 0


@dataclass(frozen=True, slots=True)
class CharAggregate:
    """Per-character counters summed over several sessions."""

    char: str
    correct: int = 0
    incorrect: int = 0
    latency_sum_ms: int = 0
    latency_count: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        """Share of correct keystrokes; 1.0 when the character was never typed."""
        if self.total == 0:
            return 1.0
        return self.correct / self.total

    @property
    def avg_latency_ms(self) -> float:
        if self.latency_count <= 0:
            return 0.0
        return self.latency_sum_ms / self.latency_count


@dataclass(frozen=True, slots=True)
class SessionAggregate:
    """A session reduced to what the stats views need."""

    session_id: int
    ended_at: datetime
    correct: int
    incorrect: int
    duration_ms: int
