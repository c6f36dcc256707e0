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
Typing session bookkeeping, independent of any screen library.

Only non-space characters are scored. A keystroke is scored against the
character expected at the cursor; backspace moves the cursor back but never
undoes a score. Latency is the time between two consecutive correct
keystrokes and is attributed to the second one.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from wcwidth import wcwidth

from tuipe.model.types import CharStats, PracticeConfig, SessionAggregate, SessionStats
from tuipe.stats.metrics import session_metrics

WRONG_SPACE_MARKER = "•"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class _CharCounter:
    correct: int = 0
    incorrect: int = 0
    latency_sum_ms: int = 0
    latency_count: int = 0


class TypingSession:
    """One practice text being typed."""

    def __init__(self, target: str, *, clock: Callable[[], datetime] = utc_now) -> None:
        self.target = target
        self._clock = clock
        self._typed: list[str] = []
        self.started_at: datetime | None = None
        self._prev_correct_at: datetime | None = None
        self.correct_nonspace = 0
        self.incorrect_nonspace = 0
        self._chars: dict[str, _CharCounter] = {}

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    @property
    def started(self) -> bool:
        return self.started_at is not None

    @property
    def finished(self) -> bool:
        return bool(self.target) and len(self._typed) >= len(self.target)

    @property
    def progress(self) -> int:
        """Percent of the target typed, 0-100."""
        if not self.target:
            return 0
        return int(len(self._typed) / len(self.target) * 100)

    def type_char(self, ch: str) -> None:
        if self.finished:
            return
        if self.started_at is None:
            self.started_at = self._clock()
        expected = self.target[len(self._typed)]
        self._typed.append(ch)
        self._score(expected, ch)

    def type_text(self, text: str) -> None:
        for ch in text:
            self.type_char(ch)

    def backspace(self) -> None:
        if self._typed:
            self._typed.pop()

    def _score(self, expected: str, typed: str) -> None:
        if expected == " ":
            return
        counter = self._chars.setdefault(expected, _CharCounter())
        if typed != expected:
            self.incorrect_nonspace += 1
            counter.incorrect += 1
            return

        self.correct_nonspace += 1
        counter.correct += 1
        now = self._clock()
        if self._prev_correct_at is not None:
            counter.latency_sum_ms += int((now - self._prev_correct_at).total_seconds() * 1000)
            counter.latency_count += 1
        self._prev_correct_at = now

    def char_stats(self) -> list[CharStats]:
        return [
            CharStats(
                char=ch,
                correct=c.correct,
                incorrect=c.incorrect,
                latency_sum_ms=c.latency_sum_ms,
                latency_count=c.latency_count,
            )
            for ch, c in sorted(self._chars.items())
        ]

    def to_records(self, config: PracticeConfig, wordlist_path: str) -> tuple[SessionStats, list[CharStats]] | None:
        """
        Session row and per-character rows, ending the session now.

        Returns None when nothing was typed.
        """
        if self.started_at is None:
            return None
        ended_at = self._clock()
        stats = SessionStats(
            started_at=self.started_at,
            ended_at=ended_at,
            lang=config.lang,
            words=config.words,
            caps_pct=config.caps_pct,
            punct_pct=config.punct_pct,
            punct_set=config.punct_set,
            wordlist_path=wordlist_path,
            correct_nonspace=self.correct_nonspace,
            incorrect_nonspace=self.incorrect_nonspace,
            duration_ms=int((ended_at - self.started_at).total_seconds() * 1000),
        )
        return stats, self.char_stats()


# Display helpers


class CellState(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CURRENT_WORD = "current_word"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class StyledCell:
    char: str
    state: CellState
    cursor: bool = False
    is_space: bool = False


def word_spans(text: str) -> list[tuple[int, int]]:
    """Half-open (start, end) ranges of the space-separated words in `text`."""
    spans: list[tuple[int, int]] = []
    start = -1
    for i, ch in enumerate(text):
        if ch == " ":
            if start != -1:
                spans.append((start, i))
                start = -1
        elif start == -1:
            start = i
    if start != -1:
        spans.append((start, len(text)))
    return spans


def word_for_cursor(spans: Sequence[tuple[int, int]], cursor: int) -> tuple[int, int] | None:
    """The word the cursor is in, or the next one when it sits on a space."""
    if not spans:
        return None
    if cursor < 0:
        return spans[0]
    for start, end in spans:
        if start <= cursor < end or cursor < start:
            return (start, end)
    return spans[-1]


def styled_cells(target: str, typed: str) -> list[StyledCell]:
    """
    Classify every target character for display.

    Typed characters are correct/incorrect (a mistyped space shows as a dot),
    the rest of the word under the cursor is highlighted, everything after is
    pending.
    """
    cursor = len(typed) if len(typed) < len(target) else -1
    current = word_for_cursor(word_spans(target), cursor)

    cells: list[StyledCell] = []
    for i, ch in enumerate(target):
        shown = ch
        if i < len(typed):
            if ch == " " and typed[i] != " ":
                shown = WRONG_SPACE_MARKER
                state = CellState.INCORRECT
            elif typed[i] == ch:
                state = CellState.CORRECT
            else:
                state = CellState.INCORRECT
        elif ch != " " and current is not None and current[0] <= i < current[1]:
            state = CellState.CURRENT_WORD
        else:
            state = CellState.PENDING
        cells.append(StyledCell(char=shown, state=state, cursor=i == cursor, is_space=ch == " "))
    return cells


def char_width(ch: str) -> int:
    """Terminal columns taken by `ch`; wide glyphs take 2, control characters 0."""
    return max(wcwidth(ch), 0)


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def wrap_spans(text: str, width: int) -> list[tuple[int, int]]:
    """
    Word-wrap `text` to `width` terminal columns.

    Returns (start, end) ranges into `text`, one per line; the space a line
    breaks at is dropped. Words wider than `width` are split.
    """
    if width <= 0 or not text:
        return [(0, len(text))]

    lines: list[tuple[int, int]] = []
    start = 0
    line_width = 0
    last_space = -1
    i = 0
    while i < len(text):
        w = char_width(text[i])
        if line_width + w > width and i > start:
            if last_space >= start:
                lines.append((start, last_space))
                start = last_space + 1
                line_width = display_width(text[start:i])
                last_space = text.rfind(" ", start, i)
            else:
                lines.append((start, i))
                start = i
                line_width = 0
                last_space = -1
            continue
        line_width += w
        if text[i] == " ":
            last_space = i
        i += 1
    lines.append((start, len(text)))
    return lines


@dataclass(slots=True)
class FooterStats:
    """Last-session and all-time rates shown under the practice text."""

    last: tuple[float, float] | None = None
    correct: int = 0
    incorrect: int = 0
    duration_ms: int = 0
    _all_time: tuple[float, float] = field(default=(0.0, 0.0), repr=False)

    @classmethod
    def from_sessions(cls, sessions: Sequence[SessionAggregate]) -> "FooterStats":
        footer = cls()
        for s in sessions:
            footer._accumulate(s.correct, s.incorrect, s.duration_ms)
        if sessions:
            wpm, _, acc = session_metrics(sessions[-1].correct, sessions[-1].incorrect, sessions[-1].duration_ms)
            footer.last = (wpm, acc)
        return footer

    def add(self, stats: SessionStats) -> None:
        wpm, _, acc = session_metrics(stats.correct_nonspace, stats.incorrect_nonspace, stats.duration_ms)
        self.last = (wpm, acc)
        self._accumulate(stats.correct_nonspace, stats.incorrect_nonspace, stats.duration_ms)

    def _accumulate(self, correct: int, incorrect: int, duration_ms: int) -> None:
        self.correct += correct
        self.incorrect += incorrect
        self.duration_ms += duration_ms
        wpm, _, acc = session_metrics(self.correct, self.incorrect, self.duration_ms)
        self._all_time = (wpm, acc)

    def render(self, progress: int) -> str:
        return format_footer(progress, self.last, self._all_time)


def format_footer(
    progress: int,
    last: tuple[float, float] | None,
    all_time: tuple[float, float],
) -> str:
    """"Progress N%  Last x WPM · y%  All-time x WPM · y%" (accuracies given as 0-1)."""
    segments = [f"Progress {progress}%"]
    if last is not None:
        segments.append(f"Last {last[0]:.1f} WPM · {last[1] * 100:.1f}%")
    segments.append(f"All-time {all_time[0]:.1f} WPM · {all_time[1] * 100:.1f}%")
    return "  ".join(segments)
