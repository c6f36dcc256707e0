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
from dataclasses import dataclass, field

from tuipe.model.types import CharAggregate, SessionAggregate, StatsConfig
from tuipe.stats.chars import parse_chars, top_chars_by_frequency
from tuipe.store.sqlite import SessionStore

# Characters charted when the user picked none.
DEFAULT_CHAR_SELECTION = 5


@dataclass(frozen=True, slots=True)
class StatsReport:
    """
    Everything the stats views need, loaded in one go.

    `window_session_ids` are the last `curve_window` sessions; the windowed
    character aggregates are computed over those only. `chars` is the
    per-character curve selection and `per_session_chars` its data.
    """

    sessions: tuple[SessionAggregate, ...] = ()
    window_session_ids: tuple[int, ...] = ()
    char_aggs_all: tuple[CharAggregate, ...] = ()
    char_aggs_window: tuple[CharAggregate, ...] = ()
    chars: tuple[str, ...] = ()
    per_session_chars: dict[int, dict[str, CharAggregate]] = field(default_factory=dict)


def _session_ids(sessions: Sequence[SessionAggregate]) -> tuple[int, ...]:
    return tuple(s.session_id for s in sessions)


def _last_session_ids(sessions: Sequence[SessionAggregate], window: int) -> tuple[int, ...]:
    if window <= 0 or len(sessions) <= window:
        return _session_ids(sessions)
    return _session_ids(sessions[-window:])


def build_report(store: SessionStore, cfg: StatsConfig) -> StatsReport:
    """
    Load sessions and character aggregates for the stats views.

    `cfg.last` keeps only the most recent sessions. When `cfg.chars` is empty
    the most frequently typed characters are selected for per-char curves.
    """
    sessions = store.list_sessions(cfg)
    if cfg.last > 0 and len(sessions) > cfg.last:
        sessions = sessions[-cfg.last :]

    all_ids = _session_ids(sessions)
    window_ids = _last_session_ids(sessions, cfg.curve_window)
    char_aggs_all = store.char_aggregates_for_sessions(all_ids)

    chars = parse_chars(cfg.chars) or top_chars_by_frequency(char_aggs_all, DEFAULT_CHAR_SELECTION)

    return StatsReport(
        sessions=tuple(sessions),
        window_session_ids=window_ids,
        char_aggs_all=tuple(char_aggs_all),
        char_aggs_window=tuple(store.char_aggregates_for_sessions(window_ids)),
        chars=tuple(chars),
        per_session_chars=store.char_stats_for_sessions(all_ids, chars),
    )
