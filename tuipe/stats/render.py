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
Text views over a StatsReport: summary, learning curves and per-character
tables/curves.
"""

from collections.abc import Mapping, Sequence

from tuipe.model.types import CharAggregate, SessionAggregate
from tuipe.plot import ColorMode, PlotRenderer, Series, TerminalCapabilities
from tuipe.stats.metrics import moving_average, session_metrics, sparkline
from tuipe.stats.table import format_table

DEFAULT_CURVE_HEIGHT = 10


def learning_curves(sessions: Sequence[SessionAggregate], window: int) -> tuple[list[float], list[float]]:
    """Moving averages of WPM and accuracy (percent), one point per session."""
    wpms: list[float] = []
    accs: list[float] = []
    for s in sessions:
        wpm, _, acc = session_metrics(s.correct, s.incorrect, s.duration_ms)
        wpms.append(wpm)
        accs.append(acc * 100)
    return moving_average(wpms, window), moving_average(accs, window)


def char_curves(
    sessions: Sequence[SessionAggregate],
    per_session: Mapping[int, Mapping[str, CharAggregate]],
    char: str,
    window: int,
) -> tuple[list[float], list[float]]:
    """Moving averages of accuracy (percent) and latency (ms) for one character."""
    accs: list[float] = []
    lats: list[float] = []
    for s in sessions:
        agg = per_session.get(s.session_id, {}).get(char)
        if agg is None:
            accs.append(0.0)
            lats.append(0.0)
            continue
        accs.append(agg.correct / agg.total * 100 if agg.total > 0 else 0.0)
        lats.append(agg.avg_latency_ms)
    return moving_average(accs, window), moving_average(lats, window)


def render_summary(sessions: Sequence[SessionAggregate]) -> str:
    if not sessions:
        return "No sessions found.\n"

    wpms: list[float] = []
    total_cpm = 0.0
    total_acc = 0.0
    for s in sessions:
        wpm, cpm, acc = session_metrics(s.correct, s.incorrect, s.duration_ms)
        wpms.append(wpm)
        total_cpm += cpm
        total_acc += acc

    count = len(sessions)
    lines = [
        "Summary",
        f"Sessions: {count}",
        f"Avg WPM: {sum(wpms) / count:.2f}",
        f"Best WPM: {max(wpms):.2f}",
        f"Avg CPM: {total_cpm / count:.2f}",
        f"Avg Accuracy: {total_acc / count * 100:.2f}%",
        f"WPM trend: [{sparkline(wpms)}]",
        "",
    ]
    return "\n".join(lines) + "\n"


def render_curves(
    sessions: Sequence[SessionAggregate],
    window: int,
    *,
    width: int | None = None,
    height: int = DEFAULT_CURVE_HEIGHT,
    color: ColorMode | str = ColorMode.AUTO,
    capabilities: TerminalCapabilities | None = None,
    renderer: PlotRenderer | None = None,
) -> str:
    """
    "Learning Curves" plot of WPM and accuracy.

    `width` is the total width available to the plot, axis included.
    """
    if not sessions:
        return ""
    wpms, accs = learning_curves(sessions, window)
    return (renderer or PlotRenderer()).render(
        [Series(name="WPM", values=wpms), Series(name="Accuracy", values=accs)],
        title="Learning Curves",
        width=width,
        height=height,
        color=color,
        capabilities=capabilities,
    )


def render_char_table(aggs: Sequence[CharAggregate]) -> str:
    """Per-character table, lowest accuracy first."""
    if not aggs:
        return "No character stats found.\n"

    ranked = sorted(aggs, key=lambda a: (a.correct / a.total if a.total else 0.0, a.char))
    rows = [
        [
            "<space>" if a.char == " " else a.char,
            f"{(a.correct / a.total if a.total else 0.0) * 100:.2f}%",
            f"{a.avg_latency_ms:.1f}",
            str(a.correct),
            str(a.incorrect),
        ]
        for a in ranked
    ]
    headers = ["Char", "Accuracy", "Avg Latency (ms)", "Correct", "Incorrect"]
    lines = ["Per-Character (Windowed)", *format_table(headers, rows, right_align={1, 2, 3, 4}), ""]
    return "\n".join(lines) + "\n"


def render_char_curves(
    sessions: Sequence[SessionAggregate],
    per_session: Mapping[int, Mapping[str, CharAggregate]],
    chars: Sequence[str],
    window: int,
    *,
    width: int | None = None,
    height: int = DEFAULT_CURVE_HEIGHT,
    color: ColorMode | str = ColorMode.AUTO,
    capabilities: TerminalCapabilities | None = None,
    renderer: PlotRenderer | None = None,
) -> str:
    """One "Char <c>" plot (accuracy and latency) per selected character."""
    if not chars or not sessions:
        return ""
    renderer = renderer or PlotRenderer()
    parts = ["Per-Character Curves\n"]
    for ch in chars:
        accs, lats = char_curves(sessions, per_session, ch, window)
        parts.append(
            renderer.render(
                [Series(name="Accuracy", values=accs), Series(name="Latency", values=lats)],
                title=f"Char {ch}",
                width=width,
                height=height,
                color=color,
                capabilities=capabilities,
            )
        )
    return "".join(parts)
