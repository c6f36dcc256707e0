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

import sys
from datetime import datetime

from loguru import logger

from tuipe.cli.exitcodes import EXIT_OK
from tuipe.core.errors import ConfigError
from tuipe.core.paths import default_db_path
from tuipe.model.types import DEFAULT_CURVE_WINDOW, StatsConfig
from tuipe.plot import ColorMode, PlotRenderer, StreamCapabilities
from tuipe.stats.render import (
    DEFAULT_CURVE_HEIGHT,
    learning_curves,
    render_char_curves,
    render_char_table,
    render_curves,
    render_summary,
)
from tuipe.stats.report import build_report
from tuipe.store.sqlite import SessionStore


def parse_since(value: str | None) -> datetime | None:
    """Parse YYYY-MM-DD as local midnight."""
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").astimezone()
    except ValueError as e:
        raise ConfigError(code="invalid_since", message=f"invalid --since value: {e}") from e


def show(
    *,
    lang: str = "",
    since: str | None = None,
    last: int = 0,
    curve_window: int = DEFAULT_CURVE_WINDOW,
    chars: str = "",
    width: int | None = None,
    height: int = DEFAULT_CURVE_HEIGHT,
    color: str = ColorMode.AUTO.value,
    output: str | None = None,
) -> int:
    """
    Print the stats dashboard: summary, learning curves and per-character views.

    Args:
        lang: Only sessions in this language
        since: Only sessions ended on or after this date (YYYY-MM-DD)
        last: Only the most recent N sessions (0 = all)
        curve_window: Moving-average window, also the per-character table window
        chars: Characters for per-character curves ("abc" or "a,b,th")
        width: Total plot width in columns (default: terminal width)
        height: Plot height in rows
        color: auto, always or never
        output: Also save the learning curves as an image (PNG, SVG, PDF)

    Returns:
        Exit code
    """
    if last < 0:
        raise ConfigError(code="invalid_last", message="--last must be >= 0")
    if curve_window < 0:
        raise ConfigError(code="invalid_curve_window", message="--curve-window must be >= 0")

    cfg = StatsConfig(
        lang=lang,
        since=parse_since(since),
        last=last,
        curve_window=curve_window,
        chars=chars,
    )

    with SessionStore(default_db_path()) as store:
        report = build_report(store, cfg)
    logger.debug(f"loaded {len(report.sessions)} session(s), {len(report.window_session_ids)} in window")

    renderer = PlotRenderer()
    caps = StreamCapabilities(sys.stdout)
    mode = ColorMode(color)

    print(render_summary(report.sessions), end="")
    if not report.sessions:
        return EXIT_OK

    print(
        render_curves(
            report.sessions,
            cfg.curve_window,
            width=width,
            height=height,
            color=mode,
            capabilities=caps,
            renderer=renderer,
        ),
        end="",
    )
    print(render_char_table(report.char_aggs_window), end="")
    print(
        render_char_curves(
            report.sessions,
            report.per_session_chars,
            report.chars,
            cfg.curve_window,
            width=width,
            height=height,
            color=mode,
            capabilities=caps,
            renderer=renderer,
        ),
        end="",
    )

    if output:
        from tuipe.cli._mpl_chart import render_curves_chart

        wpm, acc = learning_curves(report.sessions, cfg.curve_window)
        render_curves_chart(report.sessions, wpm, acc, output_path=output)
        print(f"Chart saved to {output}")
    return EXIT_OK
