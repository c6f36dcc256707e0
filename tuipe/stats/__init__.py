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

from tuipe.stats.chars import parse_chars, select_weak_chars, top_chars_by_frequency
from tuipe.stats.metrics import moving_average, session_metrics, sparkline
from tuipe.stats.render import render_char_curves, render_char_table, render_curves, render_summary
from tuipe.stats.report import StatsReport, build_report
from tuipe.stats.table import format_table

__all__ = [
    "StatsReport",
    "build_report",
    "session_metrics",
    "moving_average",
    "sparkline",
    "format_table",
    "top_chars_by_frequency",
    "select_weak_chars",
    "parse_chars",
    "render_summary",
    "render_curves",
    "render_char_table",
    "render_char_curves",
]
