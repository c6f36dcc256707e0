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
from pathlib import Path

from tuipe.model.types import SessionAggregate


def render_curves_chart(
    sessions: Sequence[SessionAggregate],
    wpm: Sequence[float],
    accuracy: Sequence[float],
    *,
    output_path: str,
    title: str | None = None,
) -> None:
    """
    Render the learning curves to an image file using matplotlib.

    Args:
        sessions: Sessions the curve points belong to (one point each)
        wpm: Moving-average WPM per session
        accuracy: Moving-average accuracy (percent) per session
        output_path: Path to save the image (PNG, SVG, PDF supported)
        title: Optional chart title

    Raises:
        ImportError: If matplotlib is not installed
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.dates as mdates
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError("matplotlib is required for image export. Install it with: pip install tuipe[viz]") from e

    dates = [s.ended_at for s in sessions]

    fig, ax_wpm = plt.subplots(figsize=(10, 6))
    ax_acc = ax_wpm.twinx()

    ax_wpm.plot(dates, wpm, marker="o", linewidth=2, markersize=4, color="#0891b2", label="WPM")
    ax_acc.plot(dates, accuracy, linewidth=2, linestyle="--", color="#c026d3", label="Accuracy")

    ax_wpm.xaxis.set_major_formatter(mdates.DateFormatter("%b %d"))
    ax_wpm.xaxis.set_major_locator(mdates.AutoDateLocator())
    plt.setp(ax_wpm.get_xticklabels(), rotation=45)

    ax_wpm.set_xlabel("Session end", fontsize=12)
    ax_wpm.set_ylabel("WPM", fontsize=12)
    ax_acc.set_ylabel("Accuracy (%)", fontsize=12)
    ax_wpm.set_title(title or "Learning Curves", fontsize=14, fontweight="bold")

    ax_wpm.grid(True, alpha=0.3)
    ax_wpm.set_axisbelow(True)

    lines = ax_wpm.get_lines() + ax_acc.get_lines()
    ax_wpm.legend(lines, [line.get_label() for line in lines], loc="lower right")

    plt.tight_layout()

    output = Path(output_path)
    fig.savefig(output, dpi=150, bbox_inches="tight")
    plt.close(fig)
