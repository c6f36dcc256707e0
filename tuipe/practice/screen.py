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
Full-screen practice view (curses).

The typed text is wrapped to 70% of the terminal width and centered, with
the progress footer on the last line. Esc or Ctrl-C leaves.
"""

import curses

from loguru import logger

from tuipe.practice.controller import PracticeController
from tuipe.practice.session import CellState, char_width, display_width, styled_cells, wrap_spans

CONTENT_WIDTH_RATIO = 0.70

KEY_ESC = "\x1b"
KEY_CTRL_C = "\x03"
_BACKSPACE_KEYS = {curses.KEY_BACKSPACE, curses.KEY_DC, "\x7f", "\x08"}

COLOR_CORRECT = 1
COLOR_INCORRECT = 2
COLOR_CURRENT = 3
COLOR_PENDING = 4
COLOR_FOOTER = 5


class PracticeScreen:
    def __init__(self, stdscr: "curses.window", controller: PracticeController) -> None:
        self.stdscr = stdscr
        self.controller = controller
        self._attrs: dict[CellState, int] = {}

    def init_colors(self) -> None:
        attrs = {
            CellState.CORRECT: curses.A_NORMAL,
            CellState.INCORRECT: curses.A_BOLD,
            CellState.CURRENT_WORD: curses.A_UNDERLINE,
            CellState.PENDING: curses.A_DIM,
        }
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(COLOR_CORRECT, curses.COLOR_GREEN, -1)
            curses.init_pair(COLOR_INCORRECT, curses.COLOR_RED, -1)
            curses.init_pair(COLOR_CURRENT, curses.COLOR_YELLOW, -1)
            curses.init_pair(COLOR_PENDING, -1, -1)
            curses.init_pair(COLOR_FOOTER, curses.COLOR_CYAN, -1)
            attrs[CellState.CORRECT] |= curses.color_pair(COLOR_CORRECT)
            attrs[CellState.INCORRECT] |= curses.color_pair(COLOR_INCORRECT)
            attrs[CellState.CURRENT_WORD] |= curses.color_pair(COLOR_CURRENT)
            attrs[CellState.PENDING] |= curses.color_pair(COLOR_PENDING)
        self._attrs = attrs

    def draw(self) -> None:
        self.stdscr.erase()
        maxy, maxx = self.stdscr.getmaxyx()
        session = self.controller.session
        cells = styled_cells(session.target, session.typed)

        content_width = max(int(maxx * CONTENT_WIDTH_RATIO), 1)
        lines = wrap_spans(session.target, content_width)
        body_height = maxy - 1 if maxy >= 3 else maxy
        top = max((body_height - len(lines)) // 2, 0)
        left = max((maxx - content_width) // 2, 0)

        for row, (start, end) in enumerate(lines):
            y = top + row
            if y >= body_height:
                break
            x = left
            for cell in cells[start:end]:
                w = char_width(cell.char)
                if x + w > maxx - 1:
                    break
                attr = self._attrs.get(cell.state, curses.A_NORMAL)
                if cell.cursor:
                    attr |= curses.A_REVERSE
                self._put(y, x, cell.char, attr)
                x += w

        if maxy >= 3:
            footer = self.controller.footer_text()[: maxx - 1]
            attr = curses.color_pair(COLOR_FOOTER) if curses.has_colors() else curses.A_DIM
            self._put(maxy - 1, max((maxx - display_width(footer)) // 2, 0), footer, attr)
        self.stdscr.refresh()

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell raises after a successful write.
            pass

    def handle_key(self, key: "str | int") -> bool:
        """Apply one key; returns False when the user asked to quit."""
        if key in (KEY_ESC, KEY_CTRL_C):
            return False
        if key in _BACKSPACE_KEYS:
            self.controller.backspace()
        elif isinstance(key, str) and key.isprintable():
            self.controller.type_text(key)
        return True

    def run(self) -> None:
        self.init_colors()
        try:
            curses.curs_set(0)
        except curses.error:
            pass

        while True:
            self.draw()
            try:
                key = self.stdscr.get_wch()
            except curses.error:
                continue
            if key == curses.KEY_RESIZE:
                continue
            if not self.handle_key(key):
                break


def run_practice(controller: PracticeController) -> int:
    """Run the practice screen until the user quits; returns completed sessions."""

    def _session(stdscr: "curses.window") -> None:
        PracticeScreen(stdscr, controller).run()

    try:
        curses.wrapper(_session)
    except KeyboardInterrupt:
        logger.debug("practice interrupted")
    return controller.completed
