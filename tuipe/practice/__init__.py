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

from tuipe.practice.controller import PracticeController
from tuipe.practice.generator import WordGenerator
from tuipe.practice.session import (
    CellState,
    FooterStats,
    StyledCell,
    TypingSession,
    display_width,
    format_footer,
    styled_cells,
    wrap_spans,
)
from tuipe.practice.wordlist import filter_for_lang, import_word_list, list_languages, load_words, write_word_list

__all__ = [
    "PracticeController",
    "WordGenerator",
    "TypingSession",
    "FooterStats",
    "CellState",
    "StyledCell",
    "styled_cells",
    "wrap_spans",
    "display_width",
    "format_footer",
    "load_words",
    "filter_for_lang",
    "list_languages",
    "write_word_list",
    "import_word_list",
]
