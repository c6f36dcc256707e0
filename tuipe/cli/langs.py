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

from tuipe.cli.exitcodes import EXIT_OK
from tuipe.core.errors import WordListError
from tuipe.core.paths import default_wordlist_dir
from tuipe.practice.wordlist import list_languages


def run() -> int:
    """Print installed word list languages, one per line."""
    directory = default_wordlist_dir()
    if not directory.is_dir():
        raise WordListError(code="wordlist_dir_missing", message=f"wordlist directory does not exist: {directory}")

    langs = list_languages(directory)
    if not langs:
        raise WordListError(code="no_wordlists", message="no wordlists found")

    for lang in langs:
        print(lang)
    return EXIT_OK
