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
from tuipe.core.errors import ConfigError
from tuipe.core.paths import default_wordlist_path
from tuipe.practice.wordlist import import_word_list


def add(*, lang: str, source: str, size: int | None = None, force: bool = False) -> int:
    """
    Install a plain-text word list as the list for `lang`.

    Args:
        lang: Language code; the list is saved as <lang>.txt
        source: Path of a file with one word per line
        size: Keep only the first N usable words
        force: Overwrite an existing list
    """
    lang = lang.strip()
    if not lang:
        raise ConfigError(code="invalid_lang", message="--lang must not be empty")
    if size is not None and size <= 0:
        raise ConfigError(code="invalid_size", message="--size must be greater than 0")

    target = default_wordlist_path(lang)
    count = import_word_list(source, target, lang, size=size, force=force)
    print(f"Wrote {count} words to {target}")
    return EXIT_OK
