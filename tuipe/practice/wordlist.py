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
Word lists: one word per line, stored as <lang>.txt in the word list directory.
"""

import os
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from tuipe.core.errors import WordListError

# Files shipped next to the word lists that are not languages.
_NON_LANGUAGE_FILES = {"ATTRIBUTION.txt", "LICENSE.txt", "DATA_LICENSE.txt"}

WordFilter = Callable[[str], bool]


def _is_ascii_lowercase_word(word: str) -> bool:
    return bool(word) and all("a" <= ch <= "z" for ch in word)


def _accept_any(word: str) -> bool:
    return True


def filter_for_lang(lang: str) -> WordFilter:
    """Word filter for a language; English keeps plain a-z words only."""
    if lang.lower() == "en":
        return _is_ascii_lowercase_word
    return _accept_any


def load_words(path: str | Path) -> list[str]:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(code="wordlist_unreadable", message=f"failed to read word list {path}: {e}") from e

    words = [line.strip() for line in raw.splitlines() if line.strip()]
    if not words:
        raise WordListError(code="wordlist_empty", message=f"word list is empty: {path}")
    return words


def list_languages(directory: str | Path) -> list[str]:
    """Languages with a word list in `directory`, sorted."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        p.stem for p in directory.iterdir() if p.is_file() and p.suffix == ".txt" and p.name not in _NON_LANGUAGE_FILES
    )


def write_word_list(path: str | Path, words: Iterable[str]) -> None:
    """Write words one per line, replacing `path` atomically."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix="wordlist-", suffix=".txt", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for word in words:
                    f.write(word + "\n")
            os.replace(tmp_name, path)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
    except OSError as e:
        raise WordListError(code="wordlist_write_failed", message=f"failed to write {path}: {e}") from e


def import_word_list(
    source: str | Path,
    target: str | Path,
    lang: str,
    *,
    size: int | None = None,
    force: bool = False,
) -> int:
    """
    Install a plain-text word list for `lang`.

    Words are filtered for the language and de-duplicated in order; `size`
    keeps only the first N. Returns the number of words written.
    """
    target = Path(target)
    if target.exists() and not force:
        raise WordListError(
            code="wordlist_exists",
            message=f"word list already exists: {target} (use --force to overwrite)",
        )

    keep = filter_for_lang(lang)
    seen: set[str] = set()
    words: list[str] = []
    for word in load_words(source):
        if word in seen or not keep(word):
            continue
        seen.add(word)
        words.append(word)
        if size is not None and len(words) >= size:
            break

    if not words:
        raise WordListError(code="wordlist_empty", message=f"no usable {lang} words in {source}")

    write_word_list(target, words)
    return len(words)
