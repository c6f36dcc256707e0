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

from collections.abc import Mapping
from typing import Any

from loguru import logger

from tuipe.cli.exitcodes import EXIT_OK
from tuipe.core.config import load_config, resolve_practice_config, validate_practice_config
from tuipe.core.errors import WordListError
from tuipe.core.paths import default_config_path, default_db_path, default_wordlist_path
from tuipe.practice.controller import PracticeController
from tuipe.practice.screen import run_practice
from tuipe.practice.wordlist import load_words
from tuipe.store.sqlite import SessionStore


def _missing_wordlist_error(lang: str, path: str, cause: WordListError) -> WordListError:
    lines = [
        f"failed to load word list: {cause}",
        f"expected word list at: {path}",
        f'language "{lang}" not found',
        "Run: tuipe langs",
        f"Install: tuipe wordlist add --lang {lang} --from <file>",
    ]
    return WordListError(code=cause.code, message="\n".join(lines))


def run(overrides: Mapping[str, Any] | None = None) -> int:
    """
    Start a practice run.

    Args:
        overrides: PracticeConfig field values given on the command line
                   (None values are ignored)

    Returns:
        Exit code
    """
    file_config = load_config(default_config_path())
    cfg = resolve_practice_config(file_config, overrides)
    validate_practice_config(cfg)
    if file_config.path is not None:
        logger.debug(f"loaded config from {file_config.path}")

    wordlist_path = default_wordlist_path(cfg.lang)
    try:
        words = load_words(wordlist_path)
    except WordListError as e:
        raise _missing_wordlist_error(cfg.lang, str(wordlist_path), e) from e
    logger.debug(f"loaded {len(words)} words from {wordlist_path}")

    with SessionStore(default_db_path()) as store:
        controller = PracticeController(store, words, cfg, str(wordlist_path))
        completed = run_practice(controller)

    logger.info(f"completed {completed} session(s)")
    return EXIT_OK
