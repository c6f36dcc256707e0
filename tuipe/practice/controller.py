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
Practice loop state: one TypingSession at a time, saved when finished and
immediately replaced by a fresh text.
"""

import random
from collections.abc import Callable, Sequence
from datetime import datetime

from loguru import logger

from tuipe.core.errors import StoreError
from tuipe.model.types import PracticeConfig, StatsConfig
from tuipe.practice.generator import WordGenerator
from tuipe.practice.session import FooterStats, TypingSession, utc_now
from tuipe.stats.chars import select_weak_chars
from tuipe.store.sqlite import SessionStore


class PracticeController:
    def __init__(
        self,
        store: SessionStore,
        words: Sequence[str],
        config: PracticeConfig,
        wordlist_path: str,
        *,
        generator: WordGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._words = list(words)
        self._config = config
        self._wordlist_path = wordlist_path
        self._generator = generator or WordGenerator(random.Random())
        self._clock = clock
        self._weak_chars: set[str] = set()
        self._weak_notice_logged = False
        self.completed = 0

        self.footer = self._load_footer()
        if config.focus_weak:
            self.refresh_weak_chars()
        self.session = self._new_session()

    @property
    def weak_chars(self) -> set[str]:
        return set(self._weak_chars)

    def _load_footer(self) -> FooterStats:
        try:
            sessions = self._store.list_sessions(StatsConfig(lang=self._config.lang))
        except StoreError as e:
            logger.warning(f"failed to load session stats: {e}")
            return FooterStats()
        return FooterStats.from_sessions(sessions)

    def _generate_text(self) -> str:
        c = self._config
        if c.focus_weak and self._weak_chars:
            words = self._generator.generate_weighted(
                self._words, c.words, c.caps_pct, c.punct_pct, c.punct_set, self._weak_chars, c.weak_factor
            )
        else:
            words = self._generator.generate(self._words, c.words, c.caps_pct, c.punct_pct, c.punct_set)
        return " ".join(words)

    def _new_session(self) -> TypingSession:
        return TypingSession(self._generate_text(), clock=self._clock)

    def refresh_weak_chars(self) -> None:
        try:
            aggs = self._store.weak_chars(self._config.weak_window, self._config.lang)
        except StoreError as e:
            logger.warning(f"failed to load weak chars: {e}")
            return
        if not aggs:
            if not self._weak_notice_logged:
                logger.info("no stats available for weak-char focus yet; using normal generator")
                self._weak_notice_logged = True
            self._weak_chars = set()
            return
        self._weak_chars = select_weak_chars(aggs, self._config.weak_top)
        logger.debug(f"weak chars: {''.join(sorted(self._weak_chars))}")

    def type_text(self, text: str) -> None:
        """Feed keystrokes; a session that completes is saved and replaced."""
        for ch in text:
            self.session.type_char(ch)
            if self.session.finished:
                self.finish()

    def backspace(self) -> None:
        self.session.backspace()

    def finish(self) -> None:
        records = self.session.to_records(self._config, self._wordlist_path)
        self.session = self._new_session()
        if records is None:
            return

        stats, chars = records
        try:
            session_id = self._store.insert_session(stats, chars)
            logger.debug(f"saved session {session_id} ({stats.correct_nonspace} correct, {stats.incorrect_nonspace} incorrect)")
        except StoreError as e:
            logger.error(f"failed to save session: {e}")
        self.completed += 1
        self.footer.add(stats)

        if self._config.focus_weak:
            self.refresh_weak_chars()

    def footer_text(self) -> str:
        return self.footer.render(self.session.progress)
