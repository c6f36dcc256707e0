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
SQLite persistence for practice sessions.

Schema:
  sessions            one row per finished session
  session_char_stats  per-character counters, keyed by (session_id, char)

Timestamps are stored as UTC ISO-8601 strings so they sort lexically.
"""

import sqlite3
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from types import TracebackType

from tuipe.core.errors import StoreError
from tuipe.model.types import CharAggregate, CharStats, SessionAggregate, SessionStats, StatsConfig

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS sessions (
        id INTEGER PRIMARY KEY,
        started_at TEXT NOT NULL,
        ended_at TEXT NOT NULL,
        lang TEXT NOT NULL,
        words INTEGER NOT NULL,
        caps_pct REAL NOT NULL,
        punct_pct REAL NOT NULL,
        punct_set TEXT NOT NULL,
        wordlist_path TEXT NOT NULL,
        correct_nonspace INTEGER NOT NULL,
        incorrect_nonspace INTEGER NOT NULL,
        duration_ms INTEGER NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS session_char_stats (
        session_id INTEGER NOT NULL,
        char TEXT NOT NULL,
        correct INTEGER NOT NULL,
        incorrect INTEGER NOT NULL,
        latency_sum_ms INTEGER NOT NULL,
        latency_count INTEGER NOT NULL,
        PRIMARY KEY (session_id, char)
    )""",
    "CREATE INDEX IF NOT EXISTS idx_sessions_ended_at ON sessions(ended_at)",
    "CREATE INDEX IF NOT EXISTS idx_session_char_stats_char ON session_char_stats(char)",
)


def _to_db_time(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _from_db_time(value: str) -> datetime:
    return datetime.fromisoformat(value)


def _placeholders(count: int) -> str:
    return ",".join("?" * count)


class SessionStore:
    """
    Session database.

    Opening creates the parent directory and the schema if needed. Use as a
    context manager, or call close() explicitly.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        try:
            if str(path) != ":memory:":
                self._path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(path))
        except (OSError, sqlite3.Error) as e:
            raise StoreError(code="db_open_failed", message=f"failed to open db {path}: {e}") from e

        try:
            self._migrate()
        except StoreError:
            self._conn.close()
            raise

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "SessionStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _migrate(self) -> None:
        try:
            with self._conn:
                for stmt in _SCHEMA:
                    self._conn.execute(stmt)
        except sqlite3.Error as e:
            raise StoreError(code="db_migrate_failed", message=f"failed to migrate db: {e}") from e

    def insert_session(self, stats: SessionStats, chars: Sequence[CharStats] = ()) -> int:
        """Store a finished session and its per-character stats in one transaction."""
        try:
            with self._conn:
                cur = self._conn.execute(
                    """INSERT INTO sessions (started_at, ended_at, lang, words, caps_pct, punct_pct,
                        punct_set, wordlist_path, correct_nonspace, incorrect_nonspace, duration_ms)
                       VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                    (
                        _to_db_time(stats.started_at),
                        _to_db_time(stats.ended_at),
                        stats.lang,
                        stats.words,
                        stats.caps_pct,
                        stats.punct_pct,
                        stats.punct_set,
                        stats.wordlist_path,
                        stats.correct_nonspace,
                        stats.incorrect_nonspace,
                        stats.duration_ms,
                    ),
                )
                session_id = int(cur.lastrowid or 0)
                self._conn.executemany(
                    """INSERT INTO session_char_stats
                        (session_id, char, correct, incorrect, latency_sum_ms, latency_count)
                       VALUES (?, ?, ?, ?, ?, ?)""",
                    [
                        (session_id, c.char, c.correct, c.incorrect, c.latency_sum_ms, c.latency_count)
                        for c in chars
                    ],
                )
        except sqlite3.Error as e:
            raise StoreError(code="db_write_failed", message=f"failed to save session: {e}") from e
        return session_id

    def weak_chars(self, window: int, lang: str = "") -> list[CharAggregate]:
        """Character aggregates over the `window` most recent sessions (optionally for one language)."""
        if window <= 0:
            return []
        query = """WITH recent_sessions AS (
                SELECT id FROM sessions
                WHERE (? = '' OR lang = ?)
                ORDER BY ended_at DESC
                LIMIT ?
            )
            SELECT cs.char, SUM(cs.correct), SUM(cs.incorrect),
                SUM(cs.latency_sum_ms), SUM(cs.latency_count)
            FROM session_char_stats cs
            JOIN recent_sessions r ON r.id = cs.session_id
            GROUP BY cs.char"""
        return [CharAggregate(*row) for row in self._query(query, (lang, lang, window))]

    def list_sessions(self, cfg: StatsConfig | None = None) -> list[SessionAggregate]:
        """Sessions matching the language/since filters, oldest first."""
        cfg = cfg or StatsConfig()
        clauses = ["1=1"]
        args: list[object] = []
        if cfg.lang:
            clauses.append("lang = ?")
            args.append(cfg.lang)
        if cfg.since is not None:
            clauses.append("ended_at >= ?")
            args.append(_to_db_time(cfg.since))

        query = f"""SELECT id, ended_at, correct_nonspace, incorrect_nonspace, duration_ms
            FROM sessions
            WHERE {" AND ".join(clauses)}
            ORDER BY ended_at ASC, id ASC"""

        return [
            SessionAggregate(
                session_id=row[0],
                ended_at=_from_db_time(row[1]),
                correct=row[2],
                incorrect=row[3],
                duration_ms=row[4],
            )
            for row in self._query(query, tuple(args))
        ]

    def char_aggregates_for_sessions(self, session_ids: Sequence[int]) -> list[CharAggregate]:
        if not session_ids:
            return []
        query = f"""SELECT char, SUM(correct), SUM(incorrect), SUM(latency_sum_ms), SUM(latency_count)
            FROM session_char_stats
            WHERE session_id IN ({_placeholders(len(session_ids))})
            GROUP BY char"""
        return [CharAggregate(*row) for row in self._query(query, tuple(session_ids))]

    def char_stats_for_sessions(
        self,
        session_ids: Sequence[int],
        chars: Sequence[str],
    ) -> dict[int, dict[str, CharAggregate]]:
        """Per-session stats for the selected characters: {session_id: {char: aggregate}}."""
        if not session_ids or not chars:
            return {}
        query = f"""SELECT session_id, char, correct, incorrect, latency_sum_ms, latency_count
            FROM session_char_stats
            WHERE session_id IN ({_placeholders(len(session_ids))})
              AND char IN ({_placeholders(len(chars))})"""

        result: dict[int, dict[str, CharAggregate]] = {}
        for session_id, *rest in self._query(query, (*session_ids, *chars)):
            agg = CharAggregate(*rest)
            result.setdefault(session_id, {})[agg.char] = agg
        return result

    def _query(self, query: str, args: tuple[object, ...]) -> list[tuple]:
        try:
            return self._conn.execute(query, args).fetchall()
        except sqlite3.Error as e:
            raise StoreError(code="db_read_failed", message=f"failed to query db: {e}") from e
