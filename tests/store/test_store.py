import sqlite3
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from tuipe.core.errors import StoreError
from tuipe.model.types import CharStats, SessionStats, StatsConfig
from tuipe.store.sqlite import SessionStore

BASE = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_stats(minute: int, *, lang: str = "en", correct: int = 20, incorrect: int = 2) -> SessionStats:
    start = BASE + timedelta(minutes=minute)
    return SessionStats(
        started_at=start,
        ended_at=start + timedelta(seconds=45),
        lang=lang,
        words=25,
        caps_pct=0.5,
        punct_pct=0.5,
        punct_set=".,",
        wordlist_path="/tmp/en.txt",
        correct_nonspace=correct,
        incorrect_nonspace=incorrect,
        duration_ms=45_000,
    )


class TestSessionStore:
    def test_creates_parent_directory_and_schema(self, tmp_path: Path):
        db = tmp_path / "nested" / "dir" / "tuipe.db"
        with SessionStore(db):
            pass
        assert db.exists()
        with sqlite3.connect(db) as conn:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        assert {"sessions", "session_char_stats"} <= tables

    def test_insert_and_list_in_order(self, tmp_path: Path):
        with SessionStore(tmp_path / "t.db") as store:
            late = store.insert_session(make_stats(5))
            early = store.insert_session(make_stats(1, correct=7, incorrect=3))
            sessions = store.list_sessions()

        assert [s.session_id for s in sessions] == [early, late]
        assert sessions[0].correct == 7
        assert sessions[0].incorrect == 3
        assert sessions[0].duration_ms == 45_000
        assert sessions[0].ended_at == BASE + timedelta(minutes=1, seconds=45)

    def test_since_filter(self, tmp_path: Path):
        with SessionStore(tmp_path / "t.db") as store:
            store.insert_session(make_stats(0))
            keep = store.insert_session(make_stats(60))
            sessions = store.list_sessions(StatsConfig(since=BASE + timedelta(minutes=30)))
        assert [s.session_id for s in sessions] == [keep]

    def test_weak_chars_uses_recent_window(self, tmp_path: Path):
        with SessionStore(tmp_path / "t.db") as store:
            store.insert_session(make_stats(0), [CharStats("x", correct=0, incorrect=9)])
            store.insert_session(make_stats(1), [CharStats("a", correct=2, incorrect=1, latency_sum_ms=30, latency_count=1)])
            store.insert_session(make_stats(2), [CharStats("a", correct=3, latency_sum_ms=70, latency_count=2)])

            aggs = store.weak_chars(2)
            assert [a.char for a in aggs] == ["a"]
            assert aggs[0].correct == 5
            assert aggs[0].incorrect == 1
            assert aggs[0].avg_latency_ms == pytest.approx(100 / 3)

            assert store.weak_chars(0) == []
            assert {a.char for a in store.weak_chars(10)} == {"a", "x"}

    def test_weak_chars_language_filter(self, tmp_path: Path):
        with SessionStore(tmp_path / "t.db") as store:
            store.insert_session(make_stats(0, lang="de"), [CharStats("ß", incorrect=1)])
            store.insert_session(make_stats(1), [CharStats("e", correct=1)])
            assert [a.char for a in store.weak_chars(5, "de")] == ["ß"]

    def test_char_stats_for_sessions(self, tmp_path: Path):
        with SessionStore(tmp_path / "t.db") as store:
            s1 = store.insert_session(make_stats(0), [CharStats("a", correct=1), CharStats("b", correct=2)])
            s2 = store.insert_session(make_stats(1), [CharStats("a", incorrect=4)])

            result = store.char_stats_for_sessions([s1, s2], ["a"])
            assert result[s1]["a"].correct == 1
            assert result[s2]["a"].incorrect == 4
            assert "b" not in result[s1]

            assert store.char_stats_for_sessions([], ["a"]) == {}
            assert store.char_aggregates_for_sessions([]) == []

    def test_open_failure_is_wrapped(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(StoreError) as exc:
            SessionStore(blocker / "tuipe.db")
        assert exc.value.code == "db_open_failed"

    def test_in_memory(self):
        with SessionStore(":memory:") as store:
            sid = store.insert_session(make_stats(0))
            assert [s.session_id for s in store.list_sessions()] == [sid]
