"""Tests for the tuipe command line."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from tuipe.cli import configure as configure_cmd
from tuipe.cli import practice as practice_cmd
from tuipe.cli.main import build_parser, main
from tuipe.core.paths import default_config_path, default_db_path, default_wordlist_dir, default_wordlist_path
from tuipe.model.types import CharStats, SessionStats
from tuipe.store.sqlite import SessionStore


@pytest.fixture(autouse=True)
def xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data directories into tmp_path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return tmp_path


def install_wordlist(lang: str, words: list[str]) -> Path:
    path = default_wordlist_path(lang)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


def seed_sessions(count: int) -> None:
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    with SessionStore(default_db_path()) as store:
        for i in range(count):
            start = base + timedelta(hours=i)
            store.insert_session(
                SessionStats(
                    started_at=start,
                    ended_at=start + timedelta(seconds=60),
                    lang="en",
                    words=25,
                    caps_pct=0.5,
                    punct_pct=0.5,
                    punct_set=".",
                    wordlist_path="en.txt",
                    correct_nonspace=100 + 10 * i,
                    incorrect_nonspace=i,
                    duration_ms=60_000,
                ),
                [CharStats("e", correct=20, incorrect=i, latency_sum_ms=2000, latency_count=20), CharStats(" ")],
            )


class TestParser:
    def test_practice_is_default(self):
        from tuipe.cli.main import _with_default_command

        assert _with_default_command([]) == ["practice"]
        assert _with_default_command(["--words", "5"]) == ["practice", "--words", "5"]
        assert _with_default_command(["stats"]) == ["stats"]

    def test_practice_flags(self):
        args = build_parser().parse_args(["practice", "--words", "5", "--focus-weak", "--punct-set", ".,"])
        assert args.words == 5
        assert args.focus_weak is True
        assert args.punct_set == ".,"
        assert args.caps is None

    def test_bad_flag_value_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--words", "many"])
        assert exc.value.code == 1
        assert "invalid int value" in capsys.readouterr().err

    def test_bad_color_choice(self):
        with pytest.raises(SystemExit) as exc:
            main(["stats", "--color", "sometimes"])
        assert exc.value.code == 1


class TestPractice:
    def test_missing_wordlist(self, capsys):
        assert main([]) == 2
        err = capsys.readouterr().err
        assert err.startswith("tuipe: error: failed to load word list")
        assert "Run: tuipe langs" in err

    def test_invalid_flag_values(self, capsys):
        install_wordlist("en", ["alpha"])
        assert main(["practice", "--words", "0"]) == 1
        assert "--words must be > 0" in capsys.readouterr().err

    def test_invalid_config_file(self, capsys):
        path = default_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("practice:\n  words: lots\n", encoding="utf-8")
        assert main([]) == 1
        assert "tuipe: error:" in capsys.readouterr().err

    def test_runs_and_saves_sessions(self, monkeypatch: pytest.MonkeyPatch):
        install_wordlist("en", ["ab"])
        path = default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("practice:\n  words: 1\n  caps: 0\n  punct: 0\n", encoding="utf-8")
        seen = {}

        def fake_run(controller):
            seen["target"] = controller.session.target
            controller.type_text(controller.session.target)
            return controller.completed

        monkeypatch.setattr(practice_cmd, "run_practice", fake_run)

        assert main(["--lang", "en"]) == 0
        assert seen["target"] == "ab"
        with SessionStore(default_db_path()) as store:
            assert len(store.list_sessions()) == 1


class TestStats:
    def test_no_sessions(self, capsys):
        assert main(["stats"]) == 0
        assert capsys.readouterr().out == "No sessions found.\n"

    def test_dashboard(self, capsys):
        seed_sessions(4)
        assert main(["stats", "--width", "40", "--height", "4", "--color", "never", "--curve-window", "2"]) == 0
        out = capsys.readouterr().out

        assert out.startswith("Summary\nSessions: 4\n")
        assert "Learning Curves\nScaled per series; see min/max below.\n" in out
        assert "Per-Character (Windowed)" in out
        assert "<space>" in out
        assert "Per-Character Curves\nChar e\n" in out
        assert "\x1b" not in out

    def test_color_always(self, capsys):
        seed_sessions(2)
        assert main(["stats", "--width", "30", "--color", "always"]) == 0
        assert "\x1b[36m" in capsys.readouterr().out

    def test_no_color_env(self, capsys, monkeypatch: pytest.MonkeyPatch):
        seed_sessions(2)
        monkeypatch.setenv("NO_COLOR", "1")
        assert main(["stats", "--width", "30", "--color", "always"]) == 0
        assert "\x1b" not in capsys.readouterr().out

    def test_last_and_since(self, capsys):
        seed_sessions(3)
        assert main(["stats", "--last", "2", "--width", "30"]) == 0
        assert "Sessions: 2" in capsys.readouterr().out

        assert main(["stats", "--since", "2030-01-01"]) == 0
        assert capsys.readouterr().out == "No sessions found.\n"

    def test_bad_since(self, capsys):
        assert main(["stats", "--since", "yesterday"]) == 1
        assert "invalid --since value" in capsys.readouterr().err

    def test_image_export(self, xdg: Path, capsys):
        pytest.importorskip("matplotlib")
        seed_sessions(3)
        out_file = xdg / "curves.png"
        assert main(["stats", "--width", "30", "--output", str(out_file)]) == 0
        assert out_file.exists()
        assert f"Chart saved to {out_file}" in capsys.readouterr().out


class TestLangs:
    def test_lists_languages(self, capsys):
        install_wordlist("fr", ["un"])
        install_wordlist("en", ["one"])
        (default_wordlist_dir() / "ATTRIBUTION.txt").write_text("x", encoding="utf-8")
        assert main(["langs"]) == 0
        assert capsys.readouterr().out == "en\nfr\n"

    def test_no_directory(self, capsys):
        assert main(["langs"]) == 2
        assert "wordlist directory does not exist" in capsys.readouterr().err

    def test_empty_directory(self, capsys):
        default_wordlist_dir().mkdir(parents=True)
        assert main(["langs"]) == 2
        assert "no wordlists found" in capsys.readouterr().err


class TestConfigCommand:
    def test_path_only(self, capsys):
        assert main(["config", "--path"]) == 0
        assert capsys.readouterr().out.strip() == str(default_config_path())
        assert not default_config_path().exists()

    def test_creates_template_and_runs_editor(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EDITOR", "true")
        assert main(["config"]) == 0
        assert default_config_path().read_text(encoding="utf-8").startswith("# tuipe configuration")

    def test_keeps_existing_file(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EDITOR", "true")
        path = default_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("practice:\n  words: 3\n", encoding="utf-8")
        assert main(["config"]) == 0
        assert path.read_text(encoding="utf-8") == "practice:\n  words: 3\n"

    def test_failing_editor(self, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.setenv("EDITOR", "false")
        assert main(["config"]) == 1
        assert "failed to open editor" in capsys.readouterr().err

    @pytest.mark.parametrize("editor", ["", "   "])
    def test_blank_editor_falls_back_to_vi(self, monkeypatch: pytest.MonkeyPatch, editor: str):
        calls: list[list[str]] = []
        monkeypatch.setenv("EDITOR", editor)
        monkeypatch.setattr(configure_cmd.subprocess, "run", lambda cmd, check: calls.append(cmd))
        assert main(["config"]) == 0
        assert calls == [["vi", str(default_config_path())]]


class TestWordlistCommand:
    def test_add(self, xdg: Path, capsys):
        source = xdg / "words.txt"
        source.write_text("the\nof\nAnd\nthe\nto\n", encoding="utf-8")
        assert main(["wordlist", "add", "--lang", "en", "--from", str(source), "--size", "2"]) == 0
        assert "Wrote 2 words" in capsys.readouterr().out
        assert default_wordlist_path("en").read_text(encoding="utf-8") == "the\nof\n"

    def test_refuses_overwrite(self, xdg: Path, capsys):
        source = xdg / "words.txt"
        source.write_text("one\n", encoding="utf-8")
        install_wordlist("en", ["old"])
        assert main(["wordlist", "add", "--lang", "en", "--from", str(source)]) == 2
        assert "--force" in capsys.readouterr().err
        assert main(["wordlist", "add", "--lang", "en", "--from", str(source), "--force"]) == 0

    def test_bad_size(self, xdg: Path, capsys):
        assert main(["wordlist", "add", "--lang", "en", "--from", str(xdg / "x.txt"), "--size", "0"]) == 1
        assert "--size must be greater than 0" in capsys.readouterr().err

    def test_requires_subcommand(self):
        with pytest.raises(SystemExit) as exc:
            main(["wordlist"])
        assert exc.value.code == 1
