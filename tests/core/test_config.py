import json
from pathlib import Path

import pytest
import yaml
from tuipe.core.config import (
    DefaultConfigLoader,
    FileConfig,
    default_config_template,
    load_config,
    resolve_practice_config,
    validate_practice_config,
)
from tuipe.core.errors import ConfigError
from tuipe.core.paths import default_config_path, default_db_path, default_wordlist_dir, default_wordlist_path
from tuipe.model.types import DEFAULT_PUNCT_SET, PracticeConfig

# ----------------------------
# Helpers
# ----------------------------


def write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ----------------------------
# Loader
# ----------------------------


class TestLoader:
    def test_missing_file_is_empty_config(self, tmp_path: Path):
        cfg = load_config(tmp_path / "nope.yaml")
        assert cfg.path is None
        assert cfg.practice == {}

    def test_yaml_practice_section(self, tmp_path: Path):
        f = write_yaml(
            tmp_path / "config.yaml",
            "practice:\n  lang: de\n  words: 40\n  caps: 1\n  focus-weak: true\n  punct-set: '.,'\n",
        )
        cfg = DefaultConfigLoader().load(f)
        assert cfg.path == f
        assert cfg.practice == {
            "lang": "de",
            "words": 40,
            "caps_pct": 1.0,
            "focus_weak": True,
            "punct_set": ".,",
        }
        assert isinstance(cfg.practice["caps_pct"], float)

    def test_json_by_suffix(self, tmp_path: Path):
        f = tmp_path / "config.json"
        f.write_text(json.dumps({"practice": {"weak-top": 3, "weak-factor": 1.5}}), encoding="utf-8")
        assert load_config(f).practice == {"weak_top": 3, "weak_factor": 1.5}

    def test_empty_file(self, tmp_path: Path):
        f = write_yaml(tmp_path / "config.yaml", "")
        assert load_config(f).practice == {}

    def test_commented_template_loads(self, tmp_path: Path):
        f = write_yaml(tmp_path / "config.yaml", default_config_template())
        assert load_config(f).practice == {}

    def test_template_values_parse_when_uncommented(self):
        text = default_config_template().replace("#  ", "  ")
        data = yaml.safe_load(text)
        assert data["practice"]["punct-set"] == DEFAULT_PUNCT_SET
        assert data["practice"]["words"] == 25

    @pytest.mark.parametrize(
        "text,code",
        [
            ("- a\n- b\n", "invalid_config"),
            ("practice: 3\n", "invalid_practice"),
            ("practice:\n  colour: red\n", "unknown_key"),
            ("practice:\n  words: many\n", "invalid_value"),
            ("practice:\n  words: true\n", "invalid_value"),
            ("practice:\n  focus-weak: 1\n", "invalid_value"),
            ("practice: [unclosed\n", "config_decode_failed"),
        ],
    )
    def test_invalid_configs(self, tmp_path: Path, text: str, code: str):
        f = write_yaml(tmp_path / "config.yaml", text)
        with pytest.raises(ConfigError) as exc:
            load_config(f)
        assert exc.value.code == code


# ----------------------------
# Resolution & validation
# ----------------------------


class TestResolve:
    def test_defaults(self):
        assert resolve_practice_config(FileConfig()) == PracticeConfig()

    def test_flags_override_file(self):
        file_config = FileConfig(practice={"words": 40, "lang": "de"})
        cfg = resolve_practice_config(file_config, {"words": 10, "lang": None})
        assert cfg.words == 10
        assert cfg.lang == "de"

    def test_false_flag_overrides_file(self):
        cfg = resolve_practice_config(FileConfig(practice={"focus_weak": True}), {"focus_weak": False})
        assert cfg.focus_weak is False


class TestValidate:
    def test_defaults_are_valid(self):
        validate_practice_config(PracticeConfig())

    @pytest.mark.parametrize(
        "changes,message",
        [
            ({"words": 0}, "--words must be > 0"),
            ({"caps_pct": 1.5}, "--caps must be between 0 and 1"),
            ({"punct_pct": -0.1}, "--punct must be between 0 and 1"),
            ({"punct_set": ""}, "--punct-set must not be empty"),
            ({"weak_top": -1}, "--weak-top must be >= 0"),
            ({"weak_factor": -2.0}, "--weak-factor must be >= 0"),
            ({"weak_window": -3}, "--weak-window must be >= 0"),
        ],
    )
    def test_rejects(self, changes: dict, message: str):
        cfg = resolve_practice_config(FileConfig(), changes)
        with pytest.raises(ConfigError, match=message):
            validate_practice_config(cfg)


class TestPaths:
    def test_xdg_locations(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
        assert default_config_path() == tmp_path / "cfg" / "tuipe" / "config.yaml"
        assert default_wordlist_dir() == tmp_path / "cfg" / "tuipe" / "wordlists"
        assert default_wordlist_path("fr") == tmp_path / "cfg" / "tuipe" / "wordlists" / "fr.txt"
        assert default_db_path() == tmp_path / "data" / "tuipe" / "tuipe.db"

    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_config_path() == tmp_path / ".config" / "tuipe" / "config.yaml"
