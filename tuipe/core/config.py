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

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from tuipe.core.errors import ConfigError
from tuipe.model.types import (
    DEFAULT_CAPS,
    DEFAULT_LANG,
    DEFAULT_PUNCT,
    DEFAULT_PUNCT_SET,
    DEFAULT_WEAK_FACTOR,
    DEFAULT_WEAK_TOP,
    DEFAULT_WEAK_WINDOW,
    DEFAULT_WORDS,
    PracticeConfig,
)

# config key -> (PracticeConfig field, accepted types)
_PRACTICE_KEYS: dict[str, tuple[str, tuple[type, ...]]] = {
    "lang": ("lang", (str,)),
    "words": ("words", (int,)),
    "caps": ("caps_pct", (int, float)),
    "punct": ("punct_pct", (int, float)),
    "punct-set": ("punct_set", (str,)),
    "focus-weak": ("focus_weak", (bool,)),
    "weak-top": ("weak_top", (int,)),
    "weak-factor": ("weak_factor", (int, float)),
    "weak-window": ("weak_window", (int,)),
}


@dataclass(frozen=True, slots=True)
class FileConfig:
    """
    Values found in the config file. Only keys that were actually set are
    present in `practice`, keyed by PracticeConfig field name.
    """

    path: Path | None = None
    practice: Mapping[str, Any] = field(default_factory=dict)


class DefaultConfigLoader:
    """
    Loads FileConfig from config.yaml / config.yml / config.json.

    A missing file is not an error: it yields an empty FileConfig.
    """

    def load(self, path: Path) -> FileConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            return FileConfig(path=None)

        data = self._read_config_file(path)
        if data is None:
            return FileConfig(path=path)

        if not isinstance(data, dict):
            raise ConfigError(code="invalid_config", message=f"{path}: config root must be a mapping.")

        practice = self._parse_practice(path, data.get("practice"))
        return FileConfig(path=path, practice=practice)

    def _read_config_file(self, path: Path) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(code="config_unreadable", message=f"Failed to read config {path}: {e}") from e

        try:
            if path.suffix.lower() == ".json":
                return json.loads(raw)
            return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(code="config_decode_failed", message=f"Failed to decode config {path}: {e}") from e

    def _parse_practice(self, path: Path, raw: Any) -> dict[str, Any]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError(code="invalid_practice", message=f"{path}: 'practice' must be a mapping.")

        out: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in _PRACTICE_KEYS:
                raise ConfigError(
                    code="unknown_key",
                    message=f"{path}: unknown practice setting '{key}'.",
                    details={"supported": sorted(_PRACTICE_KEYS)},
                )
            if value is None:
                continue
            name, types = _PRACTICE_KEYS[key]
            # bool is an int subclass; only accept it where a bool is expected
            if isinstance(value, bool) and bool not in types:
                raise ConfigError(code="invalid_value", message=f"{path}: '{key}' has the wrong type.")
            if not isinstance(value, types):
                raise ConfigError(code="invalid_value", message=f"{path}: '{key}' has the wrong type.")
            out[name] = float(value) if float in types else value
        return out


def load_config(path: Path) -> FileConfig:
    return DefaultConfigLoader().load(path)


def resolve_practice_config(
    file_config: FileConfig,
    overrides: Mapping[str, Any] | None = None,
) -> PracticeConfig:
    """
    Merge defaults, config file values and CLI overrides (highest wins).

    `overrides` maps PracticeConfig field names to values; None means "not given".
    """
    known = {f.name for f in fields(PracticeConfig)}
    values: dict[str, Any] = {k: v for k, v in file_config.practice.items() if k in known}
    for key, value in (overrides or {}).items():
        if value is not None and key in known:
            values[key] = value
    return replace(PracticeConfig(), **values)


def validate_practice_config(cfg: PracticeConfig) -> None:
    if cfg.words <= 0:
        raise ConfigError(code="invalid_words", message="--words must be > 0")
    if not 0 <= cfg.caps_pct <= 1:
        raise ConfigError(code="invalid_caps", message="--caps must be between 0 and 1")
    if not 0 <= cfg.punct_pct <= 1:
        raise ConfigError(code="invalid_punct", message="--punct must be between 0 and 1")
    if cfg.punct_set == "":
        raise ConfigError(code="invalid_punct_set", message="--punct-set must not be empty")
    if cfg.weak_top < 0:
        raise ConfigError(code="invalid_weak_top", message="--weak-top must be >= 0")
    if cfg.weak_factor < 0:
        raise ConfigError(code="invalid_weak_factor", message="--weak-factor must be >= 0")
    if cfg.weak_window < 0:
        raise ConfigError(code="invalid_weak_window", message="--weak-window must be >= 0")


def default_config_template() -> str:
    punct_set = json.dumps(DEFAULT_PUNCT_SET)
    return f"""# tuipe configuration
# Uncomment a value to enable it. CLI flags override config values.

practice:
#  lang: {DEFAULT_LANG}               # Language code
#  words: {DEFAULT_WORDS}               # Words per text
#  caps: {DEFAULT_CAPS:.2f}              # Probability of capitalized first letter (0-1)
#  punct: {DEFAULT_PUNCT:.2f}             # Punctuation probability per word (0-1)
#  punct-set: {punct_set}
#  focus-weak: false         # Bias practice toward weak characters
#  weak-top: {DEFAULT_WEAK_TOP}              # Number of weak characters to focus on
#  weak-factor: {DEFAULT_WEAK_FACTOR:.1f}         # Weight factor for weak characters
#  weak-window: {DEFAULT_WEAK_WINDOW}          # Number of recent sessions to compute weak chars
"""
