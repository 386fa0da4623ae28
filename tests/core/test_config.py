# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for Config loading, env overrides and placeholders."""

from __future__ import annotations

from pathlib import Path

import pytest

from cronmath.core.config import Config


class TestConfig:
    def test_get_simple_value(self):
        config = Config({"app": {"name": "svc"}})
        assert config.get("app.name") == "svc"

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_get_section(self):
        config = Config({"cronmath": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("cronmath.logging.level") == {"root": "DEBUG"}
        assert config.get_section("cronmath.nothing") == {}

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("CRONMATH_LOGGING_FORMAT", "json")
        config = Config({"cronmath": {"logging": {"format": "console"}}})
        assert config.get("cronmath.logging.format") == "json"

    def test_placeholder_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_FMT", "json")
        config = Config({"cronmath": {"logging": {"format": "${LOG_FMT}"}}})
        assert config.get("cronmath.logging.format") == "json"

    def test_placeholder_default(self, monkeypatch):
        monkeypatch.delenv("CRONMATH_TEST_UNSET", raising=False)
        config = Config({"fmt": "${CRONMATH_TEST_UNSET:console}"})
        assert config.get("fmt") == "console"

    def test_placeholder_config_reference(self):
        config = Config({"base": "json", "fmt": "${base}"})
        assert config.get("fmt") == "json"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"fmt": "${does.not.exist}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("fmt")


class TestConfigFromFile:
    def test_defaults_only(self):
        config = Config.from_file()
        assert config.get("cronmath.logging.format") == "console"
        assert config.get("cronmath.logging.level.root") == "WARNING"
        assert config.loaded_sources == ["cronmath-defaults.yaml (defaults)"]

    def test_yaml_overrides_defaults(self, tmp_path: Path):
        path = tmp_path / "cronmath.yaml"
        path.write_text("cronmath:\n  logging:\n    format: json\n")
        config = Config.from_file(path)
        assert config.get("cronmath.logging.format") == "json"
        assert config.get("cronmath.logging.level.root") == "WARNING"
        assert str(path) in config.loaded_sources

    def test_toml_file(self, tmp_path: Path):
        path = tmp_path / "cronmath.toml"
        path.write_text('[cronmath.logging.level]\nroot = "DEBUG"\n')
        config = Config.from_file(path, load_defaults=False)
        assert config.get("cronmath.logging.level.root") == "DEBUG"

    def test_missing_file_loads_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("cronmath.logging.format") == "console"
