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
"""Tests for Config loading, env overrides and property binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from pagespec.core.config import Config, config_properties

_DEFAULTS = "pagespec-defaults.yaml (library defaults)"


class TestGet:
    def test_dotted_key(self):
        config = Config({"pagespec": {"query": {"max-page-size": 25}}})
        assert config.get("pagespec.query.max-page-size") == 25

    def test_missing_key_returns_default(self):
        config = Config({"pagespec": {"query": {}}})
        assert config.get("pagespec.query.max-page-size", 50) == 50
        assert config.get("pagespec.query.max-page-size.deeper") is None

    def test_env_var_wins_as_string(self, monkeypatch):
        monkeypatch.setenv("PAGESPEC_QUERY_MAX_PAGE_SIZE", "30")
        config = Config({"pagespec": {"query": {"max-page-size": 50}}})
        assert config.get("pagespec.query.max-page-size") == "30"


class TestLibraryDefaults:
    def test_defaults_hold_query_settings(self):
        config = Config.defaults()
        assert config.get("pagespec.query.max-page-size") == 50
        assert config.get("pagespec.query.like-min-length") == 1
        assert config.get("pagespec.query.sort-separator") == ","
        assert config.loaded_sources == [_DEFAULTS]

    def test_defaults_hold_logging_settings(self):
        config = Config.defaults()
        assert config.get("pagespec.logging.level.root") == "INFO"
        assert config.get("pagespec.logging.format") == "console"


class TestFromSources:
    def test_yaml_overrides_defaults(self, tmp_path: Path):
        config_file = tmp_path / "pagespec.yaml"
        config_file.write_text("pagespec:\n  query:\n    max-page-size: 10\n")
        config = Config.from_sources(tmp_path)
        assert config.get("pagespec.query.max-page-size") == 10
        assert config.get("pagespec.query.like-min-length") == 1
        assert config.loaded_sources == [_DEFAULTS, str(config_file)]

    def test_toml_file(self, tmp_path: Path):
        (tmp_path / "pagespec.toml").write_text("[pagespec.query]\nmax-page-size = 20\n")
        assert Config.from_sources(tmp_path).get("pagespec.query.max-page-size") == 20

    def test_base_dir_file_beats_config_dir(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        nested = "pagespec:\n  query:\n    like-min-length: 2\n    max-page-size: 5\n"
        (tmp_path / "config" / "pagespec.yaml").write_text(nested)
        (tmp_path / "pagespec.yaml").write_text("pagespec:\n  query:\n    like-min-length: 4\n")
        config = Config.from_sources(tmp_path)
        assert config.get("pagespec.query.like-min-length") == 4
        assert config.get("pagespec.query.max-page-size") == 5

    def test_defaults_can_be_skipped(self, tmp_path: Path):
        (tmp_path / "pagespec.yaml").write_text("pagespec:\n  query:\n    like-min-length: 2\n")
        config = Config.from_sources(tmp_path, load_defaults=False)
        assert config.get("pagespec.query.max-page-size") is None
        assert _DEFAULTS not in config.loaded_sources

    def test_empty_directory_gives_defaults(self, tmp_path: Path):
        config = Config.from_sources(tmp_path)
        assert config.loaded_sources == [_DEFAULTS]
        assert config.get("pagespec.query.max-page-size") == 50


class TestProfiles:
    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "pagespec.yaml").write_text("pagespec:\n  query:\n    max-page-size: 40\n")
        overlay = tmp_path / "pagespec-strict.yaml"
        overlay.write_text("pagespec:\n  query:\n    like-min-length: 3\n")
        config = Config.from_sources(tmp_path, active_profiles=["strict"])
        assert config.get("pagespec.query.like-min-length") == 3
        assert config.get("pagespec.query.max-page-size") == 40
        assert config.loaded_sources[-1] == f"{overlay} (profile: strict)"

    def test_later_profile_wins(self, tmp_path: Path):
        (tmp_path / "pagespec-dev.yaml").write_text("pagespec:\n  query:\n    like-min-length: 2\n")
        (tmp_path / "pagespec-local.yaml").write_text("pagespec:\n  query:\n    like-min-length: 5\n")
        config = Config.from_sources(tmp_path, active_profiles=["dev", "local"])
        assert config.get("pagespec.query.like-min-length") == 5

    def test_missing_profile_file_is_skipped(self, tmp_path: Path):
        (tmp_path / "pagespec.yaml").write_text("pagespec:\n  query:\n    like-min-length: 2\n")
        config = Config.from_sources(tmp_path, active_profiles=["nonexistent"])
        assert config.get("pagespec.query.like-min-length") == 2
        assert len(config.loaded_sources) == 2

    def test_env_vars_still_win(self, tmp_path: Path, monkeypatch):
        (tmp_path / "pagespec-dev.yaml").write_text("pagespec:\n  query:\n    like-min-length: 2\n")
        monkeypatch.setenv("PAGESPEC_QUERY_LIKE_MIN_LENGTH", "7")
        config = Config.from_sources(tmp_path, active_profiles=["dev"])
        assert config.get("pagespec.query.like-min-length") == "7"


class TestBind:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="pagespec.search")
        @dataclass
        class SearchProperties:
            column: str = "name"
            limit: int = 5

        config = Config({"pagespec": {"search": {"column": "title", "limit": 20}}})
        props = config.bind(SearchProperties)
        assert props.column == "title"
        assert props.limit == 20

    def test_bind_accepts_kebab_case_keys(self):
        @config_properties(prefix="pagespec.search")
        @dataclass
        class SearchProperties:
            min_length: int = 1

        assert Config({"pagespec": {"search": {"min-length": 3}}}).bind(SearchProperties).min_length == 3

    def test_bind_coerces_env_strings(self, monkeypatch):
        @config_properties(prefix="pagespec.search")
        @dataclass
        class SearchProperties:
            limit: int = 5
            ratio: float = 1.0
            strict: bool = False

        monkeypatch.setenv("PAGESPEC_SEARCH_LIMIT", "12")
        monkeypatch.setenv("PAGESPEC_SEARCH_RATIO", "0.5")
        monkeypatch.setenv("PAGESPEC_SEARCH_STRICT", "yes")
        props = Config({}).bind(SearchProperties)
        assert props.limit == 12
        assert props.ratio == 0.5
        assert props.strict is True

    def test_bind_uses_field_defaults(self):
        @config_properties(prefix="pagespec.search")
        @dataclass
        class SearchProperties:
            column: str = "name"

        assert Config({}).bind(SearchProperties).column == "name"

    def test_undecorated_class_raises(self):
        @dataclass
        class Plain:
            column: str = ""

        with pytest.raises(ValueError, match="is not decorated with @config_properties"):
            Config({}).bind(Plain)
