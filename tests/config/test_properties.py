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
"""Tests for the typed configuration properties."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pagespec.config import LoggingProperties, QueryProperties
from pagespec.core.config import Config


class TestQueryProperties:
    def test_defaults(self) -> None:
        props = QueryProperties()
        assert props.max_page_size == 50
        assert props.like_min_length == 1
        assert props.sort_separator == ","

    def test_bind_library_defaults(self) -> None:
        assert Config.defaults().bind(QueryProperties) == QueryProperties()

    def test_bind_kebab_case_keys(self) -> None:
        config = Config({"pagespec": {"query": {"max-page-size": 25, "like-min-length": 3, "sort-separator": ":"}}})
        props = config.bind(QueryProperties)
        assert props.max_page_size == 25
        assert props.like_min_length == 3
        assert props.sort_separator == ":"

    def test_bind_snake_case_keys(self) -> None:
        config = Config({"pagespec": {"query": {"max_page_size": 10}}})
        assert config.bind(QueryProperties).max_page_size == 10

    def test_env_override_is_coerced(self, monkeypatch) -> None:
        monkeypatch.setenv("PAGESPEC_QUERY_LIKE_MIN_LENGTH", "3")
        assert Config.defaults().bind(QueryProperties).like_min_length == 3

    @pytest.mark.parametrize(
        "section",
        [
            {"max-page-size": 0},
            {"max-page-size": 51},
            {"like-min-length": 0},
            {"sort-separator": ""},
            {"max-page-size": "many"},
        ],
    )
    def test_invalid_values_fail_fast(self, section: dict) -> None:
        config = Config({"pagespec": {"query": section}})
        with pytest.raises(ValueError, match="Configuration validation failed"):
            config.bind(QueryProperties)

    def test_frozen(self) -> None:
        props = QueryProperties()
        with pytest.raises(ValidationError):
            props.max_page_size = 10  # type: ignore[misc]


class TestLoggingProperties:
    def test_defaults(self) -> None:
        props = LoggingProperties()
        assert props.level == {"root": "INFO"}
        assert props.format == "console"

    def test_bind(self) -> None:
        config = Config({"pagespec": {"logging": {"format": "json", "level": {"root": "WARNING"}}}})
        props = config.bind(LoggingProperties)
        assert props.format == "json"
        assert props.level == {"root": "WARNING"}


class TestPageSizeCeiling:
    def test_max_page_size_can_be_lowered(self) -> None:
        assert QueryProperties(max_page_size=10).max_page_size == 10

    def test_max_page_size_cannot_exceed_fifty(self) -> None:
        with pytest.raises(ValidationError):
            QueryProperties(max_page_size=51)
