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
"""Tests for filter and sort criteria."""

from __future__ import annotations

import pytest

from pagespec.data.criteria import Direction, FilterCriterion, FilterKind, SortCriterion


class TestDirectionParse:
    @pytest.mark.parametrize("raw", ["asc", "ASC", "Asc", " asc "])
    def test_asc_any_case_is_ascending(self, raw: str) -> None:
        assert Direction.parse(raw) is Direction.ASC

    @pytest.mark.parametrize("raw", ["desc", "DESC", "sideways", "", "ascending", None])
    def test_everything_else_is_descending(self, raw: str | None) -> None:
        assert Direction.parse(raw) is Direction.DESC


class TestSortCriterion:
    def test_asc_factory(self) -> None:
        order = SortCriterion.asc("name")
        assert order.field == "name"
        assert order.direction is Direction.ASC
        assert order.ascending is True

    def test_desc_factory(self) -> None:
        order = SortCriterion.desc("created_at")
        assert order.direction is Direction.DESC
        assert order.ascending is False

    def test_default_direction_is_asc(self) -> None:
        assert SortCriterion(field="name").direction is Direction.ASC

    def test_value_equality(self) -> None:
        assert SortCriterion.asc("name") == SortCriterion("name", Direction.ASC)

    def test_frozen(self) -> None:
        order = SortCriterion.asc("name")
        with pytest.raises(AttributeError):
            order.field = "other"  # type: ignore[misc]


class TestFilterCriterion:
    def test_value_defaults_to_none(self) -> None:
        criterion = FilterCriterion(FilterKind.IS_NULL, "parent_id")
        assert criterion.value is None

    def test_frozen(self) -> None:
        criterion = FilterCriterion(FilterKind.TEXT_CONTAINS, "name", "drill")
        with pytest.raises(AttributeError):
            criterion.value = "saw"  # type: ignore[misc]
