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
"""Immutable request criteria: what a caller asked to filter and sort by."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> Direction:
        """Only a case-insensitive asc is ascending; anything else is descending."""
        if raw is not None and raw.strip().lower() == cls.ASC.value:
            return cls.ASC
        return cls.DESC


class FilterKind(str, Enum):
    """Shape of a single filter constraint."""

    BOOLEAN_EQUALITY = "boolean_equality"
    TEXT_CONTAINS = "text_contains"
    EQUALITY = "equality"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"


@dataclass(frozen=True)
class FilterCriterion:
    """One requested filter on a storage field."""

    kind: FilterKind
    field: str
    value: Any = None


@dataclass(frozen=True)
class SortCriterion:
    """A resolved single-field ordering instruction."""

    field: str
    direction: Direction = Direction.ASC

    @staticmethod
    def asc(field: str) -> SortCriterion:
        """Create an ascending order for the given field."""
        return SortCriterion(field=field, direction=Direction.ASC)

    @staticmethod
    def desc(field: str) -> SortCriterion:
        """Create a descending order for the given field."""
        return SortCriterion(field=field, direction=Direction.DESC)

    @property
    def ascending(self) -> bool:
        return self.direction is Direction.ASC
