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
"""List-filter predicates producing :class:`MemorySpecification` objects.

Evaluation mirrors SQLite, the relational backend the tests run on: a
missing (``None``) field never matches equality or contains, and ``None``
sorts like a SQLite NULL, first ascending and last descending. Other
databases (PostgreSQL puts NULLs last ascending) may order differently.
"""

from __future__ import annotations

from typing import Any

from pagespec.data.criteria import FilterCriterion, FilterKind, SortCriterion
from pagespec.data.filter import BaseSpecifications
from pagespec.data.memory.specification import MemorySpecification, read_field


def _equals(field: str, value: Any) -> MemorySpecification[Any]:
    return MemorySpecification(lambda root, rows: [r for r in rows if read_field(r, field) == value])


def _icontains(field: str, text: str) -> MemorySpecification[Any]:
    needle = text.lower()

    def matches(record: Any) -> bool:
        actual = read_field(record, field)
        return actual is not None and needle in str(actual).lower()

    return MemorySpecification(lambda root, rows: [r for r in rows if matches(r)])


def _null_check(field: str, expect_null: bool) -> MemorySpecification[Any]:
    return MemorySpecification(
        lambda root, rows: [r for r in rows if (read_field(r, field) is None) == expect_null]
    )


class MemorySpecifications(BaseSpecifications[MemorySpecification[Any]]):
    """In-memory predicate builders for one entity type."""

    @staticmethod
    def _create_filter(criterion: FilterCriterion) -> MemorySpecification[Any]:
        if criterion.kind in (FilterKind.BOOLEAN_EQUALITY, FilterKind.EQUALITY):
            return _equals(criterion.field, criterion.value)
        if criterion.kind is FilterKind.TEXT_CONTAINS:
            return _icontains(criterion.field, str(criterion.value))
        if criterion.kind is FilterKind.IS_NULL:
            return _null_check(criterion.field, True)
        if criterion.kind is FilterKind.IS_NOT_NULL:
            return _null_check(criterion.field, False)
        raise ValueError(f"Unsupported filter kind: {criterion.kind}")

    @staticmethod
    def _create_order_by(criterion: SortCriterion) -> MemorySpecification[Any]:
        def sort_key(record: Any) -> tuple[bool, Any]:
            value = read_field(record, criterion.field)
            return (value is not None, value)

        return MemorySpecification(
            lambda root, rows: sorted(rows, key=sort_key, reverse=not criterion.ascending),
            ordered=True,
        )

    @staticmethod
    def _create_noop() -> MemorySpecification[Any]:
        return MemorySpecification(lambda root, rows: list(rows))
