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
"""Composable query predicates over in-memory record lists.

Mirrors the SQLAlchemy :class:`~pagespec.data.relational.sqlalchemy.specification.Specification`
pattern, but the query representation is a list of records: a predicate
receives the record type (``root``) and the current rows and returns the
rows that remain, in order.

Example::

    live = MemorySpecification(lambda root, rows: [r for r in rows if not r.is_archived])
    by_name = MemorySpecification(lambda root, rows: sorted(rows, key=lambda r: r.name), ordered=True)

    rows = (live & by_name).to_predicate(Tool, tools)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pagespec.data.specification import Specification as SpecificationBase

T = TypeVar("T")


def read_field(record: Any, field: str) -> Any:
    """Field accessor for plain objects and mappings."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class MemorySpecification(SpecificationBase[T, list[Any]]):
    """Composable query predicate for in-memory record lists.

    Combine with ``spec_a & spec_b``: both predicates must match (AND).
    """

    def __init__(
        self,
        predicate: Callable[[type[T], list[Any]], list[Any]],
        *,
        ordered: bool = False,
    ) -> None:
        self._predicate = predicate
        self._ordered = ordered

    @property
    def is_ordered(self) -> bool:
        return self._ordered

    def to_predicate(self, root: type[T], query: list[Any]) -> list[Any]:
        """Apply this specification's predicate and return the remaining rows."""
        return self._predicate(root, query)

    def __and__(self, other: MemorySpecification[T]) -> MemorySpecification[T]:  # type: ignore[override]
        """Combine with AND: the right predicate sees only rows the left kept."""
        left, right = self._predicate, other._predicate
        return MemorySpecification(
            lambda root, rows: right(root, left(root, rows)),
            ordered=self._ordered or other._ordered,
        )
