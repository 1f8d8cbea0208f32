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
"""Composable query predicates over SQLAlchemy ``Select`` statements.

A specification wraps a callable that receives an entity class (``root``)
and a ``Select`` statement and returns a modified ``Select``. Values are
always bound as parameters; nothing is concatenated into SQL text.

Example::

    live = Specification(lambda root, q: q.where(root.is_archived == False))
    newest = Specification(lambda root, q: q.order_by(root.created_at.desc()), ordered=True)

    results = await repo.find_all_by_spec(live & newest)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import Select

from pagespec.data.specification import Specification as SpecificationBase

T = TypeVar("T")


class Specification(SpecificationBase[T, Select[Any]]):
    """Composable query predicate for SQLAlchemy statements.

    Combine with ``spec_a & spec_b``: both predicates must match (AND).
    """

    def __init__(
        self,
        predicate: Callable[[type[T], Select[Any]], Select[Any]],
        *,
        ordered: bool = False,
    ) -> None:
        self._predicate = predicate
        self._ordered = ordered

    @property
    def is_ordered(self) -> bool:
        return self._ordered

    def to_predicate(self, root: type[T], query: Select[Any]) -> Select[Any]:
        """Apply this specification's predicate to *query*."""
        return self._predicate(root, query)

    def __and__(self, other: Specification[T]) -> Specification[T]:  # type: ignore[override]
        """Combine with AND: both specs must match.

        The left predicate is applied first, then the right predicate is
        applied to the already-filtered statement. SQLAlchemy combines
        successive ``.where()`` calls with AND.
        """
        left, right = self._predicate, other._predicate
        return Specification(
            lambda root, q: right(root, left(root, q)),
            ordered=self._ordered or other._ordered,
        )
