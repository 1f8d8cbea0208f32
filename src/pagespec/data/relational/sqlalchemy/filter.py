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
"""List-filter predicates producing SQLAlchemy :class:`Specification` objects.

Example::

    specs = Specifications.for_kind(EntityKind.BRAND)
    spec = specs.build_specification(specs.is_archived_spec(False), specs.like_spec("bos"))
    page = await BrandRepository(session).execute(spec, validate_page(1, 20))
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, String, func

from pagespec.data.criteria import FilterCriterion, FilterKind, SortCriterion
from pagespec.data.filter import BaseSpecifications
from pagespec.data.relational.sqlalchemy.specification import Specification


def _column(root: type[Any], field: str) -> Any:
    return getattr(root, field)


class Specifications(BaseSpecifications[Specification[Any]]):
    """SQLAlchemy predicate builders for one entity type."""

    @staticmethod
    def _create_filter(criterion: FilterCriterion) -> Specification[Any]:
        field, value = criterion.field, criterion.value
        if criterion.kind in (FilterKind.BOOLEAN_EQUALITY, FilterKind.EQUALITY):
            return Specification(lambda root, q: q.where(_column(root, field) == value))
        if criterion.kind is FilterKind.TEXT_CONTAINS:
            needle = str(value).lower()
            return Specification(
                lambda root, q: q.where(func.lower(_column(root, field), type_=String).contains(needle, autoescape=True))
            )
        if criterion.kind is FilterKind.IS_NULL:
            return Specification(lambda root, q: q.where(_column(root, field).is_(None)))
        if criterion.kind is FilterKind.IS_NOT_NULL:
            return Specification(lambda root, q: q.where(_column(root, field).is_not(None)))
        raise ValueError(f"Unsupported filter kind: {criterion.kind}")

    @staticmethod
    def _create_order_by(criterion: SortCriterion) -> Specification[Any]:
        def order_by(root: type[Any], q: Select[Any]) -> Select[Any]:
            col = _column(root, criterion.field)
            # Replaces any earlier ordering; a single sort field wins.
            return q.order_by(None).order_by(col.asc() if criterion.ascending else col.desc())

        return Specification(order_by, ordered=True)

    @staticmethod
    def _create_noop() -> Specification[Any]:
        return Specification(lambda root, q: q)
