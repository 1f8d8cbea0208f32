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
"""Base filter predicates port — shared list-filter logic for all data adapters.

Subclasses supply adapter-specific factories (``_create_filter``,
``_create_order_by``, ``_create_noop``) while inheriting the shared
predicate builders and AND composition.

Every predicate builder returns either a specification or ``None``. ``None``
is the no-op: it contributes no constraint and is dropped on composition.
Only :meth:`BaseSpecifications.sort_spec` never returns ``None``.

Example::

    specs = Specifications.for_kind(EntityKind.TOOL)
    spec = specs.build_specification(
        specs.is_archived_spec(False),
        specs.like_spec("drill"),
        specs.sort_spec("name,asc"),
    )
    page = await repo.execute(spec, validate_page(1, 20))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import structlog

from pagespec.config.properties.query import QueryProperties
from pagespec.data.criteria import FilterCriterion, FilterKind, SortCriterion
from pagespec.data.entities import ARCHIVED_FIELD, NAME_FIELD, EntityKind, filter_fields_for, sort_registry_for
from pagespec.data.sort_registry import SortRegistry
from pagespec.data.specification import Specification

logger = structlog.get_logger("pagespec.data.filter")

S = TypeVar("S", bound=Specification[Any, Any])
B = TypeVar("B", bound="BaseSpecifications[Any]")


class BaseSpecifications(ABC, Generic[S]):
    """Filter predicate builders bound to one entity type.

    Args:
        registry: Sort whitelist and default ordering for the entity type.
        properties: Query settings; library defaults when omitted.
        name_field: Field matched by :meth:`like_spec`; ``None`` when the
            entity has no name, which turns the filter into a no-op.
        archived_field: Field matched by :meth:`is_archived_spec`; ``None``
            when the entity cannot be archived.
    """

    def __init__(
        self,
        registry: SortRegistry,
        properties: QueryProperties | None = None,
        *,
        name_field: str | None = NAME_FIELD,
        archived_field: str | None = ARCHIVED_FIELD,
    ) -> None:
        self._registry = registry
        self._properties = properties or QueryProperties()
        self._name_field = name_field
        self._archived_field = archived_field

    @classmethod
    def for_kind(cls: type[B], kind: EntityKind | str, properties: QueryProperties | None = None) -> B:
        """Create builders for a registered entity kind."""
        fields = filter_fields_for(kind)
        return cls(
            sort_registry_for(kind),
            properties,
            name_field=fields.name_field,
            archived_field=fields.archived_field,
        )

    @property
    def registry(self) -> SortRegistry:
        return self._registry

    @property
    def properties(self) -> QueryProperties:
        return self._properties

    @property
    def name_field(self) -> str | None:
        return self._name_field

    @property
    def archived_field(self) -> str | None:
        return self._archived_field

    # ------------------------------------------------------------------
    # Adapter factories
    # ------------------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _create_filter(criterion: FilterCriterion) -> S: ...

    @staticmethod
    @abstractmethod
    def _create_order_by(criterion: SortCriterion) -> S: ...

    @staticmethod
    @abstractmethod
    def _create_noop() -> S: ...

    # ------------------------------------------------------------------
    # Predicate builders
    # ------------------------------------------------------------------

    def from_criterion(self, criterion: FilterCriterion) -> S | None:
        """Build the predicate for *criterion*, or ``None`` if it constrains nothing."""
        if criterion.kind is FilterKind.TEXT_CONTAINS:
            text = criterion.value
            if not isinstance(text, str) or not text.strip():
                return None
            if len(text) < self._properties.like_min_length:
                return None
        elif criterion.kind in (FilterKind.BOOLEAN_EQUALITY, FilterKind.EQUALITY):
            if criterion.value is None:
                return None
        return self._create_filter(criterion)

    def is_archived_spec(self, value: bool | None) -> S | None:
        """``archived_field == value``; no-op when *value* is ``None``.

        Omitting the flag leaves archived and live rows alike. Callers that
        want live rows only pass ``False`` explicitly. Entities without an
        archive flag ignore *value*.
        """
        if self._archived_field is None:
            return None
        return self.from_criterion(FilterCriterion(FilterKind.BOOLEAN_EQUALITY, self._archived_field, value))

    def like_spec(self, text: str | None) -> S | None:
        """Case-insensitive substring match on the name field; no-op when blank or unnamed."""
        if self._name_field is None:
            return None
        return self.from_criterion(FilterCriterion(FilterKind.TEXT_CONTAINS, self._name_field, text))

    def eq_spec(self, field: str, value: Any) -> S | None:
        """``field == value``; no-op when *value* is ``None``."""
        return self.from_criterion(FilterCriterion(FilterKind.EQUALITY, field, value))

    def is_null_spec(self, field: str, is_null: bool | None) -> S | None:
        """``field IS NULL`` when *is_null* is true, ``IS NOT NULL`` when false; no-op on ``None``."""
        if is_null is None:
            return None
        kind = FilterKind.IS_NULL if is_null else FilterKind.IS_NOT_NULL
        return self.from_criterion(FilterCriterion(kind, field))

    def resolve_sort(self, raw: str | None) -> SortCriterion:
        """Resolve *raw* against the registry, falling back to its default."""
        return self._registry.resolve(raw, self._properties.sort_separator)

    def sort_spec(self, raw: str | None) -> S:
        """Always exactly one ordering: the resolved key, or the registry default."""
        return self._create_order_by(self.resolve_sort(raw))

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def spec_builder(self, spec: S | None = None) -> SpecBuilder[S]:
        """Start a fluent AND chain, optionally seeded with *spec*."""
        return SpecBuilder(self, spec)

    def build_specification(self, *predicates: S | None) -> S:
        """AND-combine *predicates* left to right, skipping no-ops.

        When no predicate orders the result, the registry's default ordering
        is appended, so an empty call matches every row in default order.
        """
        specs = [p for p in predicates if p is not None]
        if not any(s.is_ordered for s in specs):
            specs.append(self.sort_spec(None))
        logger.debug(
            "specification_built",
            supplied=len(predicates),
            applied=len(specs),
        )
        return self._combine_and(specs)

    def _combine_and(self, specs: list[S]) -> S:
        """AND-combine a list of specs. Returns a no-op if empty."""
        if not specs:
            return self._create_noop()
        result = specs[0]
        for s in specs[1:]:
            result = result & s
        return result


class SpecBuilder(Generic[S]):
    """Fluent AND chain over nullable predicates.

    Usage::

        spec = specs.spec_builder(specs.is_archived_spec(False)) \\
            .and_(specs.like_spec(name)) \\
            .and_(specs.sort_spec(sort)) \\
            .build()
    """

    def __init__(self, owner: BaseSpecifications[S], spec: S | None = None) -> None:
        self._owner = owner
        self._specs: list[S | None] = [spec]

    def and_(self, spec: S | None) -> SpecBuilder[S]:
        self._specs.append(spec)
        return self

    def build(self) -> S:
        return self._owner.build_specification(*self._specs)
