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
"""Sort registries and filterable fields for every listable entity kind, built once at import."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from pagespec.data.criteria import SortCriterion
from pagespec.data.sort_registry import SortRegistry

NAME_FIELD = "name"
ARCHIVED_FIELD = "is_archived"
CREATED_AT_FIELD = "created_at"
UPDATED_AT_FIELD = "updated_at"


class EntityKind(str, Enum):
    """Closed set of entity types served by list endpoints."""

    TOOL = "tool"
    BRAND = "brand"
    CATEGORY = "category"
    LABEL = "label"
    PERSON = "person"
    ROLE = "role"
    STOCK = "stock"
    COMMENT = "comment"


_TIMESTAMP_KEYS = {
    "createdat": CREATED_AT_FIELD,
    "updatedat": UPDATED_AT_FIELD,
}

_NAMED_KEYS = {"name": NAME_FIELD, **_TIMESTAMP_KEYS}

# Newest first unless the caller asks otherwise.
DEFAULT_SORT = SortCriterion.desc(CREATED_AT_FIELD)


def _build() -> Mapping[EntityKind, SortRegistry]:
    registries = {kind: SortRegistry(_NAMED_KEYS, default=DEFAULT_SORT) for kind in EntityKind}
    # Comments have no name.
    registries[EntityKind.COMMENT] = SortRegistry(_TIMESTAMP_KEYS, default=DEFAULT_SORT)
    return MappingProxyType(registries)


SORT_REGISTRIES: Mapping[EntityKind, SortRegistry] = _build()


@dataclass(frozen=True)
class FilterFields:
    """Storage fields behind the archive and name filters; ``None`` when the kind has none."""

    name_field: str | None = NAME_FIELD
    archived_field: str | None = ARCHIVED_FIELD


# Comments carry neither a name nor an archive flag.
FILTER_FIELDS: Mapping[EntityKind, FilterFields] = MappingProxyType(
    {kind: FilterFields(None, None) if kind is EntityKind.COMMENT else FilterFields() for kind in EntityKind}
)


def _as_kind(kind: EntityKind | str) -> EntityKind:
    if isinstance(kind, EntityKind):
        return kind
    return EntityKind(kind.strip().lower())


def sort_registry_for(kind: EntityKind | str) -> SortRegistry:
    """Look up the sort registry for an entity kind (enum member or its value).

    Raises:
        ValueError: If *kind* names no known entity.
    """
    return SORT_REGISTRIES[_as_kind(kind)]


def filter_fields_for(kind: EntityKind | str) -> FilterFields:
    """Look up which archive and name fields an entity kind can be filtered on.

    Raises:
        ValueError: If *kind* names no known entity.
    """
    return FILTER_FIELDS[_as_kind(kind)]
