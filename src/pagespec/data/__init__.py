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
"""pagespec Data — filter, sort and pagination specifications with pluggable adapters.

pagespec Data provides shared abstractions (Specification, the predicate
builders, SortRegistry, PageRequest, Page, QueryExecutorPort) that every
data adapter builds on.

Adapters:
    - **Relational** (``pagespec.data.relational.sqlalchemy``) — SQLAlchemy async ORM.
    - **Memory** (``pagespec.data.memory``) — plain Python record lists.

Adapter-agnostic types are exported directly. Default adapter (SQLAlchemy)
exports are re-exported for convenience.
"""

# Default adapter (SQLAlchemy) re-exports
from pagespec.data.relational.sqlalchemy import (
    ArchivableMixin,
    Base,
    BaseEntity,
    Repository,
    Specifications,
)

# Adapter-agnostic exports
from pagespec.data.criteria import Direction, FilterCriterion, FilterKind, SortCriterion
from pagespec.data.entities import DEFAULT_SORT, EntityKind, sort_registry_for
from pagespec.data.filter import BaseSpecifications, SpecBuilder
from pagespec.data.listing import DEFAULT_IS_ARCHIVED, ListQuery, find_page
from pagespec.data.page import Page
from pagespec.data.pageable import MAX_PAGE_SIZE, PageRequest, validate_page
from pagespec.data.ports.outbound import QueryExecutorPort
from pagespec.data.sort_registry import SortRegistry, parse_sort
from pagespec.data.specification import Specification

__all__ = [
    # Adapter-agnostic
    "BaseSpecifications",
    "DEFAULT_IS_ARCHIVED",
    "DEFAULT_SORT",
    "Direction",
    "EntityKind",
    "FilterCriterion",
    "FilterKind",
    "ListQuery",
    "MAX_PAGE_SIZE",
    "Page",
    "PageRequest",
    "QueryExecutorPort",
    "SortCriterion",
    "SortRegistry",
    "SpecBuilder",
    "Specification",
    "find_page",
    "parse_sort",
    "sort_registry_for",
    "validate_page",
    # Default adapter (SQLAlchemy)
    "ArchivableMixin",
    "Base",
    "BaseEntity",
    "Repository",
    "Specifications",
]
