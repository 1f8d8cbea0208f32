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
"""pagespec — filter, sort and pagination specifications for list endpoints.

Each list endpoint (tools, brands, categories, labels, persons, roles,
stocks, comments) turns optional query parameters into one composed query
specification: an archive flag, a name fragment, a whitelisted sort key
and a validated page window.

Quick start::

    from pagespec import EntityKind, ListQuery, Specifications, find_page

    specs = Specifications.for_kind(EntityKind.TOOL)
    page = await find_page(repo, specs, ListQuery.from_params(page=1, size=20, name="drill"))
"""

from pagespec.kernel import (
    BusinessException,
    InvalidPageNumberException,
    InvalidPageSizeException,
    PageSpecException,
    ValidationException,
)
from pagespec.core.config import Config, config_properties
from pagespec.config import LoggingProperties, QueryProperties
from pagespec.data import (
    DEFAULT_IS_ARCHIVED,
    DEFAULT_SORT,
    MAX_PAGE_SIZE,
    BaseSpecifications,
    Direction,
    EntityKind,
    FilterCriterion,
    FilterKind,
    ListQuery,
    Page,
    PageRequest,
    QueryExecutorPort,
    Repository,
    SortCriterion,
    SortRegistry,
    Specification,
    Specifications,
    find_page,
    sort_registry_for,
    validate_page,
)
from pagespec.data.memory import InMemoryRepository, MemorySpecifications
from pagespec.core.application import PageSpecApplication

__version__ = "0.1.0"

__all__ = [
    "BaseSpecifications",
    "BusinessException",
    "Config",
    "DEFAULT_IS_ARCHIVED",
    "DEFAULT_SORT",
    "Direction",
    "EntityKind",
    "FilterCriterion",
    "FilterKind",
    "InMemoryRepository",
    "InvalidPageNumberException",
    "InvalidPageSizeException",
    "ListQuery",
    "LoggingProperties",
    "MAX_PAGE_SIZE",
    "MemorySpecifications",
    "Page",
    "PageRequest",
    "PageSpecApplication",
    "PageSpecException",
    "QueryExecutorPort",
    "QueryProperties",
    "Repository",
    "SortCriterion",
    "SortRegistry",
    "Specification",
    "Specifications",
    "ValidationException",
    "config_properties",
    "find_page",
    "sort_registry_for",
    "validate_page",
]
