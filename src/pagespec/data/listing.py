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
"""List endpoint flow: validate paging, compose predicates, execute.

Every list endpoint (tools, brands, categories, labels, persons, roles,
stocks, comments) follows the same sequence, so it lives here once::

    query = ListQuery.from_params(page=1, size=20, name="drill", sort="name,asc")
    page = await find_page(repo, Specifications.for_kind(EntityKind.TOOL), query)

Entity-specific filters are passed as extra predicates::

    await find_page(repo, specs, query, specs.eq_spec("tool_id", tool_id))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pagespec.data.filter import BaseSpecifications
from pagespec.data.page import Page
from pagespec.data.pageable import validate_page
from pagespec.data.ports.outbound import QueryExecutorPort
from pagespec.data.specification import Specification

T = TypeVar("T")
S = TypeVar("S", bound=Specification[Any, Any])

# Listing without an explicit flag shows live rows only.
DEFAULT_IS_ARCHIVED = False


@dataclass(frozen=True)
class ListQuery:
    """Raw query parameters of a list request.

    Attributes:
        page: 1-based page number.
        size: Rows per page.
        name: Optional name fragment.
        is_archived: Archive flag; None matches archived and live rows.
        sort: Optional "key,direction" sort parameter.
    """

    page: int
    size: int
    name: str | None = None
    is_archived: bool | None = None
    sort: str | None = None

    @classmethod
    def from_params(
        cls,
        page: int,
        size: int,
        name: str | None = None,
        is_archived: bool | None = None,
        sort: str | None = None,
    ) -> ListQuery:
        """Build a query the way list endpoints receive it: an absent archive flag means live rows.

        Entities without an archive flag (comments) ignore the default.
        """
        return cls(
            page=page,
            size=size,
            name=name,
            is_archived=DEFAULT_IS_ARCHIVED if is_archived is None else is_archived,
            sort=sort,
        )


async def find_page(
    executor: QueryExecutorPort[T],
    specs: BaseSpecifications[S],
    query: ListQuery,
    *extra: S | None,
) -> Page[T]:
    """Validate *query*'s paging, build its specification and run it.

    Raises:
        InvalidPageNumberException: If the page number is below 1.
        InvalidPageSizeException: If the page size is out of range.
    """
    page = validate_page(query.page, query.size, specs.properties.max_page_size)
    spec = specs.build_specification(
        specs.is_archived_spec(query.is_archived),
        specs.like_spec(query.name),
        *extra,
        specs.sort_spec(query.sort),
    )
    return await executor.execute(spec, page)
