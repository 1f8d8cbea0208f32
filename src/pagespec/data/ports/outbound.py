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
"""Outbound ports: the query executor every list flow depends on."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from pagespec.data.page import Page
from pagespec.data.pageable import PageRequest

T = TypeVar("T")


@runtime_checkable
class QueryExecutorPort(Protocol[T]):
    """Storage capability: run a composed specification and return one page.

    Implementations apply the specification's constraints and ordering,
    skip page.offset rows, return at most page.page_size rows and
    report the number of rows matching the constraints, ignoring paging.
    """

    async def execute(self, spec: Any, page: PageRequest) -> Page[T]: ...

    async def find_all_by_spec(self, spec: Any) -> list[T]: ...
