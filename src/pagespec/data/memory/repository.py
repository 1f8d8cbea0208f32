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
"""Query executor over a list of records held in memory."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

import structlog

from pagespec.data.memory.specification import MemorySpecification
from pagespec.data.page import Page
from pagespec.data.pageable import PageRequest

logger = structlog.get_logger("pagespec.data.memory.repository")

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Runs :class:`MemorySpecification` objects against a record list.

    Records may be any objects exposing their fields as attributes, or
    mappings keyed by field name.
    """

    def __init__(self, model: type[T] | None = None, records: Iterable[T] = ()) -> None:
        self._model: type[Any] = model or object
        self._records: list[T] = list(records)

    async def save(self, entity: T) -> T:
        """Append an entity."""
        self._records.append(entity)
        return entity

    async def save_all(self, entities: list[T]) -> list[T]:
        """Append several entities, keeping their order."""
        self._records.extend(entities)
        return entities

    async def find_all_by_spec(self, spec: MemorySpecification[T]) -> list[T]:
        """Find all records matching the specification, in its order."""
        return spec.to_predicate(self._model, list(self._records))

    async def execute(self, spec: MemorySpecification[T], page: PageRequest) -> Page[T]:
        """Run *spec* and return one page plus the unpaged match count."""
        matched = spec.to_predicate(self._model, list(self._records))
        items = matched[page.offset : page.offset + page.page_size]
        logger.debug(
            "page_fetched",
            entity=self._model.__name__,
            page=page.page_number,
            size=page.page_size,
            returned=len(items),
            total=len(matched),
        )
        return Page(items=items, total_count=len(matched), page_number=page.page_number, page_size=page.page_size)

    async def count(self) -> int:
        return len(self._records)
