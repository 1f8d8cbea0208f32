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
"""Generic async query executor built on SQLAlchemy 2.0."""

from __future__ import annotations

from typing import Any, Generic, TypeVar, cast, get_args, get_origin

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pagespec.data.page import Page
from pagespec.data.pageable import PageRequest
from pagespec.data.relational.sqlalchemy.specification import Specification

logger = structlog.get_logger("pagespec.data.relational.sqlalchemy.repository")

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(Generic[T, ID]):
    """Specification-driven repository for SQLAlchemy entities.

    Type Parameters:
        T: The entity type (any SQLAlchemy model).
        ID: The primary key type (e.g. UUID, int, str).

    Usage::

        class ToolRepository(Repository[Tool, UUID]):
            pass  # entity type auto-extracted

        page = await ToolRepository(session=session).execute(spec, validate_page(1, 20))
    """

    _entity_type: type | None = None
    _id_type: type | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", []):
            origin = get_origin(base)
            if origin is Repository:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    cls._entity_type = args[0]
                if len(args) > 1 and not isinstance(args[1], TypeVar):
                    cls._id_type = args[1]
                break

    def __init__(self, model: type[T] | None = None, session: AsyncSession | None = None) -> None:
        resolved = model or getattr(type(self), "_entity_type", None)
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} requires either Repository[Entity, ID] declaration or explicit model argument"
            )
        self._model: type[T] = cast(type[T], resolved)
        self._session = session

    def _require_session(self) -> AsyncSession:
        """Return the session or raise if none is configured."""
        if self._session is None:
            raise RuntimeError("No AsyncSession configured for repository")
        return self._session

    async def save(self, entity: T) -> T:
        """Persist an entity (insert or update)."""
        session = self._require_session()
        session.add(entity)
        await session.flush()
        await session.refresh(entity)
        return entity

    async def save_all(self, entities: list[T]) -> list[T]:
        """Persist multiple entities in a single batch."""
        session = self._require_session()
        session.add_all(entities)
        await session.flush()
        for entity in entities:
            await session.refresh(entity)
        return entities

    async def find_by_id(self, id: ID) -> T | None:
        """Find an entity by its primary key."""
        session = self._require_session()
        return await session.get(self._model, id)

    async def find_all_by_spec(self, spec: Specification[T]) -> list[T]:
        """Find all entities matching the specification, in its order."""
        session = self._require_session()
        stmt = spec.to_predicate(self._model, select(self._model))
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_spec(self, spec: Specification[T]) -> int:
        """Count entities matching the specification's constraints."""
        session = self._require_session()
        filtered = spec.to_predicate(self._model, select(self._model))
        count_stmt = select(func.count()).select_from(filtered.order_by(None).subquery())
        result = await session.execute(count_stmt)
        return result.scalar_one()

    async def execute(self, spec: Specification[T], page: PageRequest) -> Page[T]:
        """Run *spec* and return one page plus the unpaged match count."""
        session = self._require_session()
        total = await self.count_by_spec(spec)

        stmt = spec.to_predicate(self._model, select(self._model))
        stmt = stmt.offset(page.offset).limit(page.page_size)
        result = await session.execute(stmt)
        items = list(result.scalars().all())

        logger.debug(
            "page_fetched",
            entity=self._model.__name__,
            page=page.page_number,
            size=page.page_size,
            returned=len(items),
            total=total,
        )
        return Page(items=items, total_count=total, page_number=page.page_number, page_size=page.page_size)

    async def count(self) -> int:
        """Return the total number of entities."""
        session = self._require_session()
        stmt = select(func.count()).select_from(self._model)
        result = await session.execute(stmt)
        return result.scalar_one()
