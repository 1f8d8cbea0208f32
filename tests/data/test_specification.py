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
"""Tests for Specification pattern — composable query predicates."""

from __future__ import annotations

import pytest
from sqlalchemy import String, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Mapped, mapped_column

from pagespec.data.relational.sqlalchemy.entity import ArchivableMixin, Base, BaseEntity
from pagespec.data.relational.sqlalchemy.specification import Specification

# ---------------------------------------------------------------------------
# Test entity
# ---------------------------------------------------------------------------


class Person(ArchivableMixin, BaseEntity):
    __tablename__ = "spec_persons"

    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(50), default="user")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Seed the database with a known set of persons."""
    persons = [
        Person(name="Alice", role="admin", is_archived=False),
        Person(name="Bob", role="user", is_archived=False),
        Person(name="Charlie", role="admin", is_archived=True),
        Person(name="Diana", role="user", is_archived=True),
    ]
    session.add_all(persons)
    await session.flush()
    return session


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _rows(session: AsyncSession, spec: Specification[Person]) -> list[str]:
    """Apply *spec* and return matching names in the order returned."""
    stmt = spec.to_predicate(Person, select(Person))
    result = await session.execute(stmt)
    return [p.name for p in result.scalars().all()]


async def _names(session: AsyncSession, spec: Specification[Person]) -> list[str]:
    """Apply *spec* and return sorted list of matching names."""
    return sorted(await _rows(session, spec))


_ADMIN: Specification[Person] = Specification(lambda root, q: q.where(root.role == "admin"))
_LIVE: Specification[Person] = Specification(lambda root, q: q.where(root.is_archived == False))  # noqa: E712
_BY_NAME_DESC: Specification[Person] = Specification(lambda root, q: q.order_by(root.name.desc()), ordered=True)

# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestSpecificationSingle:
    """A single specification applies its predicate correctly."""

    @pytest.mark.asyncio
    async def test_filter_by_role(self, seeded_session: AsyncSession):
        assert await _names(seeded_session, _ADMIN) == ["Alice", "Charlie"]

    @pytest.mark.asyncio
    async def test_filter_by_archive_flag(self, seeded_session: AsyncSession):
        assert await _names(seeded_session, _LIVE) == ["Alice", "Bob"]

    def test_plain_filter_is_not_ordered(self):
        assert _ADMIN.is_ordered is False
        assert _BY_NAME_DESC.is_ordered is True


class TestSpecificationAnd:
    """AND (&) combination — both conditions must be satisfied."""

    @pytest.mark.asyncio
    async def test_and_combination(self, seeded_session: AsyncSession):
        assert await _names(seeded_session, _ADMIN & _LIVE) == ["Alice"]

    @pytest.mark.asyncio
    async def test_and_three_specs(self, seeded_session: AsyncSession):
        name_spec: Specification[Person] = Specification(lambda root, q: q.where(root.name == "Alice"))
        assert await _names(seeded_session, _ADMIN & _LIVE & name_spec) == ["Alice"]

    @pytest.mark.asyncio
    async def test_and_keeps_ordering(self, seeded_session: AsyncSession):
        combined = _LIVE & _BY_NAME_DESC
        assert combined.is_ordered is True
        assert await _rows(seeded_session, combined) == ["Bob", "Alice"]

    @pytest.mark.asyncio
    async def test_and_order_independent_for_filters(self, seeded_session: AsyncSession):
        assert await _names(seeded_session, _ADMIN & _LIVE) == await _names(seeded_session, _LIVE & _ADMIN)


class TestSpecificationNoop:
    """Empty / no-op specification."""

    @pytest.mark.asyncio
    async def test_noop_returns_all(self, seeded_session: AsyncSession):
        noop: Specification[Person] = Specification(lambda root, q: q)
        assert await _names(seeded_session, noop) == ["Alice", "Bob", "Charlie", "Diana"]

    @pytest.mark.asyncio
    async def test_noop_and_spec(self, seeded_session: AsyncSession):
        noop: Specification[Person] = Specification(lambda root, q: q)
        assert await _names(seeded_session, noop & _ADMIN) == ["Alice", "Charlie"]
