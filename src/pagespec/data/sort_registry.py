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
"""Whitelist of externally visible sort keys for one entity type.

A raw ``sort`` parameter such as ``"name,desc"`` is never used as a column
name. Its key is looked up (case- and whitespace-insensitively) in a
:class:`SortRegistry`; anything the registry does not know resolves to the
registry's default ordering instead of failing.

Example::

    registry = SortRegistry(
        {"name": "name", "createdat": "created_at"},
        default=SortCriterion.desc("created_at"),
    )
    registry.resolve("Name,ASC")     # SortCriterion("name", ASC)
    registry.resolve("name,sideways")  # SortCriterion("name", DESC)
    registry.resolve("price,asc")    # SortCriterion("created_at", DESC)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

import structlog

from pagespec.data.criteria import Direction, SortCriterion

logger = structlog.get_logger("pagespec.data.sort_registry")

DEFAULT_SEPARATOR = ","


def parse_sort(raw: str | None, separator: str = DEFAULT_SEPARATOR) -> tuple[str, Direction] | None:
    """Split ``"<key><separator><direction>"`` on the first separator.

    Returns the normalised key and direction, or ``None`` when *raw* is
    absent, blank or has no separator.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text or separator not in text:
        return None
    key, direction = text.split(separator, 1)
    return key.strip().lower(), Direction.parse(direction)


class SortRegistry:
    """Read-only mapping of external sort keys to storage fields, plus a default.

    Built once per entity type and shared freely afterwards.
    """

    __slots__ = ("_entries", "_default")

    def __init__(self, entries: Mapping[str, str], default: SortCriterion) -> None:
        normalised: dict[str, str] = {}
        for key, field in entries.items():
            normalised_key = key.strip().lower()
            if not normalised_key:
                raise ValueError("sort key must not be blank")
            normalised[normalised_key] = field
        self._entries: Mapping[str, str] = MappingProxyType(normalised)
        self._default = default

    @property
    def default(self) -> SortCriterion:
        """The ordering used whenever a raw sort string cannot be resolved."""
        return self._default

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().lower() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def field_for(self, key: str) -> str | None:
        """Return the storage field for *key*, or ``None`` if it is not whitelisted."""
        return self._entries.get(key.strip().lower())

    def resolve(self, raw: str | None, separator: str = DEFAULT_SEPARATOR) -> SortCriterion:
        """Resolve a raw sort string to a known-good ordering. Never raises.

        Only an unknown or missing *key* falls back to the default. An
        unrecognised direction keeps the requested field and sorts descending.
        """
        parsed = parse_sort(raw, separator)
        if parsed is None:
            return self._default
        key, direction = parsed
        field = self._entries.get(key)
        if field is None:
            logger.debug("sort_key_unknown", key=key, fallback=self._default.field)
            return self._default
        return SortCriterion(field=field, direction=direction)

    def __repr__(self) -> str:
        return f"SortRegistry(entries={dict(self._entries)!r}, default={self._default!r})"
