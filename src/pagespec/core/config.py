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
"""pagespec settings: built-in defaults, YAML/TOML files, profile overlays and env vars."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import tomllib
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")

_PREFIX_ATTR = "__pagespec_config_prefix__"
_ENV_PREFIX = "PAGESPEC_"
_STEM = "pagespec"
_DEFAULTS_SOURCE = "pagespec-defaults.yaml (library defaults)"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass or pydantic model as bound to the section at *prefix*.

    Usage::

        @config_properties(prefix="pagespec.query")
        class QueryProperties(BaseModel):
            max_page_size: int = Field(default=50, ge=1, le=50)
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def _library_defaults() -> dict[str, Any]:
    resource = importlib.resources.files("pagespec.resources").joinpath("pagespec-defaults.yaml")
    return yaml.safe_load(resource.read_text(encoding="utf-8")) or {}


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Nested dicts merge key by key; anything else in *override* replaces."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _candidates(base_dir: Path, stem: str) -> Iterator[Path]:
    for directory in (base_dir / "config", base_dir):
        for suffix in (".yaml", ".toml"):
            path = directory / f"{stem}{suffix}"
            if path.is_file():
                yield path


def _env_name(key: str) -> str:
    # pagespec.query.max-page-size -> PAGESPEC_QUERY_MAX_PAGE_SIZE
    name = key.removeprefix(f"{_STEM}.")
    return _ENV_PREFIX + name.upper().replace(".", "_").replace("-", "_")


def _coerce(value: Any, expected: Any) -> Any:
    if not isinstance(value, str):
        return value
    if expected is int:
        return int(value)
    if expected is float:
        return float(value)
    if expected is bool:
        return value.lower() in ("true", "1", "yes")
    return value


class Config:
    """Merged pagespec settings, read by dotted key or bound to a properties class.

    Later sources win: built-in defaults, ``config/pagespec.{yaml,toml}``,
    ``pagespec.{yaml,toml}``, then ``pagespec-<profile>`` overlays in
    activation order. ``PAGESPEC_*`` environment variables beat every file
    and are looked up at read time.
    """

    def __init__(self, data: dict[str, Any] | None = None, sources: list[str] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._sources: list[str] = list(sources or [])

    @property
    def loaded_sources(self) -> list[str]:
        """Sources merged into this configuration, lowest priority first."""
        return list(self._sources)

    @classmethod
    def defaults(cls) -> Config:
        return cls(_library_defaults(), [_DEFAULTS_SOURCE])

    @classmethod
    def from_sources(
        cls,
        base_dir: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Merge every config file found under *base_dir* for *active_profiles*."""
        base_dir = Path(base_dir)
        data = _library_defaults() if load_defaults else {}
        sources = [_DEFAULTS_SOURCE] if load_defaults else []

        for path in _candidates(base_dir, _STEM):
            data = _merge(data, _read(path))
            sources.append(str(path))
        for profile in active_profiles or []:
            for path in _candidates(base_dir, f"{_STEM}-{profile}"):
                data = _merge(data, _read(path))
                sources.append(f"{path} (profile: {profile})")

        return cls(data, sources)

    def get(self, key: str, default: Any = None) -> Any:
        """Value at dotted *key*; a matching ``PAGESPEC_*`` env var wins as a string."""
        env_value = os.environ.get(_env_name(key))
        if env_value is not None:
            return env_value

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def _section(self, prefix: str, names: list[str]) -> dict[str, Any]:
        # Files may spell a field snake_case or kebab-case.
        section: dict[str, Any] = {}
        for name in names:
            for key in (name, name.replace("_", "-")):
                value = self.get(f"{prefix}.{key}")
                if value is not None:
                    section[name] = value
                    break
        return section

    def bind(self, config_cls: type[T]) -> T:
        """Build *config_cls* from its ``@config_properties`` section.

        Pydantic models are validated and a failure raises ``ValueError``
        naming the class. Dataclass fields typed int, float or bool accept
        env var strings.
        """
        prefix = getattr(config_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        if issubclass(config_cls, BaseModel):
            section = self._section(prefix, list(config_cls.model_fields))
            try:
                return cast(T, config_cls.model_validate(section))
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        hints = get_type_hints(config_cls)
        names = [f.name for f in dataclasses.fields(config_cls)]  # type: ignore[arg-type]
        section = self._section(prefix, names)
        return config_cls(**{name: _coerce(value, hints.get(name)) for name, value in section.items()})
