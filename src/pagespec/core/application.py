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
"""Application bootstrap — loads configuration, configures logging, hands out predicate builders."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]

from pagespec.config.properties.logging import LoggingProperties
from pagespec.config.properties.query import QueryProperties
from pagespec.core.config import Config
from pagespec.data.entities import EntityKind, sort_registry_for
from pagespec.data.filter import BaseSpecifications
from pagespec.data.relational.sqlalchemy.filter import Specifications
from pagespec.logging.port import LoggingPort
from pagespec.logging.structlog_adapter import StructlogAdapter

B = TypeVar("B", bound=BaseSpecifications[Any])

_PROFILES_ENV = "PAGESPEC_PROFILES_ACTIVE"


class PageSpecApplication:
    """Wires configuration and logging for the list endpoints.

    Startup sequence:
    1. Resolve active profiles (env var first, then the config file)
    2. Load configuration (library defaults, files, profile overlays)
    3. Configure logging (bound pagespec.logging settings go to the logging port)
    4. Bind and validate pagespec.query settings

    Usage::

        app = PageSpecApplication("config/pagespec.yaml")
        specs = app.specifications_for(EntityKind.TOOL)
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        active_profiles: list[str] | None = None,
        logging_port: LoggingPort | None = None,
    ) -> None:
        # 1. Load configuration (with profile merging, multi-source)
        config_dir = self._find_config_dir(config_path)
        profiles = active_profiles if active_profiles is not None else self._resolve_profiles_early(config_dir)
        if config_dir:
            self.config = Config.from_sources(config_dir, active_profiles=profiles)
        else:
            self.config = Config.defaults()
        self._active_profiles = list(profiles)

        # 2. Configure logging
        self._logging: LoggingPort = logging_port if logging_port is not None else StructlogAdapter()
        self._logging.configure(self.config.bind(LoggingProperties))
        self._logger = self._logging.get_logger("pagespec.core")

        # 3. Query settings, rejected at startup when invalid
        self._query_properties = self.config.bind(QueryProperties)

        for source in self.config.loaded_sources:
            self._logger.info("loaded_config", source=source)
        if self._active_profiles:
            self._logger.info("active_profiles", profiles=self._active_profiles)
        self._logger.info(
            "query_settings",
            max_page_size=self._query_properties.max_page_size,
            like_min_length=self._query_properties.like_min_length,
        )

    @property
    def active_profiles(self) -> list[str]:
        return list(self._active_profiles)

    @property
    def query_properties(self) -> QueryProperties:
        """Validated pagespec.query settings."""
        return self._query_properties

    def specifications_for(
        self,
        kind: EntityKind | str,
        factory: type[B] = Specifications,  # type: ignore[assignment]
    ) -> B:
        """Predicate builders for *kind* using the configured query settings.

        Pass ``factory=MemorySpecifications`` for the in-memory adapter.
        """
        return factory(sort_registry_for(kind), self._query_properties)

    def _find_config_dir(self, config_path: str | Path | None) -> Path | None:
        """Find the project directory containing config files."""
        if config_path:
            p = Path(config_path)
            return p.parent if p.is_file() else p
        for candidate in ["pagespec.yaml", "pagespec.toml", "config/pagespec.yaml", "config/pagespec.toml"]:
            if Path(candidate).exists():
                return Path(".")
        return None

    @staticmethod
    def _resolve_profiles_early(config_dir: Path | None) -> list[str]:
        """Resolve active profiles before full config load."""
        env_profiles = os.environ.get(_PROFILES_ENV, "")
        if env_profiles:
            return [p.strip() for p in env_profiles.split(",") if p.strip()]

        if config_dir is None:
            return []

        for candidate in [config_dir / "config" / "pagespec.yaml", config_dir / "pagespec.yaml"]:
            if candidate.exists():
                with open(candidate) as f:
                    data = yaml.safe_load(f) or {}
                profiles_value = (data.get("pagespec", {}) or {}).get("profiles", {})
                active = profiles_value.get("active", "") if isinstance(profiles_value, dict) else ""
                if active:
                    return [p.strip() for p in str(active).split(",") if p.strip()]

        return []
