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
"""structlog-backed :class:`~pagespec.logging.port.LoggingPort`, the application default."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from pagespec.config.properties.logging import LoggingProperties


def _to_level(value: object) -> int:
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else logging.INFO


class StructlogAdapter:
    """Renders pagespec events as console lines or JSON objects.

    Keys of pagespec.logging.level other than root name stdlib
    loggers (pagespec.data.memory.repository, ...) and set their level.
    Unknown level names fall back to INFO.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout
        self.renderer = "console"
        self.levels: dict[str, int] = {}

    def configure(self, properties: LoggingProperties) -> None:
        levels = {name: _to_level(value) for name, value in properties.level.items()}
        root = levels.pop("root", logging.INFO)
        self.renderer = "json" if str(properties.format).lower() == "json" else "console"

        renderer: structlog.types.Processor
        if self.renderer == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        # Not cached: module-level loggers must pick up a later configure().
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                renderer,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.basicConfig(format="%(message)s", stream=self._stream, level=root, force=True)
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)
        self.levels = {"root": root, **levels}

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)
