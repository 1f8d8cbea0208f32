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
"""Query subsystem configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pagespec.core.config import config_properties


def _kebab(name: str) -> str:
    return name.replace("_", "-")


@config_properties(prefix="pagespec.query")
class QueryProperties(BaseModel):
    """Configuration for specification building and paging (pagespec.query.*).

    Attributes:
        max_page_size: Largest accepted page size; larger requests are rejected.
            May be lowered, never raised above 50.
        like_min_length: Shortest text that produces a contains-filter. Shorter
            (or blank) text contributes no constraint.
        sort_separator: Separator between sort key and direction (name,asc).
    """

    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, frozen=True)

    max_page_size: int = Field(default=50, ge=1, le=50)
    like_min_length: int = Field(default=1, ge=1)
    sort_separator: str = Field(default=",", min_length=1)
