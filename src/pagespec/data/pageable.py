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
"""Validated pagination requests.

Paging bounds are the one place where bad input is rejected instead of
being absorbed: an out-of-range page or size raises before any query runs.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from pagespec.kernel.exceptions import InvalidPageNumberException, InvalidPageSizeException

logger = structlog.get_logger("pagespec.data.pageable")

MAX_PAGE_SIZE = 50


@dataclass(frozen=True)
class PageRequest:
    """A validated page request.

    Attributes:
        page_number: 1-based page number as supplied by the caller.
        page_size: Number of rows per page.
    """

    page_number: int
    page_size: int

    @property
    def index(self) -> int:
        """Zero-based page index."""
        return self.page_number - 1

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return self.index * self.page_size

    def next(self) -> PageRequest:
        """Return the request for the next page."""
        return PageRequest(page_number=self.page_number + 1, page_size=self.page_size)

    def previous(self) -> PageRequest:
        """Return the request for the previous page (min page 1)."""
        return PageRequest(page_number=max(1, self.page_number - 1), page_size=self.page_size)


def validate_page(page_number: int, page_size: int, max_page_size: int = MAX_PAGE_SIZE) -> PageRequest:
    """Check paging bounds and build a :class:`PageRequest`.

    Raises:
        InvalidPageNumberException: If *page_number* is below 1.
        InvalidPageSizeException: If *page_size* is outside ``1..max_page_size``.
    """
    if page_number < 1:
        logger.warning("page_rejected", parameter="page", value=page_number)
        raise InvalidPageNumberException(page_number)
    if page_size < 1 or page_size > max_page_size:
        logger.warning("page_rejected", parameter="size", value=page_size, max_page_size=max_page_size)
        raise InvalidPageSizeException(page_size, max_page_size)
    return PageRequest(page_number=page_number, page_size=page_size)
