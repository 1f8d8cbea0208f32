"""Unified exception hierarchy for pagespec.

All library exceptions inherit from PageSpecException, enabling unified
error handling at the calling layer.

Categories:
- BusinessException: Rule violations raised on caller input
- ValidationException: Rejected request parameters (paging bounds)

Filtering and sorting never raise: absent, blank or unknown values degrade
to "no constraint" or to the default ordering. Paging is the only place
where invalid input is rejected.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class PageSpecException(Exception):
    """Base exception for all pagespec errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_PAGE_SIZE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(PageSpecException):
    """Rule violations on caller-supplied input."""


class ValidationException(BusinessException):
    """Input validation failures."""

    def __init__(
        self,
        message: str,
        parameter: str,
        value: Any,
        code: str | None = None,
    ) -> None:
        super().__init__(message, code=code, context={"parameter": parameter, "value": value})
        self.parameter = parameter
        self.value = value


class InvalidPageNumberException(ValidationException):
    """Page number is below the first page."""

    CODE = "INVALID_PAGE_NUMBER"

    def __init__(self, value: int, parameter: str = "page") -> None:
        super().__init__(
            f"{parameter} must be >= 1, got {value}",
            parameter=parameter,
            value=value,
            code=self.CODE,
        )


class InvalidPageSizeException(ValidationException):
    """Page size is outside ``1..max_page_size``."""

    CODE = "INVALID_PAGE_SIZE"

    def __init__(self, value: int, max_page_size: int, parameter: str = "size") -> None:
        super().__init__(
            f"{parameter} must be between 1 and {max_page_size}, got {value}",
            parameter=parameter,
            value=value,
            code=self.CODE,
        )
        self.context["max_page_size"] = max_page_size
        self.max_page_size = max_page_size
