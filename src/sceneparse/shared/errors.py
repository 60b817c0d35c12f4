"""sceneparse Error Handling Module

This module defines the error handling system for sceneparse, providing
structured error classes with context information.

Parsing itself never raises: an unrecognized field is simply absent. The
errors below cover misuse of the public API (an unknown release kind, an
invalid matcher order), broken internal invariants, and configuration loading.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for sceneparse.

    This enum serves as the single source of truth for all error codes
    used throughout the package.
    """

    # Parsing Errors
    RELEASE_PARSE_FAILED = "RELEASE_PARSE_FAILED"
    OVERLAPPING_CLAIM = "OVERLAPPING_CLAIM"

    # Parser Configuration Errors
    INVALID_RELEASE_KIND = "INVALID_RELEASE_KIND"
    INVALID_MATCHER_ORDER = "INVALID_MATCHER_ORDER"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"

    # File System Errors
    FILE_READ_ERROR = "FILE_READ_ERROR"
    FILE_PERMISSION_DENIED = "FILE_PERMISSION_DENIED"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContextModel:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data to ensure safe serialization in structured logs.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        release: Optional release name being parsed
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    release: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] = ()) -> dict[str, Any]:
        """Export context as a dict for logging.

        Args:
            mask_keys: Fields to exclude from output.

        Returns:
            Dictionary without unset or masked fields; ``additional_data`` is
            always present.

        Example:
            >>> ErrorContextModel(operation="parse", release="Show.S01E01").safe_dict()
            {'operation': 'parse', 'release': 'Show.S01E01', 'additional_data': {}}
        """
        data: dict[str, Any] = {}
        if self.file_path is not None and "file_path" not in mask_keys:
            data["file_path"] = self.file_path
        if self.operation is not None and "operation" not in mask_keys:
            data["operation"] = self.operation
        if self.release is not None and "release" not in mask_keys:
            data["release"] = self.release

        if self.additional_data is not None and "additional_data" not in mask_keys:
            data["additional_data"] = self.additional_data
        else:
            data["additional_data"] = {}

        return data


ErrorContext = ErrorContextModel


class SceneParseError(Exception):
    """Base exception class for all sceneparse errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize SceneParseError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        formatted_message = f"{code.value}: {message}"
        super().__init__(formatted_message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error with code, message,
            context, and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(SceneParseError):
    """Domain-specific errors.

    These errors occur when the parsing engine's own rules are violated,
    for example two matchers claiming the same characters.
    """


class InfrastructureError(SceneParseError):
    """Infrastructure-related errors.

    These errors occur when touching the file system, which only the
    configuration loader does.
    """


class ApplicationError(SceneParseError):
    """Application-level errors such as configuration problems."""


class ParserConfigurationError(ApplicationError):
    """Raised when a parser is constructed with an invalid kind or matcher order."""


class OverlappingClaimError(DomainError):
    """Raised when a claim would cover characters that are already claimed."""


def create_parsing_error(
    message: str,
    release: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> DomainError:
    """Create a parsing error with context."""
    context = ErrorContext(
        operation=operation,
        release=release,
        additional_data=(
            {"error_type": type(original_error).__name__} if original_error else None
        ),
    )
    return DomainError(
        ErrorCode.RELEASE_PARSE_FAILED,
        message,
        context,
        original_error,
    )


def create_overlapping_claim_error(
    field: str,
    start: int,
    end: int,
    release: str | None = None,
) -> OverlappingClaimError:
    """Create an overlapping-claim error for the span ``[start, end)``."""
    context = ErrorContext(
        operation="claim",
        release=release,
        additional_data={"field": field, "start": start, "end": end},
    )
    return OverlappingClaimError(
        ErrorCode.OVERLAPPING_CLAIM,
        f"Span [{start}, {end}) for '{field}' overlaps an existing claim",
        context,
    )


def create_invalid_kind_error(kind: object) -> ParserConfigurationError:
    """Create an error for an unknown release kind."""
    context = ErrorContext(
        operation="create_parser",
        additional_data={"kind": str(kind)},
    )
    return ParserConfigurationError(
        ErrorCode.INVALID_RELEASE_KIND,
        f"Unknown release kind: {kind!r} (expected 'tv', 'movie' or 'series')",
        context,
    )


def create_invalid_matcher_order_error(unknown: list[str]) -> ParserConfigurationError:
    """Create an error for a matcher order naming unknown steps."""
    context = ErrorContext(
        operation="run_pipeline",
        additional_data={"unknown_steps": ", ".join(unknown)},
    )
    return ParserConfigurationError(
        ErrorCode.INVALID_MATCHER_ORDER,
        f"Unknown matcher steps: {', '.join(unknown)}",
        context,
    )


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
    code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        code,
        message,
        context,
        original_error,
    )


def create_file_read_error(
    file_path: str | Path,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> InfrastructureError:
    """Create a file read error with context."""
    code = (
        ErrorCode.FILE_PERMISSION_DENIED
        if isinstance(original_error, PermissionError)
        else ErrorCode.FILE_READ_ERROR
    )
    context = ErrorContext(
        file_path=str(file_path),
        operation=operation,
    )
    return InfrastructureError(
        code,
        f"Failed to read file: {file_path}",
        context,
        original_error,
    )


__all__ = [
    "ApplicationError",
    "DomainError",
    "ErrorCode",
    "ErrorContext",
    "ErrorContextModel",
    "InfrastructureError",
    "OverlappingClaimError",
    "ParserConfigurationError",
    "PrimitiveContextValue",
    "SceneParseError",
    "create_config_error",
    "create_file_read_error",
    "create_invalid_kind_error",
    "create_invalid_matcher_order_error",
    "create_overlapping_claim_error",
    "create_parsing_error",
]
