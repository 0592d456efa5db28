"""Error hierarchy for Eventfold.

This module defines the exception hierarchy surfaced by the event store,
the validator and the projection engine. Every error carries a
human-readable message plus an optional ``details`` dict for context.

Exception Hierarchy:
    EventfoldError (base)
    ├── ConfigError                  - Configuration loading and validation issues
    ├── ValidationError              - Event record failed a structural check
    │   ├── MissingFieldError        - Required field absent or null
    │   └── UnknownAggregateTypeError - No reducer registered for a type
    └── PersistenceError             - Storage I/O failures
        ├── DuplicateEventError      - Event record already exists on disk
        └── VersionConflictError     - Optimistic concurrency check failed

Absence is not an error: reading or listing a location that does not exist
yields an empty result, and deleting a missing aggregate is a no-op.
"""

from typing import Any


class EventfoldError(Exception):
    """Base exception for all Eventfold errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error description.
            details: Optional dict with additional context about the error.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigError(EventfoldError):
    """Error from configuration operations.

    Attributes:
        config_key: The configuration key that caused the error.
        config_file: Path to the config file if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        config_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file


class ValidationError(EventfoldError):
    """An event record failed a structural or format check.

    Attributes:
        field: The wire name of the offending field (e.g. "eventId").
        rule: Short machine-readable name of the violated rule
              (e.g. "missing_field", "invalid_uuid", "invalid_version").
        value: The invalid value, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        rule: str | None = None,
        value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable error description.
            field: The field that failed validation.
            rule: The rule that was violated.
            value: The invalid value.
            details: Optional dict with additional context.
        """
        super().__init__(message, details)
        self.field = field
        self.rule = rule
        self.value = value

    @property
    def safe_value(self) -> str:
        """Return a short representation of the value for logging."""
        if self.value is None:
            return "<None>"
        if isinstance(self.value, str):
            if len(self.value) > 50:
                return f"{self.value[:20]}...({len(self.value)} chars)"
            return repr(self.value)
        if isinstance(self.value, (int, float, bool)):
            return repr(self.value)
        return f"<{type(self.value).__name__}>"

    def __str__(self) -> str:
        base = self.message
        if self.field:
            base = f"{base} (field: {self.field}, value: {self.safe_value})"
        if self.details:
            base = f"{base} (details: {self.details})"
        return base


class MissingFieldError(ValidationError):
    """A required event field was absent or null."""

    def __init__(self, field: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            f"Missing required field: {field}",
            field=field,
            rule="missing_field",
            details=details,
        )


class UnknownAggregateTypeError(ValidationError):
    """No reducer is registered for the requested aggregate type."""

    def __init__(self, aggregate_type: str) -> None:
        super().__init__(
            f"No reducer registered for aggregate type: {aggregate_type}",
            field="aggregateType",
            rule="unknown_aggregate_type",
            value=aggregate_type,
        )


class PersistenceError(EventfoldError):
    """Error from storage operations.

    Raised when creating, reading, listing or removing event files fails for
    a reason other than the location not existing.

    Attributes:
        operation: The operation that failed (e.g., "write", "read", "delete").
        path: The file system path involved if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize persistence error.

        Args:
            message: Human-readable error description.
            operation: The operation that failed.
            path: The path involved.
            details: Optional dict with additional context.
        """
        super().__init__(message, details)
        self.operation = operation
        self.path = path


class DuplicateEventError(PersistenceError):
    """An event record with the same identifier already exists."""


class VersionConflictError(PersistenceError):
    """The aggregate's stored version differs from the writer's expectation.

    Attributes:
        aggregate_type: Type of the aggregate written to.
        aggregate_id: Identifier of the aggregate written to.
        expected: Version the writer expected to be the latest.
        actual: Highest version actually stored.
    """

    def __init__(
        self,
        aggregate_type: str,
        aggregate_id: str,
        *,
        expected: int,
        actual: int,
    ) -> None:
        super().__init__(
            f"Version conflict on {aggregate_type}-{aggregate_id}: "
            f"expected version {expected}, found {actual}",
            operation="write",
            details={"expected": expected, "actual": actual},
        )
        self.aggregate_type = aggregate_type
        self.aggregate_id = aggregate_id
        self.expected = expected
        self.actual = actual
