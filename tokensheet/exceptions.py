"""
Custom exception hierarchy for tokensheet.

Provides structured exception types for the aggregation, configuration
and build stages, so callers can tell a bad token record apart from a
bad output path.
"""


class TokensheetError(Exception):
    """Base exception for all tokensheet errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Aggregation Exceptions
# =============================================================================


class AggregationError(TokensheetError):
    """Base exception for errors raised while grouping token records."""
    pass


class MalformedRecordError(AggregationError):
    """Raised when a token record is missing a required classification field."""

    def __init__(
        self,
        field: str,
        record_repr: str = "unknown",
        index: int | None = None,
        reason: str = "is missing",
    ):
        details = {"field": field, "record": record_repr, "reason": reason}
        if index is not None:
            details["index"] = index
        super().__init__(
            f"Token record field '{field}' {reason}",
            details=details,
        )
        self.field = field
        self.index = index


class StructuralConflictError(AggregationError):
    """Raised when an item is used both as a property and as a sub-class."""

    def __init__(self, class_key: str, item: str, existing: str, incoming: str):
        super().__init__(
            f"Item '{item}' in '{class_key}' is already a {existing}, cannot use it as a {incoming}",
            details={
                "class_key": class_key,
                "item": item,
                "existing": existing,
                "incoming": incoming,
            },
        )
        self.class_key = class_key
        self.item = item


# Short names used throughout the docs
MalformedRecord = MalformedRecordError
StructuralConflict = StructuralConflictError


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(TokensheetError):
    """Raised when a render or build setting is invalid."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            f"Invalid value for '{setting}': {reason}",
            details={"setting": setting, "reason": reason},
        )
        self.setting = setting


# =============================================================================
# Build Exceptions
# =============================================================================


class BuildError(TokensheetError):
    """Raised when a stylesheet cannot be written to its destination."""

    def __init__(self, destination: str, cause: str):
        super().__init__(
            f"Failed to write stylesheet to {destination}: {cause}",
            details={"destination": destination, "cause": cause},
        )
        self.destination = destination
