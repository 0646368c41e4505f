"""Error classification for the carousel engine.

Geometry and index errors are raised synchronously to whoever called the
mutating operation; nothing is retried. Identity problems are not errors at
all: they are reported as an ``IdentityWarning`` and the selector falls back
to a full rebuild.

Example:
    from swipe_selector.core.errors import ConfigurationError, ErrorCategory

    try:
        selector.transition_to(7)
    except ConfigurationError as ex:
        assert ex.category is ErrorCategory.CONFIGURATION
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    CONFIGURATION = auto()  # Bad option value or transition target
    DEGENERATE_INPUT = auto()  # Sample data that cannot form a lookup
    IDENTITY = auto()  # Non-unique item keys


# Categories that only warrant a warning
NON_FATAL_CATEGORIES = {
    ErrorCategory.IDENTITY,
}


class SelectorError(Exception):
    """Base class for errors raised by a selector.

    Attributes:
        category: The specific type of error.
        original_error: The underlying exception, when this error wraps one.
    """

    default_category = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory | None = None,
    ) -> "SelectorError":
        """Create an error of this class wrapping an existing exception."""
        return cls(
            message=str(ex),
            category=category,
            original_error=ex,
        )


class ConfigurationError(SelectorError, ValueError):
    """Invalid option, out-of-range index or non-integer transition target."""

    default_category = ErrorCategory.CONFIGURATION


class DegenerateInputError(SelectorError, ValueError):
    """Sample data too small, mismatched or unordered to interpolate."""

    default_category = ErrorCategory.DEGENERATE_INPUT


class IdentityWarning(UserWarning):
    """Item identity keys are not unique; incremental updates are disabled."""

    category = ErrorCategory.IDENTITY


def is_fatal(category: ErrorCategory) -> bool:
    """Check if an error category must be surfaced as an exception.

    Args:
        category: The error category to check.

    Returns:
        True unless the category is only ever reported as a warning.
    """
    return category not in NON_FATAL_CATEGORIES
