"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ValidationError(ValueError):
    """Invalid input handed to a domain operation.

    Raised synchronously at the point of the invalid call, before any state
    changes. Covers sign-in/username mismatches, unknown URL targets,
    malformed email addresses, yes/no values outside the allowed set and
    unusable search-engine names. Inherits from ValueError so generic
    ``except ValueError`` handlers keep working.

    Attributes:
        expected: What the operation accepts, when it can be stated.
        actual: The value that was received.

    Example:
        >>> from google_home.domain.errors import ValidationError
        >>> err = ValidationError("Invalid target '_middle'", expected="_blank", actual="_middle")
        >>> str(err)
        "Invalid target '_middle'"
        >>> err.actual
        '_middle'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str, *, expected: object = None, actual: object = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


__all__ = [
    "ValidationError",
]
