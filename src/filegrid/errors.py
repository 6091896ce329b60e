"""Error handling utilities for filegrid.

Provides the exception hierarchy raised by the scanner, layout engine and
diagram collaborators, plus small validation helpers.
"""

import math
from pathlib import Path


class FileGridError(Exception):
    """Base exception for filegrid errors."""

    kind = "File grid error"


class DirectoryAccessError(FileGridError):
    """Exception raised when a directory cannot be picked or read."""

    kind = "Directory access error"

    def __init__(self, path: Path | None, reason: str) -> None:
        """Initialize directory access error.

        Args:
            path: Directory that could not be accessed (None if none was picked)
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        if path is None:
            super().__init__(reason)
        else:
            super().__init__(f"Cannot access {path}: {reason}")


class FileReadError(FileGridError):
    """Exception raised when a file's metadata cannot be read."""

    kind = "File read error"

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize file read error.

        Args:
            path: File whose metadata could not be read
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class RenderError(FileGridError):
    """Exception raised when the diagram rejects a mutation."""

    kind = "Render error"

    def __init__(self, reason: str) -> None:
        """Initialize render error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Rendering failed: {reason}")


class ValidationError(FileGridError):
    """Exception raised when input validation fails."""

    kind = "Validation error"

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


def describe_error(error: FileGridError) -> str:
    """Combine an error's kind and message into one line for the user."""
    return f"{error.kind}: {error}"


def validate_directory(path: Path) -> None:
    """Validate that a path is a readable directory.

    Args:
        path: Path to validate

    Raises:
        DirectoryAccessError: If path does not exist or is not a directory
    """
    if not path.exists():
        raise DirectoryAccessError(path, "no such directory")
    if not path.is_dir():
        raise DirectoryAccessError(path, "not a directory")


def validate_minimum(value: int | float, min_val: int | float, name: str = "value", inclusive: bool = True) -> None:
    """Validate that a value is not below a lower bound.

    Args:
        value: Value to validate
        min_val: Lower bound
        name: Name of the value for error messages
        inclusive: Whether the bound itself is allowed

    Raises:
        ValidationError: If value is not finite or is below the bound
    """
    if not math.isfinite(value):
        raise ValidationError(name, value, "a finite number")
    if inclusive and value < min_val:
        raise ValidationError(name, value, f"value >= {min_val}")
    if not inclusive and value <= min_val:
        raise ValidationError(name, value, f"value > {min_val}")
