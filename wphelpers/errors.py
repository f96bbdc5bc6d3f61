"""Exception taxonomy and user-facing error formatting."""

from pydantic import ValidationError


class WpHelpersError(Exception):
    """Base class for all wphelpers errors."""


class InvalidArgument(WpHelpersError, ValueError):
    """An argument is empty, malformed, or of the wrong kind."""


class TypeMismatch(WpHelpersError, TypeError):
    """A payload does not satisfy the declared type of a typed result."""


class InvalidState(WpHelpersError, RuntimeError):
    """An operation is not permitted for the current state of a result."""


def _format_validation_error(error: ValidationError) -> str:
    """Format pydantic validation errors, one line per field."""
    lines = ["Invalid configuration:"]
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        lines.append(f"  {location or '<root>'}: {item.get('msg', '')}")
    return "\n".join(lines)


ERROR_TYPES = {
    InvalidArgument: lambda e: f"Invalid argument: {e!s}",
    TypeMismatch: lambda e: f"Type mismatch: {e!s}",
    InvalidState: lambda e: f"Invalid state: {e!s}",
    ValidationError: lambda e: _format_validation_error(e),
    FileNotFoundError: lambda e: str(e),
    ValueError: lambda e: str(e),
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
