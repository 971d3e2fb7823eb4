"""
Configuration-related exceptions.

Raised while parsing level names and logger specification strings.
"""

from .base import BranchlogError, ExceptionContext


class ConfigurationError(BranchlogError):
    """Base class for configuration-related errors."""
    pass


class InvalidLevelError(ConfigurationError, ValueError):
    """Raised when a severity level name is not recognised."""

    def __init__(self, value: str):
        self.value = value
        message = f'unknown severity level "{value}"'
        help_text = "expected one of TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL, UNSPECIFIED"
        context = ExceptionContext(
            help_text=help_text,
            error_code="CONFIG_INVALID_LEVEL",
            context={"value": value},
        )
        super().__init__(message, context)


class InvalidSpecificationError(ConfigurationError):
    """Raised when a logger specification string is malformed."""

    def __init__(self, specification: str, reason: str):
        self.specification = specification
        self.reason = reason
        message = f"logger specification {specification!r}: {reason}"
        context = ExceptionContext(
            help_text="use name=LEVEL pairs separated by ';' or ','",
            error_code="CONFIG_INVALID_SPEC",
            context={"specification": specification},
        )
        super().__init__(message, context)
