"""
Base exception classes for branchlog.

Provides the BranchlogError class that all other exceptions inherit from.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Context information for branchlog exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)


class BranchlogError(Exception):
    """Base exception for all branchlog errors.

    Attributes:
        message: The error message
        help_text: Optional guidance for the caller
        error_code: Optional error code for programmatic handling
        context: Additional context information
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        self.message = message

        if context is not None:
            self.help_text = context.help_text
            self.error_code = context.error_code
            self.context = context.context
        else:
            self.help_text = None
            self.error_code = None
            self.context = {}

        super().__init__(message)

    def __str__(self) -> str:
        result = self.message
        if self.help_text:
            result += f" ({self.help_text})"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "help_text": self.help_text,
        }

    def add_context(self, **kwargs) -> "BranchlogError":
        """Add additional context to the exception."""
        self.context.update(kwargs)
        return self
