"""
Writer registry exceptions.

Raised synchronously by registry mutations. None of them are logged by the
library.
"""

from .base import BranchlogError, ExceptionContext


class WriterError(BranchlogError):
    """Base class for writer registry errors."""
    pass


class DuplicateWriterError(WriterError):
    """Raised when registering a writer under a name already in use."""

    def __init__(self, name: str):
        self.name = name
        message = f'there is already a writer registered with the name "{name}"'
        context = ExceptionContext(
            error_code="WRITER_DUPLICATE",
            context={"name": name},
        )
        super().__init__(message, context)


class NilWriterError(WriterError):
    """Raised when registering or replacing with a None writer."""

    def __init__(self):
        context = ExceptionContext(error_code="WRITER_NIL")
        super().__init__("writer cannot be None", context)


class WriterNotFoundError(WriterError):
    """Raised when removing or replacing a writer that is not registered."""

    def __init__(self, name: str, message: str = None, error_code: str = "WRITER_NOT_FOUND"):
        self.name = name
        message = message or f'writer "{name}" is not registered'
        context = ExceptionContext(error_code=error_code, context={"name": name})
        super().__init__(message, context)


class NoDefaultWriterError(WriterNotFoundError):
    """Raised by replace_default_writer when no "default" writer exists."""

    def __init__(self, name: str = "default"):
        super().__init__(
            name,
            message=f'there is no "{name}" writer',
            error_code="WRITER_NO_DEFAULT",
        )
