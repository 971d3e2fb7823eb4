"""
branchlog Exception Hierarchy

Exception Hierarchy:
    BranchlogError (base)
    ├── WriterError
    │   ├── DuplicateWriterError
    │   ├── NilWriterError
    │   └── WriterNotFoundError
    │       └── NoDefaultWriterError
    └── ConfigurationError
        ├── InvalidLevelError
        └── InvalidSpecificationError

This package provides focused exception components:
- base: Core BranchlogError base class
- writers: Writer registry exceptions
- config: Level and logger specification parsing exceptions
"""

from .base import BranchlogError, ExceptionContext

# Configuration exceptions
from .config import (
    ConfigurationError,
    InvalidLevelError,
    InvalidSpecificationError,
)

# Writer registry exceptions
from .writers import (
    DuplicateWriterError,
    NilWriterError,
    NoDefaultWriterError,
    WriterError,
    WriterNotFoundError,
)

__all__ = [
    # Base
    "BranchlogError",
    "ExceptionContext",
    # Writers
    "WriterError",
    "DuplicateWriterError",
    "NilWriterError",
    "WriterNotFoundError",
    "NoDefaultWriterError",
    # Configuration
    "ConfigurationError",
    "InvalidLevelError",
    "InvalidSpecificationError",
]
