"""
Logger configuration.

- parser: logger specification strings (``name=LEVEL`` pairs)
- settings: BRANCHLOG_* environment settings and apply_settings
"""

from .parser import parse_config_string
from .settings import BranchlogSettings, apply_settings, create_writer

__all__ = [
    "parse_config_string",
    "BranchlogSettings",
    "apply_settings",
    "create_writer",
]
