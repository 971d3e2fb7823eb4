"""
Library-wide constants for branchlog.

Names and formats shared by the module tree, the writer registry and the
formatters.
"""

# Module tree
ROOT_MODULE_KEY = ""
ROOT_MODULE_NAME = "<root>"
MODULE_SEPARATOR = "."

# Writer registry
DEFAULT_WRITER_NAME = "default"

# Logger configuration strings
CONFIG_PAIR_SEPARATORS = ";,"
CONFIG_OUTPUT_SEPARATOR = ","

# Formatting
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Environment settings
ENV_PREFIX = "BRANCHLOG_"
OUTPUT_FORMATS = ("default", "json", "rich")
