"""
Logger specification strings.

A specification is a list of ``name=LEVEL`` pairs separated by ``;`` or
``,``, for example ``<root>=INFO,app.db=DEBUG``. A lone level with no ``=``
configures the root module. This is the format produced by
``LoggingManager.logger_info``.
"""

import re
from typing import Dict

from ..constants import CONFIG_PAIR_SEPARATORS, ROOT_MODULE_KEY
from ..exceptions.config import InvalidSpecificationError
from ..levels import Level, parse_level
from ..modules import normalize_name

_PAIR_SEPARATOR = re.compile(f"[{re.escape(CONFIG_PAIR_SEPARATORS)}]")


def parse_config_string(specification: str) -> Dict[str, Level]:
    """Parse a logger specification into module keys and levels.

    Raises:
        InvalidSpecificationError: a pair has no ``=`` or a blank name.
        InvalidLevelError: a level name is not recognised.
    """
    specification = specification.strip()
    if not specification:
        return {}

    if "=" not in specification and not _PAIR_SEPARATOR.search(specification):
        return {ROOT_MODULE_KEY: parse_level(specification)}

    levels = {}
    for pair in _PAIR_SEPARATOR.split(specification):
        pair = pair.strip()
        if not pair:
            continue
        name, sep, level = pair.partition("=")
        if not sep:
            raise InvalidSpecificationError(pair, "expected '='")
        name = name.strip()
        if not name:
            raise InvalidSpecificationError(pair, "blank module name")
        levels[normalize_name(name)] = parse_level(level)
    return levels
