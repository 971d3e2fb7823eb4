"""
Module hierarchy and level inheritance.

Modules are stored in a flat table keyed by their normalized dotted name.
Each node records its parent by key, so resolving an effective level is a
walk of at most ``depth`` dictionary lookups.
"""

import threading
from typing import Dict, List, Optional

from .constants import (
    CONFIG_OUTPUT_SEPARATOR,
    MODULE_SEPARATOR,
    ROOT_MODULE_KEY,
    ROOT_MODULE_NAME,
)
from .levels import Level


def normalize_name(name: str) -> str:
    """Normalize a module name to its table key.

    Names are trimmed and lower-cased, and empty dot segments are dropped,
    so ``" A..B. "`` becomes ``"a.b"``. ``"<root>"`` is the root.
    """
    name = name.strip().lower()
    if name == ROOT_MODULE_NAME:
        return ROOT_MODULE_KEY
    return MODULE_SEPARATOR.join(part for part in name.split(MODULE_SEPARATOR) if part)


def display_name(key: str) -> str:
    """Name of a module as shown to users."""
    return key or ROOT_MODULE_NAME


class _Module:
    __slots__ = ("name", "level", "parent")

    def __init__(self, name: str, level: Level, parent: Optional[str]):
        self.name = name
        self.level = level
        self.parent = parent


class ModuleTree:
    """Thread-safe table of modules with inherited levels."""

    def __init__(self, root_level: Level = Level.WARNING):
        self._root_level = root_level
        self._lock = threading.Lock()
        self._modules: Dict[str, _Module] = {
            ROOT_MODULE_KEY: _Module(ROOT_MODULE_KEY, root_level, None)
        }

    def get(self, name: str) -> str:
        """Return the key for ``name``, creating it and its ancestors."""
        key = normalize_name(name)
        with self._lock:
            if key not in self._modules:
                self._create(key)
        return key

    def _create(self, key: str) -> None:
        # Caller holds the lock.
        parent = ROOT_MODULE_KEY
        path = []
        for part in key.split(MODULE_SEPARATOR):
            path.append(part)
            current = MODULE_SEPARATOR.join(path)
            if current not in self._modules:
                self._modules[current] = _Module(current, Level.UNSPECIFIED, parent)
            parent = current

    def parent(self, key: str) -> Optional[str]:
        with self._lock:
            return self._modules[key].parent

    def level(self, key: str) -> Level:
        with self._lock:
            return self._modules[key].level

    def set_level(self, key: str, level: Level) -> None:
        """Set the level of a single module. Descendants are untouched."""
        level = Level(level)
        with self._lock:
            self._modules[key].level = level

    def effective_level(self, key: str) -> Level:
        """Resolve the level used to gate emission for ``key``.

        Walks up from the module until an explicit level is found. The root
        ends the walk; if it has been set to UNSPECIFIED the result is
        UNSPECIFIED, which callers treat as "nothing is enabled".
        """
        with self._lock:
            module = self._modules[key]
            while module.level == Level.UNSPECIFIED and module.parent is not None:
                module = self._modules[module.parent]
            return module.level

    def reset_levels(self) -> None:
        """Set every module to UNSPECIFIED and the root back to its default."""
        with self._lock:
            for module in self._modules.values():
                module.level = Level.UNSPECIFIED
            self._modules[ROOT_MODULE_KEY].level = self._root_level

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._modules)

    def config(self) -> str:
        """Describe the explicitly configured levels.

        Returns comma separated ``name=LEVEL`` pairs sorted by name. Modules
        at UNSPECIFIED are skipped, as is the root while it holds its
        default level.
        """
        with self._lock:
            configured = [
                (name, module.level)
                for name, module in self._modules.items()
                if module.level != Level.UNSPECIFIED
            ]
        pairs = []
        for name, level in sorted(configured):
            if name == ROOT_MODULE_KEY and level == self._root_level:
                continue
            pairs.append(f"{display_name(name)}={level}")
        return CONFIG_OUTPUT_SEPARATOR.join(pairs)
