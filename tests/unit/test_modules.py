"""
Unit tests for ModuleTree.

Tests name normalization, ancestor creation and level inheritance.
"""

import pytest

from branchlog.levels import Level
from branchlog.modules import ModuleTree, display_name, normalize_name


@pytest.mark.unit
class TestNormalizeName:
    """Test module name normalization."""

    @pytest.mark.parametrize("name,expected", [
        ("", ""),
        ("<root>", ""),
        ("  <ROOT> ", ""),
        ("Testing", "testing"),
        ("TESTING.MODULE", "testing.module"),
        ("  a.b  ", "a.b"),
        ("a..b", "a.b"),
        (".a.b.", "a.b"),
        ("...", ""),
    ])
    def test_normalize(self, name, expected):
        assert normalize_name(name) == expected

    def test_display_name(self):
        assert display_name("") == "<root>"
        assert display_name("a.b") == "a.b"


@pytest.mark.unit
class TestModuleTree:
    """Test ModuleTree behavior."""

    def setup_method(self):
        self.tree = ModuleTree()

    def test_fresh_tree_has_only_root(self):
        assert self.tree.names() == [""]
        assert self.tree.level("") == Level.WARNING
        assert self.tree.effective_level("") == Level.WARNING

    def test_get_creates_ancestors(self):
        """Test that getting a.b.c creates a.b, a and the root chain."""
        key = self.tree.get("a.b.c")

        assert key == "a.b.c"
        assert self.tree.names() == ["", "a", "a.b", "a.b.c"]
        assert self.tree.parent("a.b.c") == "a.b"
        assert self.tree.parent("a.b") == "a"
        assert self.tree.parent("a") == ""
        assert self.tree.parent("") is None

    def test_get_is_idempotent(self):
        first = self.tree.get("A.B")
        self.tree.set_level(first, Level.INFO)
        second = self.tree.get("a.b")

        assert first == second
        assert self.tree.level(second) == Level.INFO
        assert self.tree.names().count("a.b") == 1

    def test_new_modules_are_unspecified(self):
        key = self.tree.get("testing")
        assert self.tree.level(key) == Level.UNSPECIFIED
        assert self.tree.effective_level(key) == Level.WARNING

    def test_effective_level_walks_to_nearest_ancestor(self):
        self.tree.set_level("", Level.ERROR)
        first = self.tree.get("first")
        second = self.tree.get("first.second")

        assert self.tree.effective_level(second) == Level.ERROR

        self.tree.set_level(first, Level.DEBUG)
        assert self.tree.effective_level(second) == Level.DEBUG
        assert self.tree.effective_level("") == Level.ERROR

        self.tree.set_level(second, Level.INFO)
        assert self.tree.effective_level(second) == Level.INFO

        self.tree.set_level(first, Level.UNSPECIFIED)
        assert self.tree.effective_level(first) == Level.ERROR
        assert self.tree.effective_level(second) == Level.INFO

    def test_set_level_does_not_touch_descendants(self):
        child = self.tree.get("a.b")
        self.tree.set_level("a", Level.TRACE)
        assert self.tree.level(child) == Level.UNSPECIFIED

    def test_root_unspecified_resolves_to_unspecified(self):
        key = self.tree.get("a.b")
        self.tree.set_level("", Level.UNSPECIFIED)

        assert self.tree.effective_level("") == Level.UNSPECIFIED
        assert self.tree.effective_level(key) == Level.UNSPECIFIED

    def test_reset_levels_keeps_names(self):
        self.tree.set_level(self.tree.get("a.b"), Level.DEBUG)
        self.tree.set_level("", Level.CRITICAL)

        self.tree.reset_levels()

        assert self.tree.names() == ["", "a", "a.b"]
        assert self.tree.level("a.b") == Level.UNSPECIFIED
        assert self.tree.level("") == Level.WARNING

    def test_custom_root_level(self):
        tree = ModuleTree(root_level=Level.INFO)
        tree.set_level("", Level.ERROR)
        tree.reset_levels()
        assert tree.level("") == Level.INFO
        assert tree.config() == ""


@pytest.mark.unit
class TestModuleTreeConfig:
    """Test ModuleTree.config output."""

    def setup_method(self):
        self.tree = ModuleTree()

    def test_default_config_is_empty(self):
        self.tree.get("a.b")
        assert self.tree.config() == ""

    def test_config_lists_explicit_levels_sorted(self):
        self.tree.set_level(self.tree.get("zeta"), Level.ERROR)
        self.tree.set_level(self.tree.get("alpha.beta"), Level.DEBUG)
        self.tree.get("alpha")

        assert self.tree.config() == "alpha.beta=DEBUG,zeta=ERROR"

    def test_config_includes_changed_root(self):
        self.tree.set_level("", Level.INFO)
        self.tree.set_level(self.tree.get("a"), Level.TRACE)

        assert self.tree.config() == "<root>=INFO,a=TRACE"

    def test_config_omits_unspecified_root(self):
        self.tree.set_level("", Level.UNSPECIFIED)
        assert self.tree.config() == ""
