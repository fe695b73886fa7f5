"""Tests for fuzzycmd.cli._resolve — locating a CommandTree by import string."""

import types

import pytest

from fuzzycmd.cli import main
from fuzzycmd.cli._resolve import resolve_tree
from fuzzycmd.tree.tree import CommandTree


@pytest.fixture
def module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    """Register a fake module holding two trees and a non-tree."""
    mod = types.ModuleType("_fake_fuzzycmd_tree")
    mod.tree = CommandTree()  # type: ignore[attr-defined]
    mod.admin = CommandTree()  # type: ignore[attr-defined]
    mod.build_tree = CommandTree  # type: ignore[attr-defined]
    mod.not_a_tree = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_fuzzycmd_tree", mod)
    return mod


class TestResolveTree:
    def test_explicit_attribute(self, module: types.ModuleType) -> None:
        assert resolve_tree("_fake_fuzzycmd_tree:admin") is module.admin

    def test_default_attribute(self, module: types.ModuleType) -> None:
        """Omitting :attr defaults to 'tree'."""
        assert resolve_tree("_fake_fuzzycmd_tree") is module.tree

    def test_trailing_colon_uses_default(self, module: types.ModuleType) -> None:
        assert resolve_tree("_fake_fuzzycmd_tree:") is module.tree

    def test_missing_attribute_lists_trees(self, module: types.ModuleType) -> None:
        with pytest.raises(AttributeError, match=r"available trees: admin, tree"):
            resolve_tree("_fake_fuzzycmd_tree:commands")

    def test_missing_attribute_no_trees(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(__import__("sys").modules, "_fake_empty", types.ModuleType("_fake_empty"))
        with pytest.raises(AttributeError, match="defines no CommandTree"):
            resolve_tree("_fake_empty")

    def test_classes_are_not_called(self, module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="not a CommandTree"):
            resolve_tree("_fake_fuzzycmd_tree:build_tree")

    def test_wrong_type(self, module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match=r"_fake_fuzzycmd_tree:not_a_tree is a str"):
            resolve_tree("_fake_fuzzycmd_tree:not_a_tree")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_tree("nonexistent_module_xyz:tree")

    def test_no_module(self) -> None:
        with pytest.raises(ValueError, match="names no module"):
            resolve_tree(":tree")


class TestCLIReportsResolveErrors:
    def test_run_without_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", ":tree", "bake"])
        assert exc_info.value.code == 1
        assert "names no module" in capsys.readouterr().err

    def test_commands_without_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["commands", ":tree"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_missing_attribute_hint(self, module: types.ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["commands", "_fake_fuzzycmd_tree:nope"])
        assert "available trees: admin, tree" in capsys.readouterr().err
