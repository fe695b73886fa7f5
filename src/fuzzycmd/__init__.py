"""fuzzycmd — hierarchical command dispatch with fuzzy prefix matching.

Register command paths, bind each to a callback, then route input strings
to exactly one of them.

Basic usage::

    from fuzzycmd import CommandTree

    tree = CommandTree()

    bake = tree.add("bake")
    bake.add("cake").call(lambda: print("Baking a cake"))
    bake.add("pizza").call(lambda: print("Baking pizza"))

    tree.exec("b c")      # fuzzy: "b" -> bake, "c" -> cake

Exact matching::

    tree.disable_fuzzy()
    tree.exec("BAKE pizza")
"""

__version__ = "0.1.0"
__all__ = [
    "AmbiguousCommand",
    "CommandMatch",
    "CommandTree",
    "ConfigurationError",
    "DispatchError",
    "FuzzyCmdError",
    "Node",
    "TreeConfig",
    "UnmatchedCommand",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fuzzycmd`` fast while providing a clean top-level API.
    """
    if name == "CommandTree":
        from fuzzycmd.tree.tree import CommandTree

        return CommandTree

    if name == "TreeConfig":
        from fuzzycmd.config import TreeConfig

        return TreeConfig

    if name in ("Node", "CommandMatch"):
        from fuzzycmd import tree as _tree

        return getattr(_tree, name)

    if name in (
        "AmbiguousCommand",
        "ConfigurationError",
        "DispatchError",
        "FuzzyCmdError",
        "UnmatchedCommand",
    ):
        from fuzzycmd import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
