"""Locate the CommandTree named on the command line.

``fuzzycmd run`` and ``fuzzycmd commands`` both take a ``module:attribute``
string. The attribute defaults to ``tree``.
"""

import importlib

from fuzzycmd.tree.tree import CommandTree


def _trees_in(module: object) -> list[str]:
    return sorted(name for name, value in vars(module).items() if isinstance(value, CommandTree))


def resolve_tree(import_string: str) -> CommandTree:
    """Import ``module`` and return its ``attribute`` CommandTree.

    Raises:
        ValueError: If no module path is given (``":tree"``).
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the module has no such attribute. The message
            lists the CommandTree attributes the module does define.
        TypeError: If the attribute is not a CommandTree.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not module_path:
        msg = f"{import_string!r} names no module; expected 'module:attribute'"
        raise ValueError(msg)

    module = importlib.import_module(module_path)
    attr_name = attr_name or "tree"

    try:
        obj = getattr(module, attr_name)
    except AttributeError:
        available = _trees_in(module)
        hint = f"available trees: {', '.join(available)}" if available else "it defines no CommandTree"
        msg = f"module {module_path!r} has no attribute {attr_name!r} ({hint})"
        raise AttributeError(msg) from None

    if not isinstance(obj, CommandTree):
        msg = f"{module_path}:{attr_name} is a {type(obj).__name__}, not a CommandTree"
        raise TypeError(msg)

    return obj
