"""CommandTree — configuration plus the root node of a command tree."""

from dataclasses import replace

from fuzzycmd.config import TreeConfig
from fuzzycmd.tree.match import CommandMatch, dispatch, resolve
from fuzzycmd.tree.node import Node


class CommandTree:
    """Routes separator-delimited command strings to callbacks.

    Usage::

        tree = CommandTree().disable_fuzzy().set_separator("/")
        bake = tree.add("bake")
        bake.add("cake").call(bake_cake)
        bake.add("pizza").call(bake_pizza)
        tree.exec("bake/cake")

    The tree has no internal locking. Callers sharing one across threads
    must serialise both mutation and dispatch themselves.
    """

    __slots__ = ("config", "root")

    def __init__(self, config: TreeConfig | None = None) -> None:
        self.config = config or TreeConfig()
        self.root = Node()

    def enable_fuzzy(self) -> "CommandTree":
        """Match labels by prefix. Default."""
        self.config = replace(self.config, fuzzy=True)
        return self

    def disable_fuzzy(self) -> "CommandTree":
        """Match labels by case-insensitive equality."""
        self.config = replace(self.config, fuzzy=False)
        return self

    def set_separator(self, separator: str) -> "CommandTree":
        """Set the string that separates tokens in a command. Default ``" "``."""
        self.config = replace(self.config, separator=separator)
        return self

    def add(self, label: str) -> Node:
        """Add a top-level command and return its node for chaining."""
        return self.root.add(label)

    def split(self, command_text: str) -> list[str]:
        """Split on the separator. Empty tokens are kept, not collapsed."""
        return command_text.split(self.config.separator)

    def resolve(self, command_text: str) -> CommandMatch:
        """Find the node ``command_text`` routes to without invoking it."""
        return resolve(self.root, self.split(command_text), self.config.fuzzy)

    def exec(self, command_text: str) -> None:
        """Route ``command_text`` to exactly one callback and invoke it.

        Raises ``DispatchError`` for unmatched or ambiguous input and
        ``ConfigurationError`` when the matched branch has no callback.
        """
        dispatch(self.root, self.split(command_text), self.config.fuzzy)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        """Return every registered command path.

        Traverses the tree depth-first in insertion order and collects
        the label path of each leaf.
        """
        result: list[tuple[str, ...]] = []
        self._collect_commands(self.root, (), result)
        return result

    def _collect_commands(
        self,
        node: Node,
        path: tuple[str, ...],
        result: list[tuple[str, ...]],
    ) -> None:
        """Recursively collect leaf paths from the tree."""
        if node.is_leaf:
            if path:
                result.append(path)
            return

        for label, child in node.children:
            self._collect_commands(child, (*path, label), result)
