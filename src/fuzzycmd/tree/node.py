"""Command nodes — the mutable building block of a command tree.

A node holds exactly one of two variants:

    Leaf(callback)       terminal point of dispatch
    Internal(children)   ordered ``(label, Node)`` pairs, labels may repeat

Usage::

    root = Node()
    root.add("test").add("all").call(run_all_tests)
    root.add("make").add("docs").call(make_docs)
    # Results in:
    # ┌> test -> all  -> run_all_tests
    # root
    # └> make -> docs -> make_docs
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from fuzzycmd.errors import ConfigurationError

Callback: TypeAlias = Callable[[], object]


def unassigned() -> None:
    """Default callback of every new node. Always raises."""
    msg = "This node was not supplied with a callback. This is probably not what you want!"
    raise ConfigurationError(msg)


@dataclass(slots=True)
class Leaf:
    """A node variant holding one callback and no children."""

    callback: Callback = unassigned


@dataclass(slots=True)
class Internal:
    """A node variant holding labeled children and no callback."""

    children: list[tuple[str, "Node"]] = field(default_factory=list)


class Node:
    """A command node. Either a callback *or* a list of subnodes.

    New nodes are leaves holding :func:`unassigned`. Mutation is
    destructive: :meth:`add` on a leaf drops its callback, and
    :meth:`call` on an internal node drops all of its children.
    """

    __slots__ = ("next",)

    def __init__(self) -> None:
        self.next: Leaf | Internal = Leaf()

    def add(self, label: str) -> "Node":
        """Append a child command and return it for chaining.

        Duplicate labels are accepted; they make prefixes of that label
        ambiguous at dispatch time.
        """
        if not isinstance(label, str) or not label:
            msg = f"Command label must be a non-empty string, got {label!r}."
            raise ConfigurationError(msg)

        child = Node()
        match self.next:
            case Leaf():
                self.next = Internal([(label, child)])
            case Internal(children=children):
                children.append((label, child))
        return child

    def call(self, callback: Callback) -> None:
        """Set this node's callback, discarding any children."""
        if not callable(callback):
            msg = f"Callback must be callable, got {type(callback).__name__}."
            raise TypeError(msg)
        self.next = Leaf(callback)

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.next, Leaf)

    @property
    def is_assigned(self) -> bool:
        """False for a leaf still holding the :func:`unassigned` sentinel."""
        return not (isinstance(self.next, Leaf) and self.next.callback is unassigned)

    @property
    def callback(self) -> Callback | None:
        """The leaf callback, or ``None`` on an internal node."""
        if isinstance(self.next, Leaf):
            return self.next.callback
        return None

    @property
    def children(self) -> tuple[tuple[str, "Node"], ...]:
        """Snapshot of ``(label, child)`` pairs in insertion order."""
        if isinstance(self.next, Internal):
            return tuple(self.next.children)
        return ()

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.children)

    def __repr__(self) -> str:
        if isinstance(self.next, Leaf):
            name = getattr(self.next.callback, "__name__", repr(self.next.callback))
            return f"Node(callback={name})"
        return f"Node(labels={list(self.labels)!r})"
