"""Command tree — hierarchical command paths with prefix-aware dispatch.

Commands are registered with ``add``/``call`` and routed one token at a
time, either by exact (case-insensitive) label or by unique prefix.
"""

from fuzzycmd.tree.match import CommandMatch, dispatch, label_matches, resolve
from fuzzycmd.tree.node import Callback, Internal, Leaf, Node, unassigned
from fuzzycmd.tree.tree import CommandTree

__all__ = [
    "Callback",
    "CommandMatch",
    "CommandTree",
    "Internal",
    "Leaf",
    "Node",
    "dispatch",
    "label_matches",
    "resolve",
    "unassigned",
]
