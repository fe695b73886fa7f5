"""Token-by-token dispatch over a command tree.

``resolve`` walks the tree without invoking anything and returns a
``CommandMatch``. ``dispatch`` resolves, then invokes the matched
callback exactly once. The walk finishes before the callback runs, so
a callback is free to mutate the tree it was dispatched from.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fuzzycmd.errors import AmbiguousCommand, ConfigurationError, UnmatchedCommand
from fuzzycmd.tree.node import Callback, Internal, Leaf, Node, unassigned

logger = logging.getLogger("fuzzycmd.tree")


@dataclass(frozen=True, slots=True)
class CommandMatch:
    """Result of a successful resolve.

    ``path`` holds the labels walked from the root. ``absorbed`` holds the
    tokens left over when a leaf was reached early; the leaf ignores them.
    """

    node: Node
    path: tuple[str, ...]
    absorbed: tuple[str, ...] = ()

    @property
    def callback(self) -> Callback:
        """The callback to invoke; :func:`unassigned` for an internal node."""
        callback = self.node.callback
        return unassigned if callback is None else callback

    def invoke(self) -> None:
        """Invoke the matched callback.

        Raises ``ConfigurationError`` when the matched node was never given
        a callback, naming the command path that needs one.
        """
        callback = self.callback
        if callback is unassigned:
            shown = " ".join(self.path) or "<root>"
            if self.node.is_leaf:
                msg = f"Command {shown!r} was not supplied with a callback."
            else:
                msg = (
                    f"Command {shown!r} is incomplete: it has subcommands "
                    f"{list(self.node.labels)!r} but no callback of its own."
                )
            raise ConfigurationError(msg)
        callback()


def label_matches(label: str, token: str, fuzzy: bool) -> bool:
    """Match a registered label against one input token.

    Fuzzy: the label starts with the token (case-sensitive).
    Exact: the label equals the token, ignoring case.
    """
    if fuzzy:
        return label.startswith(token)
    return label.casefold() == token.casefold()


def resolve(node: Node, tokens: Sequence[str], fuzzy: bool) -> CommandMatch:
    """Walk ``tokens`` from ``node`` down to the node that should run.

    Raises ``UnmatchedCommand`` when no child matches the next token and
    ``AmbiguousCommand`` when more than one does. Both carry the full
    remaining token sequence at the point of failure.
    """
    return _resolve_node(node, tuple(tokens), 0, (), fuzzy)


def _resolve_node(
    node: Node,
    tokens: tuple[str, ...],
    index: int,
    path: tuple[str, ...],
    fuzzy: bool,
) -> CommandMatch:
    """Recursively match tokens against the tree."""
    # All tokens consumed: this node runs, leaf or not
    if index == len(tokens):
        return CommandMatch(node=node, path=path)

    match node.next:
        case Leaf():
            # Leaves absorb any excess tokens
            return CommandMatch(node=node, path=path, absorbed=tokens[index:])
        case Internal(children=children):
            token = tokens[index]
            # Scan every child; the first match is not enough
            matched = [(label, child) for label, child in children if label_matches(label, token, fuzzy)]

            if not matched:
                raise UnmatchedCommand(tokens=tokens[index:])
            if len(matched) > 1:
                raise AmbiguousCommand(
                    tokens=tokens[index:],
                    candidates=tuple(label for label, _ in matched),
                )

            label, child = matched[0]
            return _resolve_node(child, tokens, index + 1, (*path, label), fuzzy)


def dispatch(node: Node, tokens: Sequence[str], fuzzy: bool) -> CommandMatch:
    """Resolve ``tokens`` from ``node`` and invoke the matched callback once.

    Returns the ``CommandMatch`` that was invoked. Exceptions raised by
    the callback propagate unchanged.
    """
    try:
        match = resolve(node, tokens, fuzzy)
    except AmbiguousCommand as exc:
        logger.debug("ambiguous command %r, candidates %s", exc.command, list(exc.candidates))
        raise
    except UnmatchedCommand as exc:
        logger.debug("unmatched command %r", exc.command)
        raise

    if match.absorbed:
        logger.debug("command %r absorbed extra tokens %s", " ".join(match.path), list(match.absorbed))
    else:
        logger.debug("dispatching command %r", " ".join(match.path))
    match.invoke()
    return match
