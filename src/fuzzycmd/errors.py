"""fuzzycmd exception hierarchy.

Shared across Node, CommandTree, and the CLI so every module raises and
catches the same types.
"""

from collections.abc import Sequence


class FuzzyCmdError(Exception):
    """Base for all fuzzycmd-specific errors."""


class ConfigurationError(FuzzyCmdError):
    """Raised when the command tree itself is misconfigured.

    Signals a bug in tree construction (a branch never terminated with a
    callback, an empty label or separator), never malformed caller input.
    """


class DispatchError(FuzzyCmdError):
    """A command string could not be routed to exactly one callback.

    ``tokens`` is the full remaining token sequence at the point of
    failure. ``command`` is those tokens concatenated into one string.
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = tuple(tokens)
        super().__init__(self.tokens)

    @property
    def command(self) -> str:
        return "".join(self.tokens)

    def __str__(self) -> str:
        return f"no function to execute command '{self.command}'"


class UnmatchedCommand(DispatchError):  # noqa: N818
    """No child label matched the next token."""


class AmbiguousCommand(DispatchError):  # noqa: N818
    """Two or more child labels matched the next token.

    ``candidates`` lists the matching labels in insertion order.
    """

    def __init__(self, tokens: Sequence[str], candidates: Sequence[str] = ()) -> None:
        super().__init__(tokens)
        self.candidates = tuple(candidates)
        self.args = (self.tokens, self.candidates)
