"""Tree configuration.

TreeConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from fuzzycmd.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Dispatch configuration. Immutable after creation.

    Both fields have defaults. Override what you need::

        config = TreeConfig(fuzzy=False, separator="/")
    """

    # Matching: prefix match when True, case-insensitive equality when False
    fuzzy: bool = True

    # Splitting: command text is split on this exact string, never collapsed
    separator: str = " "

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or not self.separator:
            msg = f"Separator must be a non-empty string, got {self.separator!r}."
            raise ConfigurationError(msg)
