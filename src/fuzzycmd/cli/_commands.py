"""``fuzzycmd commands`` — list registered commands.

Resolves an import string to a CommandTree and prints every registered
command path, one per line, joined with the tree's separator.
"""

import argparse
import sys

from fuzzycmd.cli._resolve import resolve_tree


def list_commands(args: argparse.Namespace) -> None:
    """List registered commands for a tree."""
    try:
        tree = resolve_tree(args.tree)
    except (ValueError, ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    commands = tree.commands
    if not commands:
        print("No commands registered.")
        return

    for path in commands:
        print(tree.config.separator.join(path))
