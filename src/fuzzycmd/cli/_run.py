"""``fuzzycmd run`` — dispatch one command through a tree.

Resolves an import string to a CommandTree, applies the CLI overrides,
joins the positional tokens with the tree's separator, and executes.
"""

import argparse
import logging
import sys

from fuzzycmd.cli._resolve import resolve_tree
from fuzzycmd.errors import ConfigurationError, DispatchError

logger = logging.getLogger("fuzzycmd.cli")


def run_command(args: argparse.Namespace) -> None:
    """Execute ``args.tokens`` against the tree named by ``args.tree``.

    CLI flags override the tree's config. Dispatch and configuration
    failures are reported on stderr and exit with status 1; exceptions
    raised by the callback itself propagate.
    """
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        tree = resolve_tree(args.tree)
    except (ValueError, ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        # CLI flags override tree config
        if args.fuzzy is True:
            tree.enable_fuzzy()
        elif args.fuzzy is False:
            tree.disable_fuzzy()
        if args.separator is not None:
            tree.set_separator(args.separator)

        command_text = tree.config.separator.join(args.tokens)
        logger.debug("running %r (fuzzy=%s)", command_text, tree.config.fuzzy)
        tree.exec(command_text)
    except DispatchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
