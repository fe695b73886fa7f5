"""fuzzycmd CLI — run commands against a tree and list what it registers.

Entry point registered as ``fuzzycmd`` in ``pyproject.toml``::

    [project.scripts]
    fuzzycmd = "fuzzycmd.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fuzzycmd`` command."""
    parser = argparse.ArgumentParser(
        prog="fuzzycmd",
        description="fuzzycmd — route command strings through a command tree.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fuzzycmd run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Dispatch a command through a tree")
    run_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp:tree)",
    )
    run_parser.add_argument(
        "tokens",
        nargs="*",
        help="Command tokens, joined with the tree's separator",
    )
    matching = run_parser.add_mutually_exclusive_group()
    matching.add_argument(
        "--exact",
        dest="fuzzy",
        action="store_false",
        default=None,
        help="Match labels exactly (case-insensitive)",
    )
    matching.add_argument(
        "--fuzzy",
        dest="fuzzy",
        action="store_true",
        default=None,
        help="Match labels by prefix",
    )
    run_parser.add_argument(
        "--separator",
        default=None,
        help="Token separator (overrides the tree's own)",
    )
    run_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dispatch decisions to stderr",
    )

    # -- fuzzycmd commands ------------------------------------------------
    commands_parser = subparsers.add_parser("commands", help="List registered commands")
    commands_parser.add_argument(
        "tree",
        help="Import string (e.g. myapp:tree)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from fuzzycmd.cli._run import run_command

        run_command(args)
    elif args.command == "commands":
        from fuzzycmd.cli._commands import list_commands

        list_commands(args)
