"""Bake — a small kitchen command tree.

Demonstrates nested commands, fuzzy prefix matching, and a leaf that
absorbs extra tokens.

Run:
    cd examples/bake && python app.py b p
    fuzzycmd run app:tree bake cake
    fuzzycmd run app:tree --exact HELP all
"""

import sys

from fuzzycmd import CommandTree

tree = CommandTree().enable_fuzzy()


def bake(recipe: str) -> None:
    messages = {
        "cake": "a cake. But finish your tests first!",
        "oven": "myself, obviously... who would do that to an oven?",
        "pizza": "pizza..",
    }
    print(f"Baking {messages[recipe]}")


help_ = tree.add("help")
help_.add("all").call(lambda: print("Commands: help all, bake (cake|oven|pizza), clean"))

n_bake = tree.add("bake")
n_bake.add("cake").call(lambda: bake("cake"))
n_bake.add("oven").call(lambda: bake("oven"))
n_bake.add("pizza").call(lambda: bake("pizza"))

# A shallow leaf: "clean up the kitchen" still runs this
tree.add("clean").call(lambda: print("Cleaning up"))


if __name__ == "__main__":
    from fuzzycmd.errors import ConfigurationError, DispatchError

    try:
        tree.exec(tree.config.separator.join(sys.argv[1:]))
    except DispatchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
