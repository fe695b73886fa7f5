"""pytest fixtures for the fuzzycmd examples.

``example_tree`` runs the ``app.py`` beside the requesting test and hands
back the ``tree`` it builds. Every test gets a freshly built tree, so a
test that calls ``disable_fuzzy()`` does not leak into the next one.
"""

import runpy
from pathlib import Path

import pytest

from fuzzycmd import CommandTree


@pytest.fixture
def example_tree(request: pytest.FixtureRequest) -> CommandTree:
    """Build the example's CommandTree without running its ``__main__`` block."""
    app_path = Path(request.path).parent / "app.py"
    namespace = runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")
    tree = namespace["tree"]
    assert isinstance(tree, CommandTree)
    return tree
