"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

from sayhello.recipe import SayHelloRecipe

FIXTURES = Path(__file__).parent / "fixtures" / "cst"


@pytest.fixture
def recipe() -> SayHelloRecipe:
    """SayHelloRecipe targeting com.yourorg.A."""
    return SayHelloRecipe(fully_qualified_class_name="com.yourorg.A")


@pytest.fixture
def fixture_tree(tmp_path: Path) -> Path:
    """Copy of the com/yourorg fixture sources under tmp_path/src.

    Tests that write files work on this copy so the fixtures stay pristine.
    """
    src = tmp_path / "src"
    package = src / "com" / "yourorg"
    package.mkdir(parents=True)
    for name in ("a.py", "greeter.py"):
        (package / name).write_text((FIXTURES / "com" / "yourorg" / name).read_text())
    return src


@pytest.fixture
def clean_root_logger():
    """Remove all handlers from root logger after test.

    setup_logging() modifies global state (root logger). This fixture ensures
    tests don't leak handlers between test runs.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
