"""Test configuration and fixtures for fstree."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def make_tree(base: Path, layout: dict) -> Path:
    """Create files and directories under ``base`` from a nested dict.

    Values that are dicts become directories, strings become file contents.
    """
    for name, content in layout.items():
        path = base / name
        if isinstance(content, dict):
            path.mkdir()
            make_tree(path, content)
        else:
            path.write_text(content)
    return base


@pytest.fixture
def project(tmp_path):
    """A small project: one subdirectory, three files of 10, 20 and 30 bytes."""
    root = tmp_path / "project"
    root.mkdir()
    return make_tree(
        root,
        {
            "a.txt": "a" * 10,
            "sub": {
                "b.py": "b" * 20,
                "c.log": "c" * 30,
            },
        },
    )


@pytest.fixture
def chain(tmp_path):
    """A chain R/A/B/f for depth limit tests."""
    root = tmp_path / "R"
    root.mkdir()
    return make_tree(root, {"A": {"B": {"f": "x"}}})


@pytest.fixture
def layout():
    """Return the make_tree helper for tests that need their own layout."""
    return make_tree
