"""Tests for the high-level build_tree and render_tree functions."""

import json

import pytest

from fstree.config import TreeConfig
from fstree.exceptions import GlobPatternError
from fstree.fstree import build_tree, render_tree
from fstree.output_strategies import OutputFormat, RenderOptions
from fstree.types import SortOrder


def test_build_tree(project):
    tree, stats = build_tree(TreeConfig(root=project))

    assert tree.name == "project"
    assert stats.to_dict() == {"directories": 2, "files": 3, "bytes": 60}


def test_render_tree_text(project):
    output = render_tree(TreeConfig(root=project, sort=SortOrder.NAME), options=RenderOptions(size=True, summary=True))

    assert output == (
        "project/\n"
        "├── a.txt (10B)\n"
        "└── sub/\n"
        "    ├── b.py (20B)\n"
        "    └── c.log (30B)\n"
        "\n"
        "2 directories, 3 files, 60B total\n"
    )


def test_render_tree_default_options(project):
    output = render_tree(TreeConfig(root=project, sort=SortOrder.NAME))

    assert output == "project/\n├── a.txt\n└── sub/\n    ├── b.py\n    └── c.log\n"


def test_render_tree_json(project):
    output = render_tree(TreeConfig(root=project, sort=SortOrder.NAME), OutputFormat.JSON, RenderOptions(summary=True))
    document = json.loads(output)

    assert [child["name"] for child in document["tree"]["children"]] == ["a.txt", "sub"]
    assert document["statistics"]["bytes"] == 60


def test_render_tree_xml(project):
    output = render_tree(TreeConfig(root=project, sort=SortOrder.NAME, directory=True), OutputFormat.XML)

    assert '<directory name="sub"' in output
    assert "<file " not in output


def test_invalid_glob_is_fatal(project):
    with pytest.raises(GlobPatternError):
        render_tree(TreeConfig(root=project, include="[oops"))


def test_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_tree(TreeConfig(root=tmp_path / "nope"))
