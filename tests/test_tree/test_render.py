"""Tests for the Rich folder tree rendering (vcxgen.tree.render)."""

from __future__ import annotations

import pytest
from rich.console import Console
from rich.tree import Tree

from vcxgen.tree.models import FileEntry, FolderNode
from vcxgen.tree.render import build_rich_tree

pytestmark = pytest.mark.unit


def _render_text(tree: Tree) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(tree)
    return console.export_text()


class TestBuildRichTree:
    def test_returns_tree(self, sample_tree):
        assert isinstance(build_rich_tree(sample_tree), Tree)

    def test_top_level_children_folders_then_files(self, sample_tree):
        tree = build_rich_tree(sample_tree)
        # audio, video, main.cpp, main.h
        assert len(tree.children) == 4

    def test_shows_last_path_component_for_folders(self, sample_tree):
        text = _render_text(build_rich_tree(sample_tree))
        assert "src" in text
        assert "audio" in text
        assert "codecs" in text
        assert "src\\audio" not in text

    def test_lists_every_file(self, sample_tree):
        text = _render_text(build_rich_tree(sample_tree))
        for name in ("main.cpp", "main.h", "mixer.h", "mixer.cpp", "ogg.h", "shader.glsl", "renderer.cpp"):
            assert name in text

    def test_custom_label(self, sample_tree):
        text = _render_text(build_rich_tree(sample_tree, label="Game sources"))
        assert "Game sources" in text

    def test_custom_separator(self):
        node = FolderNode(
            relative_path="code",
            subfolders=[FolderNode(relative_path="code/net")],
        )
        text = _render_text(build_rich_tree(node, separator="/"))
        assert "net" in text
        assert "code/net" not in text

    def test_markup_in_names_is_literal(self):
        node = FolderNode(
            relative_path="code",
            files=[FileEntry(folder_path="code", name="[bold]odd.h")],
        )
        text = _render_text(build_rich_tree(node))
        assert "[bold]odd.h" in text
