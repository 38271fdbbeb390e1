"""Shared pytest fixtures for the vcxgen test suite.

Provides reusable fixtures for:
- Sample code folders laid out on disk under ``tmp_path``, including one
  with a subfolder that cannot be listed
- Hand-built folder trees that need no filesystem
- Generator configuration pointing at the sample folders
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from vcxgen.config import GeneratorConfig
from vcxgen.tree.models import FileEntry, FolderNode


def _make_files(root: Path, relative_paths: list[str]) -> None:
    for rel in relative_paths:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// placeholder\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# On-disk code folders
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def simple_code_dir(workdir: Path) -> Path:
    """``code/`` holding ``a.h``, ``b.cpp`` and ``sub/c.h``."""
    root = workdir / "code"
    _make_files(root, ["a.h", "b.cpp", "sub/c.h"])
    return root


@pytest.fixture
def code_dir(workdir: Path) -> Path:
    """A richer ``code/`` folder with nested, empty and unrelated entries.

    Layout::

        code/
            README
            a.h
            b.cpp
            empty/
            notes.txt
            sub/
                c.h
                deeper/
                    d.cpp
                    e.hpp
    """
    root = workdir / "code"
    _make_files(
        root,
        ["README", "a.h", "b.cpp", "notes.txt", "sub/c.h", "sub/deeper/d.cpp", "sub/deeper/e.hpp"],
    )
    (root / "empty").mkdir()
    return root


@pytest.fixture
def locked_code_dir(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """``code/`` with a readable ``open/x.h`` and a ``locked/`` folder that cannot be listed.

    ``os.scandir`` is patched to raise ``PermissionError`` for ``locked``.
    """
    root = workdir / "code"
    _make_files(root, ["a.h", "locked/hidden.h", "open/x.h"])
    real_scandir = os.scandir

    def scandir(path):
        if os.path.basename(os.fspath(path)) == "locked":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr("vcxgen.tree.scanner.os.scandir", scandir)
    return root


# ---------------------------------------------------------------------------
# In-memory trees
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_tree() -> FolderNode:
    """Hand-built tree: ``src`` with ``main.cpp``/``main.h`` and two subfolders."""
    return FolderNode(
        relative_path="src",
        files=[
            FileEntry(folder_path="src", name="main.cpp"),
            FileEntry(folder_path="src", name="main.h"),
        ],
        subfolders=[
            FolderNode(
                relative_path="src\\audio",
                files=[
                    FileEntry(folder_path="src\\audio", name="mixer.h"),
                    FileEntry(folder_path="src\\audio", name="mixer.cpp"),
                ],
                subfolders=[
                    FolderNode(
                        relative_path="src\\audio\\codecs",
                        files=[FileEntry(folder_path="src\\audio\\codecs", name="ogg.h")],
                    ),
                ],
            ),
            FolderNode(
                relative_path="src\\video",
                files=[
                    FileEntry(folder_path="src\\video", name="shader.glsl"),
                    FileEntry(folder_path="src\\video", name="renderer.cpp"),
                ],
            ),
        ],
    )


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def game_config(code_dir: Path) -> GeneratorConfig:
    """Config for project ``Game`` scanning ``code`` into the working directory."""
    return GeneratorConfig(project_name="Game", code_folder="code")
