"""Pydantic v2 models for the scanned code folder.

Defines the tree produced by the scanner: folders own their child folders
and files by value, and no node holds a reference back to its parent.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: Path separator used inside Visual Studio project files.
PATH_SEPARATOR = "\\"

EXTENSION_SEPARATOR = "."


def file_extension(name: str) -> str:
    """Return the extension of *name* with its leading dot.

    The extension starts at the last ``.`` in the filename.  A name without a
    dot has no extension and yields an empty string::

        file_extension("main.cpp")     -> ".cpp"
        file_extension("archive.tar.gz") -> ".gz"
        file_extension("README")       -> ""
    """
    last_dot = name.rfind(EXTENSION_SEPARATOR)
    if last_dot == -1:
        return ""
    return name[last_dot:]


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

class FileEntry(BaseModel):
    """A single file found in (or synthesized for) the code folder."""

    model_config = ConfigDict(frozen=True)

    folder_path: str = Field(
        default="", description="Path of the containing folder; empty for root-level files"
    )
    name: str = Field(..., description="Filename including any extension")
    separator: str = Field(default=PATH_SEPARATOR, description="Separator joining folder and name")

    @property
    def relative_path(self) -> str:
        """Folder path and filename joined by the separator.

        Without a folder path this is just the filename, with no leading
        separator.
        """
        if not self.folder_path:
            return self.name
        return f"{self.folder_path}{self.separator}{self.name}"

    @property
    def extension(self) -> str:
        """The file extension with its leading dot (``""`` if none)."""
        return file_extension(self.name)

    def is_header(self, extensions: tuple[str, ...] | list[str] = (".h",)) -> bool:
        return self.extension in extensions

    def is_source(self, extensions: tuple[str, ...] | list[str] = (".cpp",)) -> bool:
        return self.extension in extensions


# ---------------------------------------------------------------------------
# Folders
# ---------------------------------------------------------------------------

class FolderNode(BaseModel):
    """A folder with its immediate files and recursively populated subfolders.

    The root node's ``relative_path`` is the scanned path exactly as it was
    given.  Every file nested under a node has a ``folder_path`` beginning
    with that node's ``relative_path``.
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="Path of this folder relative to the working directory")
    files: list[FileEntry] = Field(default_factory=list, description="Files directly in this folder")
    subfolders: list[FolderNode] = Field(default_factory=list, description="Immediate child folders")

    def file_count(self) -> int:
        """Total number of files in this folder and all subfolders."""
        return len(self.files) + sum(sub.file_count() for sub in self.subfolders)

    def folder_count(self) -> int:
        """Total number of subfolders below this folder (excluding itself)."""
        return len(self.subfolders) + sum(sub.folder_count() for sub in self.subfolders)


# ---------------------------------------------------------------------------
# Scan results
# ---------------------------------------------------------------------------

class ScanFailure(BaseModel):
    """A directory that could not be opened or listed."""

    path: str = Field(..., description="Relative path of the unreadable folder")
    reason: str = Field(default="", description="Underlying OS error message")


class ScanResult(BaseModel):
    """Outcome of scanning a code folder.

    ``root`` is always populated; unreadable directories appear in it as
    empty nodes and are listed in ``failures``.
    """

    root: FolderNode
    failures: list[ScanFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """``True`` when every directory in the tree was read."""
        return not self.failures

    @property
    def root_failed(self) -> bool:
        """``True`` when the scan root itself could not be read."""
        return any(f.path == self.root.relative_path for f in self.failures)


FolderNode.model_rebuild()
