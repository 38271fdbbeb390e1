"""Code folder scanning and flattening.

Walks a folder depth-first and builds a ``FolderNode`` tree, then flattens
that tree into the header, source and folder lists consumed by the artifact
emitters.

Quick usage::

    from vcxgen.tree import collect_headers, collect_sources, scan

    root = scan("code")
    headers = collect_headers(root)
    sources = collect_sources(root)
"""

from __future__ import annotations

import os

from .models import PATH_SEPARATOR, FileEntry, FolderNode, ScanFailure, ScanResult

# Pseudo-entries some directory listings report for the folder and its parent.
_SELF_AND_PARENT = frozenset({".", ".."})

DEFAULT_HEADER_EXTENSIONS: tuple[str, ...] = (".h",)
DEFAULT_SOURCE_EXTENSIONS: tuple[str, ...] = (".cpp",)


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


def scan_folder(relative_path: str, *, separator: str = PATH_SEPARATOR) -> ScanResult:
    """Scan *relative_path* and report every directory that could not be read.

    Args:
        relative_path: Folder to scan, relative to the working directory or
            absolute.  It becomes the root node's ``relative_path`` verbatim.
        separator: Separator used when composing the recorded relative paths
            of subfolders and files.

    Returns:
        A ``ScanResult`` whose ``root`` is always populated.  Unreadable
        directories are represented by empty nodes and listed in
        ``failures``.
    """
    failures: list[ScanFailure] = []
    root = _scan_node(relative_path, relative_path, separator, failures)
    return ScanResult(root=root, failures=failures)


def scan(relative_path: str, *, separator: str = PATH_SEPARATOR) -> FolderNode:
    """Scan *relative_path* and return the populated folder tree.

    A folder that does not exist or cannot be listed comes back with empty
    file and subfolder lists; no error is raised.  Use :func:`scan_folder`
    to find out which directories were unreadable.
    """
    return scan_folder(relative_path, separator=separator).root


def _scan_node(
    fs_path: str,
    relative_path: str,
    separator: str,
    failures: list[ScanFailure],
) -> FolderNode:
    """Build the node for one folder, recursing into its subfolders.

    *fs_path* is used for filesystem access while *relative_path* is the
    path recorded in the tree (joined with *separator*).
    """
    try:
        with os.scandir(fs_path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        failures.append(ScanFailure(path=relative_path, reason=exc.strerror or str(exc)))
        return FolderNode(relative_path=relative_path)

    files: list[FileEntry] = []
    subfolders: list[FolderNode] = []

    for entry in entries:
        if entry.is_dir():
            if entry.name in _SELF_AND_PARENT:
                continue
            subfolders.append(
                _scan_node(
                    os.path.join(fs_path, entry.name),
                    f"{relative_path}{separator}{entry.name}",
                    separator,
                    failures,
                )
            )
        elif entry.is_file():
            files.append(
                FileEntry(folder_path=relative_path, name=entry.name, separator=separator)
            )

    return FolderNode(relative_path=relative_path, files=files, subfolders=subfolders)


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------


def collect_headers(
    node: FolderNode,
    extensions: tuple[str, ...] | list[str] = DEFAULT_HEADER_EXTENSIONS,
) -> list[FileEntry]:
    """Return every header file under *node*, depth-first.

    The node's own headers come first, followed by those of each subfolder
    in order.
    """
    headers = [f for f in node.files if f.is_header(extensions)]
    for subfolder in node.subfolders:
        headers.extend(collect_headers(subfolder, extensions))
    return headers


def collect_sources(
    node: FolderNode,
    extensions: tuple[str, ...] | list[str] = DEFAULT_SOURCE_EXTENSIONS,
) -> list[FileEntry]:
    """Return every source file under *node*, in the same order as headers."""
    sources = [f for f in node.files if f.is_source(extensions)]
    for subfolder in node.subfolders:
        sources.extend(collect_sources(subfolder, extensions))
    return sources


def collect_all_folders(node: FolderNode) -> list[FolderNode]:
    """Return *node* followed by all of its descendants in pre-order."""
    folders = [node]
    for subfolder in node.subfolders:
        folders.extend(collect_all_folders(subfolder))
    return folders
