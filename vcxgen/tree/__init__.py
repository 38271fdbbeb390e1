"""vcxgen tree -- scans a code folder into an in-memory folder/file tree.

Quick usage::

    from vcxgen.tree import scan_folder, collect_headers, collect_sources

    result = scan_folder("code")
    if not result.ok:
        ...
    headers = collect_headers(result.root)
    sources = collect_sources(result.root)
"""

from vcxgen.tree.models import (
    PATH_SEPARATOR,
    FileEntry,
    FolderNode,
    ScanFailure,
    ScanResult,
    file_extension,
)
from vcxgen.tree.render import build_rich_tree
from vcxgen.tree.scanner import (
    DEFAULT_HEADER_EXTENSIONS,
    DEFAULT_SOURCE_EXTENSIONS,
    collect_all_folders,
    collect_headers,
    collect_sources,
    scan,
    scan_folder,
)

__all__ = [
    "DEFAULT_HEADER_EXTENSIONS",
    "DEFAULT_SOURCE_EXTENSIONS",
    "PATH_SEPARATOR",
    "FileEntry",
    "FolderNode",
    "ScanFailure",
    "ScanResult",
    "build_rich_tree",
    "collect_all_folders",
    "collect_headers",
    "collect_sources",
    "file_extension",
    "scan",
    "scan_folder",
]
