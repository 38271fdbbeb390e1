"""Visual Studio project filters (``.vcxproj.filters``) emitter.

Filters are the folders Visual Studio's Solution Explorer shows.  One filter
is declared per scanned folder and each file is placed in the filter of the
folder that contains it, so the IDE mirrors the code folder's layout.
"""

from __future__ import annotations

from collections.abc import Sequence

from vcxgen.tree.models import FileEntry, FolderNode

from .constants import BUILD_SCRIPT_FILENAME, FILTER_GUID
from .templates import TemplateRenderer, default_renderer

TEMPLATE_NAME = "project.vcxproj.filters.j2"


def emit_project_filters(
    headers: Sequence[FileEntry],
    sources: Sequence[FileEntry],
    folders: Sequence[FolderNode],
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the filters descriptor for the given files and folders.

    Files without a folder path (such as the synthesized main source file)
    are listed without a filter and appear at the project root.
    """
    renderer = renderer or default_renderer()
    return renderer.render(
        TEMPLATE_NAME,
        {
            "headers": list(headers),
            "sources": list(sources),
            "filter_names": filter_names(folders),
            "filter_guid": FILTER_GUID,
            "build_script_name": BUILD_SCRIPT_FILENAME,
        },
    )


def filter_names(folders: Sequence[FolderNode]) -> list[str]:
    """Distinct, non-empty folder paths in first-seen order."""
    names: list[str] = []
    seen: set[str] = set()
    for folder in folders:
        name = folder.relative_path
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names
