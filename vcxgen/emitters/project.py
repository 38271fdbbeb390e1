"""Visual Studio project (``.vcxproj``) emitter.

The project is a Makefile project: Visual Studio only browses the listed
files and delegates building to the generated build script.
"""

from __future__ import annotations

from collections.abc import Sequence

from vcxgen.tree.models import FileEntry

from .constants import (
    BUILD_CONFIGURATIONS,
    BUILD_DIR,
    BUILD_SCRIPT_FILENAME,
    PLATFORM,
    PLATFORM_TOOLSET,
    PROJECT_GUID,
)
from .templates import TemplateRenderer, default_renderer

TEMPLATE_NAME = "project.vcxproj.j2"


def emit_project(
    project_name: str,
    headers: Sequence[FileEntry],
    sources: Sequence[FileEntry],
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the project descriptor listing every header and source file.

    Args:
        project_name: Name shown in Visual Studio and used for the output
            executable ``build\\<project_name>.exe``.
        headers: Files emitted as ``ClInclude`` items, in order.
        sources: Files emitted as ``ClCompile`` items, in order.
        renderer: Optional renderer; defaults to the packaged templates.
    """
    renderer = renderer or default_renderer()
    return renderer.render(
        TEMPLATE_NAME,
        {
            "project_name": project_name,
            "headers": list(headers),
            "sources": list(sources),
            "project_guid": PROJECT_GUID,
            "platform": PLATFORM,
            "platform_toolset": PLATFORM_TOOLSET,
            "configurations": BUILD_CONFIGURATIONS,
            "build_script_name": BUILD_SCRIPT_FILENAME,
            "build_dir": BUILD_DIR,
        },
    )
