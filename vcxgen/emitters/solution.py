"""Visual Studio solution (``.sln``) emitter."""

from __future__ import annotations

from .constants import (
    BUILD_CONFIGURATIONS,
    CPP_PROJECT_TYPE_GUID,
    PLATFORM,
    PROJECT_FILE_EXTENSION,
    PROJECT_GUID,
)
from .templates import TemplateRenderer, default_renderer

TEMPLATE_NAME = "solution.sln.j2"


def emit_solution(project_name: str, *, renderer: TemplateRenderer | None = None) -> str:
    """Render a solution containing the single project named *project_name*.

    The solution references ``<project_name>.vcxproj`` and offers
    ``CommandLineBuild``, ``Debug`` and ``Release`` configurations, with
    ``CommandLineBuild`` building the project's release configuration.
    """
    renderer = renderer or default_renderer()
    return renderer.render(
        TEMPLATE_NAME,
        {
            "project_name": project_name,
            "project_filename": f"{project_name}{PROJECT_FILE_EXTENSION}",
            "project_guid": PROJECT_GUID,
            "cpp_project_type_guid": CPP_PROJECT_TYPE_GUID,
            "platform": PLATFORM,
            "configurations": BUILD_CONFIGURATIONS,
        },
    )
