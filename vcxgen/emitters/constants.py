"""Fixed identifiers and names shared by the generated artifacts.

The GUIDs are the same in every run.  Visual Studio only needs them to be
consistent between the solution, project and filters files of one project.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

PROJECT_GUID = "{46D99A72-17AF-4E62-809F-EECB637F6EE1}"

#: Project type GUID Visual Studio uses for C++ projects.
CPP_PROJECT_TYPE_GUID = "{8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942}"

FILTER_GUID = "{96873809-db68-49b8-8a4b-a40a3c3972f6}"

# ---------------------------------------------------------------------------
# File names
# ---------------------------------------------------------------------------

SOLUTION_FILE_EXTENSION = ".sln"
PROJECT_FILE_EXTENSION = ".vcxproj"
PROJECT_FILTERS_FILE_EXTENSION = ".vcxproj.filters"
CPP_FILE_EXTENSION = ".cpp"
BUILD_SCRIPT_FILENAME = "build.bat"
BUILD_DIR = "build"

# ---------------------------------------------------------------------------
# Build configurations
# ---------------------------------------------------------------------------

PLATFORM = "Win32"
PLATFORM_TOOLSET = "v120"

#: Debug and release variants of the Makefile project.
BUILD_CONFIGURATIONS: tuple[dict[str, str], ...] = (
    {"name": "Debug", "use_debug_libraries": "true", "define": "_DEBUG"},
    {"name": "Release", "use_debug_libraries": "false", "define": "NDEBUG"},
)
