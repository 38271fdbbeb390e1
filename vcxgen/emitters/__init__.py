"""vcxgen emitters -- render the Visual Studio solution, project, filters and build script.

Each emitter is a plain function that takes the project name and/or the
flattened file and folder lists and returns the artifact's text.  None of
them touch the filesystem.

Quick usage::

    from vcxgen.emitters import emit_project, emit_solution

    sln_text = emit_solution("Game")
    vcxproj_text = emit_project("Game", headers, sources)
"""

from vcxgen.emitters.build_script import emit_build_script
from vcxgen.emitters.filters import emit_project_filters
from vcxgen.emitters.project import emit_project
from vcxgen.emitters.solution import emit_solution
from vcxgen.emitters.templates import TemplateRenderer, default_renderer

__all__ = [
    "TemplateRenderer",
    "default_renderer",
    "emit_build_script",
    "emit_project",
    "emit_project_filters",
    "emit_solution",
]
