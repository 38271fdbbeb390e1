"""Batch build script (``build.bat``) emitter."""

from __future__ import annotations

from .constants import BUILD_DIR
from .templates import TemplateRenderer, default_renderer

TEMPLATE_NAME = "build.bat.j2"


def emit_build_script(
    main_source_filename: str,
    code_root: str,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render a script that compiles *main_source_filename* in one ``cl.exe`` call.

    The main file is the single translation unit of a unity build.  The
    script runs from the ``build`` subdirectory, so relative paths are
    prefixed with ``..\\``; *code_root* is added as an include directory.
    The compiler flags are fixed.
    """
    renderer = renderer or default_renderer()
    return renderer.render(
        TEMPLATE_NAME,
        {
            "main_source_filename": main_source_filename,
            "code_root": code_root,
            "build_dir": BUILD_DIR,
        },
    )
