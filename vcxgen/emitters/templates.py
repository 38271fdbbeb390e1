"""Jinja2 template rendering for the generated build artifacts.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``vcxgen/emitters/templates/`` directory and renders them with
artifact-specific context data.
"""

from __future__ import annotations

import ntpath
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

#: Prefix that takes a path from inside the ``build`` directory back to the
#: folder the artifacts were generated in.
_PARENT_PREFIX = "..\\"

#: MSBuild XML templates; values rendered into them are XML-escaped.
_XML_TEMPLATE_EXTENSIONS = ("vcxproj.j2", "filters.j2")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the solution, project and build files.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined template variables raise instead of
    rendering as empty strings.  Values rendered into the MSBuild XML
    templates are escaped, so a file named ``R&D.h`` still yields a
    well-formed project; the solution and batch templates are not escaped.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(
                enabled_extensions=_XML_TEMPLATE_EXTENSIONS,
                default_for_string=False,
                default=False,
            ),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["from_build_dir"] = _from_build_dir_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"project.vcxproj.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Shared renderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _from_build_dir_filter(value: str) -> str:
    """Express *value* as seen from the ``build`` subdirectory.

    Relative paths gain a ``..\\`` prefix; absolute Windows or POSIX paths
    are returned unchanged.
    """
    if ntpath.isabs(value) or value.startswith("/"):
        return value
    return f"{_PARENT_PREFIX}{value}"
