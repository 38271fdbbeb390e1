"""Tests for Jinja2 template rendering (vcxgen.emitters.templates).

Covers:
- Packaged and custom template directories
- Block tag whitespace handling
- XML escaping for the MSBuild templates only
- Strict handling of undefined variables
- The from_build_dir filter
- The shared default renderer
"""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2.exceptions import TemplateNotFound, UndefinedError

from vcxgen.emitters.templates import TemplateRenderer, default_renderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A template directory with one template per escaping rule."""
    templates = {
        "hello.txt.j2": "Hello {{ name }}!\n",
        "loop.txt.j2": "start\n{% for x in items %}\n  {{ x }}\n{% endfor %}\nend\n",
        "value.vcxproj.j2": "{{ v }}",
        "value.vcxproj.filters.j2": "{{ v }}",
        "value.sln.j2": "{{ v }}",
        "value.bat.j2": "{{ v }}",
        "path.txt.j2": "{{ p | from_build_dir }}",
        "missing.txt.j2": "{{ missing }}",
    }
    for name, body in templates.items():
        (tmp_path / name).write_text(body, encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# Template directories
# ---------------------------------------------------------------------------


class TestTemplateDirectory:
    @pytest.mark.parametrize(
        "name",
        ["build.bat.j2", "project.vcxproj.filters.j2", "project.vcxproj.j2", "solution.sln.j2"],
    )
    def test_packaged_templates_exist(self, renderer, name):
        assert (renderer.template_dir / name).is_file()

    def test_custom_template_dir(self, template_dir):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render("hello.txt.j2", {"name": "Game"}) == "Hello Game!\n"

    def test_unknown_template_raises(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("missing.j2", {})


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_block_tags_leave_no_blank_lines(self, template_dir):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render("loop.txt.j2", {"items": ["a", "b"]}) == "start\n  a\n  b\nend\n"

    def test_undefined_variable_raises(self, template_dir):
        renderer = TemplateRenderer(template_dir)
        with pytest.raises(UndefinedError):
            renderer.render("missing.txt.j2", {})

    @pytest.mark.parametrize("name", ["value.vcxproj.j2", "value.vcxproj.filters.j2"])
    def test_xml_templates_escape_values(self, template_dir, name):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render(name, {"v": "R&D<1>"}) == "R&amp;D&lt;1&gt;"

    @pytest.mark.parametrize("name", ["value.sln.j2", "value.bat.j2", "hello.txt.j2"])
    def test_other_templates_are_not_escaped(self, template_dir, name):
        renderer = TemplateRenderer(template_dir)
        rendered = renderer.render(name, {"v": "R&D<1>", "name": "R&D"})
        assert "&amp;" not in rendered
        assert "R&D" in rendered


# ---------------------------------------------------------------------------
# from_build_dir filter
# ---------------------------------------------------------------------------


class TestFromBuildDirFilter:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("code", "..\\code"),
            ("Game.cpp", "..\\Game.cpp"),
            ("..\\shared\\code", "..\\..\\shared\\code"),
            ("C:\\projects\\code", "C:\\projects\\code"),
            ("\\\\server\\share\\code", "\\\\server\\share\\code"),
            ("/home/dev/code", "/home/dev/code"),
        ],
    )
    def test_paths(self, template_dir, value, expected):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render("path.txt.j2", {"p": value}) == expected


def test_default_renderer_is_shared():
    assert default_renderer() is default_renderer()
    assert isinstance(default_renderer(), TemplateRenderer)
