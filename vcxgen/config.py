"""vcxgen configuration.

Typed settings for one generator run.  Uses a Pydantic v2 model so values
are validated at construction time and can be saved to and loaded from JSON
without boiler-plate.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from vcxgen.emitters.constants import (
    BUILD_SCRIPT_FILENAME,
    CPP_FILE_EXTENSION,
    PROJECT_FILE_EXTENSION,
    PROJECT_FILTERS_FILE_EXTENSION,
    SOLUTION_FILE_EXTENSION,
)
from vcxgen.tree.models import PATH_SEPARATOR

LINE_ENDINGS: dict[str, str] = {
    "crlf": "\r\n",
    "lf": "\n",
}


class GeneratorConfig(BaseModel):
    """Settings for generating the artifacts of one project.

    ``project_name`` is used verbatim as the solution/project identifier and
    as the stem of every generated descriptor.  ``code_folder`` is the scan
    root and is also kept verbatim, so the generated paths use it exactly as
    typed.
    """

    project_name: str = Field(..., min_length=1)
    code_folder: str = Field(..., min_length=1)
    output_dir: Path = Field(default=Path("."))
    header_extensions: list[str] = Field(default_factory=lambda: [".h"])
    source_extensions: list[str] = Field(default_factory=lambda: [CPP_FILE_EXTENSION])
    path_separator: str = Field(default=PATH_SEPARATOR, min_length=1)
    line_ending: Literal["crlf", "lf"] = Field(default="crlf")
    strict: bool = Field(
        default=False, description="Fail instead of warning when the code folder cannot be read"
    )

    # ------------------------------------------------------------------
    # Derived names and paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def main_source_filename(self) -> str:
        """The unity-build entry point, ``<project_name>.cpp``."""
        return f"{self.project_name}{CPP_FILE_EXTENSION}"

    @property
    def newline(self) -> str:
        return LINE_ENDINGS[self.line_ending]

    @property
    def solution_path(self) -> Path:
        return self.output_dir / f"{self.project_name}{SOLUTION_FILE_EXTENSION}"

    @property
    def project_path(self) -> Path:
        return self.output_dir / f"{self.project_name}{PROJECT_FILE_EXTENSION}"

    @property
    def filters_path(self) -> Path:
        return self.output_dir / f"{self.project_name}{PROJECT_FILTERS_FILE_EXTENSION}"

    @property
    def build_script_path(self) -> Path:
        return self.output_dir / BUILD_SCRIPT_FILENAME

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path, **overrides: object) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON.

        Args:
            path: The JSON file to read.
            **overrides: Field values that replace those read from the file
                (``None`` values are ignored).

        Returns:
            A validated ``GeneratorConfig`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        config = cls.model_validate_json(raw)
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return config
        return cls.model_validate({**config.model_dump(), **updates})
