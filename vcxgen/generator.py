"""vcxgen project generator.

Scans a code folder and writes a Visual Studio solution, project, project
filters file and ``build.bat`` that reference every header and source file
found in it.

Usage::

    vcxgen <ProjectName> <CodeFolderPath>
    python -m vcxgen Game code --output ./ide --lf

Generated files (in the current directory unless ``--output`` is given):

- ``<ProjectName>.sln`` -- solution containing the generated project.
- ``<ProjectName>.vcxproj`` -- Makefile project listing all ``.h`` and
  ``.cpp`` files, ``build.bat`` and the unity-build entry point
  ``<ProjectName>.cpp``.
- ``<ProjectName>.vcxproj.filters`` -- filters mirroring the code folder's
  layout.
- ``build.bat`` -- compiles ``<ProjectName>.cpp`` with the code folder as an
  include directory.  Any existing ``build.bat`` is overwritten.
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from rich.markup import escape

from vcxgen.config import GeneratorConfig
from vcxgen.emitters import (
    TemplateRenderer,
    emit_build_script,
    emit_project,
    emit_project_filters,
    emit_solution,
)
from vcxgen.tree import (
    FileEntry,
    FolderNode,
    ScanResult,
    build_rich_tree,
    collect_all_folders,
    collect_headers,
    collect_sources,
    scan_folder,
)
from vcxgen.utils import (
    console,
    ensure_dir,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_text_file,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScanRootError(Exception):
    """Raised in strict mode when the code folder itself cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read code folder {path!r}: {reason}")


class ArtifactWriteError(Exception):
    """Raised when a generated artifact cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class ProjectFiles(BaseModel):
    """The flattened lists handed to the emitters."""

    headers: list[FileEntry] = Field(default_factory=list)
    sources: list[FileEntry] = Field(
        default_factory=list, description="Scanned sources followed by the main source file"
    )
    folders: list[FolderNode] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Summary of one generator run."""

    scan: ScanResult
    files: ProjectFiles
    written: list[Path] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Drives scan -> flatten -> emit -> write for one project.

    Attributes:
        config: Settings for this run.
        renderer: Optional template renderer passed to every emitter.
    """

    def __init__(self, config: GeneratorConfig, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Scan the code folder and write all four artifacts.

        Raises:
            ScanRootError: If ``config.strict`` is set and the code folder
                cannot be read.  Nothing is written in that case.
            ArtifactWriteError: If an artifact cannot be written.
        """
        scan_result = self.scan()
        if self.config.strict and scan_result.root_failed:
            failure = next(
                f for f in scan_result.failures if f.path == scan_result.root.relative_path
            )
            raise ScanRootError(failure.path, failure.reason)

        files = self.flatten(scan_result)
        artifacts = self.build_artifacts(files)
        written = self.write_artifacts(artifacts)
        return GenerationResult(scan=scan_result, files=files, written=written)

    def scan(self) -> ScanResult:
        """Scan ``config.code_folder``."""
        return scan_folder(self.config.code_folder, separator=self.config.path_separator)

    def main_source(self) -> FileEntry:
        """The unity-build entry point, listed at the project root."""
        return FileEntry(
            folder_path="",
            name=self.config.main_source_filename,
            separator=self.config.path_separator,
        )

    def flatten(self, scan_result: ScanResult) -> ProjectFiles:
        """Derive the header, source and folder lists from a scanned tree.

        The main source file is appended to the scanned sources so the
        project and filters files list it even though it may not exist yet.
        """
        root = scan_result.root
        return ProjectFiles(
            headers=collect_headers(root, self.config.header_extensions),
            sources=[*collect_sources(root, self.config.source_extensions), self.main_source()],
            folders=collect_all_folders(root),
        )

    def build_artifacts(self, files: ProjectFiles) -> dict[Path, str]:
        """Render every artifact, keyed by its output path.

        Order: solution, project, project filters, build script.
        """
        name = self.config.project_name
        return {
            self.config.solution_path: emit_solution(name, renderer=self.renderer),
            self.config.project_path: emit_project(
                name, files.headers, files.sources, renderer=self.renderer
            ),
            self.config.filters_path: emit_project_filters(
                files.headers, files.sources, files.folders, renderer=self.renderer
            ),
            self.config.build_script_path: emit_build_script(
                self.config.main_source_filename,
                self.config.code_folder,
                renderer=self.renderer,
            ),
        }

    def write_artifacts(self, artifacts: dict[Path, str]) -> list[Path]:
        """Write each artifact in turn, overwriting existing files.

        Raises:
            ArtifactWriteError: On the first file that cannot be written.
        """
        try:
            ensure_dir(self.config.output_dir)
        except OSError as exc:
            raise ArtifactWriteError(self.config.output_dir, exc.strerror or str(exc)) from exc

        written: list[Path] = []
        for path, content in artifacts.items():
            try:
                written.append(write_text_file(path, content, newline=self.config.newline))
            except OSError as exc:
                raise ArtifactWriteError(path, exc.strerror or str(exc)) from exc
        return written


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def _report(config: GeneratorConfig, result: GenerationResult, *, quiet: bool) -> None:
    for failure in result.scan.failures:
        print_warning(f"Could not read folder {escape(failure.path)}: {escape(failure.reason)}")

    if quiet:
        return

    console.print(build_rich_tree(result.scan.root, separator=config.path_separator))
    console.print()
    print_summary_table(
        {
            "Project": escape(config.project_name),
            "Code folder": escape(config.code_folder),
            "Header files": str(len(result.files.headers)),
            # The main source file is synthesized, not scanned.
            "Source files": str(len(result.files.sources) - 1),
            "Filters": str(len(result.files.folders)),
            "Written": escape(", ".join(str(p) for p in result.written)),
        },
        title="vcxgen",
    )
    print_success(f"Generated {len(result.written)} files.")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``vcxgen`` and ``python -m vcxgen``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="vcxgen",
        description="Generate a Visual Studio solution, project and build.bat for a code folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  vcxgen Game code\n"
            "  vcxgen Game ..\\game\\code --output ide --strict\n"
            "  vcxgen Game code --config vcxgen.json\n"
        ),
    )
    parser.add_argument("project_name", help="Project name, used for the generated file names")
    parser.add_argument("code_folder", help="Path to the folder containing the code files")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory to write the generated files to (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with saved generator settings",
    )
    parser.add_argument(
        "--lf",
        dest="line_ending",
        action="store_const",
        const="lf",
        default=None,
        help="Write LF line endings instead of CRLF",
    )
    parser.add_argument(
        "--strict",
        action="store_const",
        const=True,
        default=None,
        help="Fail if the code folder cannot be read instead of writing empty descriptors",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and errors",
    )

    args = parser.parse_args(argv)

    overrides = {
        "project_name": args.project_name,
        "code_folder": args.code_folder,
        "output_dir": Path(args.output) if args.output else None,
        "line_ending": args.line_ending,
        "strict": args.strict,
    }
    try:
        if args.config:
            config = GeneratorConfig.load(Path(args.config), **overrides)
        else:
            config = GeneratorConfig(**{k: v for k, v in overrides.items() if v is not None})
    except OSError as exc:
        print_error(f"Error: cannot read config file {escape(args.config)}: {escape(str(exc))}")
        sys.exit(1)
    except ValidationError as exc:
        print_error(f"Error: invalid settings:\n{escape(str(exc))}")
        sys.exit(1)

    try:
        result = ProjectGenerator(config).generate()
    except (ScanRootError, ArtifactWriteError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    _report(config, result, quiet=args.quiet)


if __name__ == "__main__":
    main()
