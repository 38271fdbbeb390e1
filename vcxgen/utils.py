"""Shared utility functions for vcxgen.

Provides Rich-based console reporting and the file-system helpers used to
write the generated artifacts.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for *path*.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text_file(path: str | Path, content: str, newline: str = "\n") -> Path:
    """Write *content* to *path* in one go, replacing any existing file.

    Every ``\\n`` in *content* is written as *newline*, so templates can be
    rendered with plain newlines and still produce CRLF files.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    file_path = Path(path)
    with open(file_path, "w", encoding="utf-8", newline=newline) as handle:
        handle.write(content)
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{message}[/bold yellow]")
