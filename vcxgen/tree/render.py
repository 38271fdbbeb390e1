"""Rich rendering of a scanned folder tree for console display."""

from __future__ import annotations

from rich.markup import escape
from rich.tree import Tree

from .models import PATH_SEPARATOR, FolderNode


def build_rich_tree(
    node: FolderNode,
    *,
    separator: str = PATH_SEPARATOR,
    label: str | None = None,
) -> Tree:
    """Build a ``rich.tree.Tree`` mirroring *node*.

    Subfolders are listed before files, each group in scan order.  Labels
    are markup-escaped so bracketed filenames print literally.

    Args:
        node: The folder to render.
        separator: Separator the scanner used to compose subfolder paths;
            only the last component is shown for each subfolder.
        label: Optional label for the top node.  Defaults to the folder's
            relative path.
    """
    tree = Tree(f"[bold blue]{escape(label or node.relative_path)}[/bold blue]")
    _add_children(tree, node, separator)
    return tree


def _add_children(tree: Tree, node: FolderNode, separator: str) -> None:
    for subfolder in node.subfolders:
        name = subfolder.relative_path.rsplit(separator, 1)[-1]
        branch = tree.add(f"[bold blue]{escape(name)}[/bold blue]")
        _add_children(branch, subfolder, separator)
    for entry in node.files:
        tree.add(escape(entry.name))
