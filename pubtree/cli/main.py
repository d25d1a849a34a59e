"""pubtree CLI - inspect a published content tree dump."""
from pathlib import Path
from typing import Dict

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from pubtree import (
    PublishedContent,
    PublishedContentException,
    ResolutionContext,
    SegmentUrlResolver,
    TreeBuilder,
)

app = typer.Typer(
    name="pubtree",
    help="Published content tree inspector",
    add_completion=False
)
console = Console()


def load_tree(file: Path) -> Dict[int, PublishedContent]:
    """Load a JSON tree dump, exiting on malformed input."""
    try:
        return TreeBuilder().build_from_json(file.read_text(encoding="utf-8"))
    except (ValueError, PublishedContentException) as e:
        console.print(f"[red]Cannot load {file}: {e}[/red]")
        raise typer.Exit(1)


def get_node(nodes: Dict[int, PublishedContent], node_id: int) -> PublishedContent:
    node = nodes.get(node_id)
    if node is None:
        console.print(f"[red]Node not found: {node_id}[/red]")
        raise typer.Exit(1)
    return node


def _label(node: PublishedContent, ctx: ResolutionContext) -> str:
    kind = "M" if node.is_media else "C"
    try:
        url = node.get_url(ctx)
    except PublishedContentException as e:
        url = f"[red]{e}[/red]"
    return f"[cyan]{kind}[/cyan] {node.name} [dim]#{node.id}[/dim] {url or ''}"


@app.command()
def tree(
    file: Path = typer.Argument(..., help="JSON tree dump", exists=True),
    show_top_level: bool = typer.Option(False, "--show-top-level", help="Keep the top level in URLs"),
):
    """Show the tree with URLs."""
    nodes = load_tree(file)
    roots = sorted(
        (n for n in nodes.values() if n.parent is None),
        key=lambda n: n.sort_order
    )
    
    with ResolutionContext(SegmentUrlResolver(nodes, hide_top_level=not show_top_level)) as ctx:
        for root in roots:
            view = Tree(_label(root, ctx))
            _add_branch(view, root, ctx)
            console.print(view)


def _add_branch(view: Tree, node: PublishedContent, ctx: ResolutionContext):
    for child in node:
        _add_branch(view.add(_label(child, ctx)), child, ctx)


@app.command()
def url(
    file: Path = typer.Argument(..., help="JSON tree dump", exists=True),
    node_id: int = typer.Argument(..., help="Node id"),
    show_top_level: bool = typer.Option(False, "--show-top-level", help="Keep the top level in URLs"),
):
    """Print the URL of one node."""
    nodes = load_tree(file)
    node = get_node(nodes, node_id)
    
    with ResolutionContext(SegmentUrlResolver(nodes, hide_top_level=not show_top_level)) as ctx:
        try:
            console.print(node.get_url(ctx) or "")
        except PublishedContentException as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)


@app.command()
def prop(
    file: Path = typer.Argument(..., help="JSON tree dump", exists=True),
    node_id: int = typer.Argument(..., help="Node id"),
    alias: str = typer.Argument(..., help="Property alias"),
    recurse: bool = typer.Option(False, "-r", "--recurse", help="Fall back to ancestors"),
):
    """Resolve a property and show which node it came from."""
    nodes = load_tree(file)
    node = get_node(nodes, node_id)
    
    found = node.get_property(alias, recurse=recurse)
    if found is None:
        console.print(f"[yellow]No property '{alias}'[/yellow]")
        return
    
    owner = next(
        (n for n in [node, *node.ancestors()] if n.get_own_property(alias) is found),
        node
    )
    
    table = Table()
    table.add_column("Alias", style="cyan")
    table.add_column("Value")
    table.add_column("Has value", justify="center")
    table.add_column("Node", style="dim")
    table.add_row(
        found.alias,
        str(found.value) if found.value is not None else "-",
        "yes" if found.has_value() else "no",
        f"{owner.name} #{owner.id}"
    )
    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
