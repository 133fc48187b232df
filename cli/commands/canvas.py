"""Commands for converting and inspecting canvas files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from flowcanvas.canvas.codec import dumps_canvas, dumps_flow, loads_canvas, loads_flow
from flowcanvas.canvas.models import CanvasDocument
from flowcanvas.canvas.workflow import get_input_nodes, get_output_nodes
from flowcanvas.errors import FlowCanvasError
from flowcanvas.flow.converter import to_persisted, to_visual

from cli.rendering import node_title, render_list, render_tree

canvas_app = typer.Typer(help="Convert and inspect JSON Canvas files.")


def _read_input(path: str) -> str:
    """Return the contents of *path*, or stdin when *path* is ``-``."""
    if path == "-":
        return typer.get_text_stream("stdin").read()
    return Path(path).read_text(encoding="utf-8")


def _load_document(path: str) -> CanvasDocument:
    try:
        return loads_canvas(_read_input(path))
    except (FlowCanvasError, OSError) as e:
        typer.echo(f"❌ Could not read canvas {path!r}: {e}")
        raise typer.Exit(code=1)


@canvas_app.command("to-flow")
def canvas_to_flow_cmd(
    path: str = typer.Argument(..., help="Path to a .canvas file, or '-' for stdin."),
) -> None:
    """Print the visual-editor graph for a canvas file."""
    doc = _load_document(path)
    typer.echo(dumps_flow(to_visual(doc)))


@canvas_app.command("to-canvas")
def flow_to_canvas_cmd(
    path: str = typer.Argument(..., help="Path to a flow graph JSON file, or '-' for stdin."),
) -> None:
    """Print the canvas document for a visual-editor graph file."""
    try:
        graph = loads_flow(_read_input(path))
    except (FlowCanvasError, OSError) as e:
        typer.echo(f"❌ Could not read flow graph {path!r}: {e}")
        raise typer.Exit(code=1)

    typer.echo(dumps_canvas(to_persisted(graph.nodes, graph.edges)))


@canvas_app.command("show")
def canvas_show(
    path: str = typer.Argument(..., help="Path to a .canvas file, or '-' for stdin."),
    format: str = typer.Option("list", "--format", help="Output format: list | tree"),
    root: Optional[str] = typer.Option(None, "--root", help="Root node id for the tree (default: first node)."),
) -> None:
    """Display a canvas as a flat list or an ASCII tree."""
    doc = _load_document(path)

    if format == "list":
        typer.echo(render_list(doc))
        return
    if format != "tree":
        typer.echo(f"❌ Unknown format {format!r}. Use: list | tree")
        raise typer.Exit(code=1)

    if not doc.nodes:
        typer.echo("⚠️  Canvas has no nodes.")
        return
    typer.echo(render_tree(doc, root or doc.nodes[0].id))


def _print_neighbours(doc: CanvasDocument, node_id: str, outgoing: bool) -> None:
    if doc.find_node(node_id) is None:
        typer.echo(f"❌ Node {node_id} not found.")
        raise typer.Exit(code=1)

    found = get_output_nodes(doc, node_id) if outgoing else get_input_nodes(doc, node_id)
    if not found:
        typer.echo(f"No {'output' if outgoing else 'input'} nodes for {node_id}.")
        return
    for n in found:
        typer.echo(f"  {n.id}  [{n.type}]  {node_title(n)!r}")


@canvas_app.command("inputs")
def canvas_inputs(
    path: str = typer.Argument(..., help="Path to a .canvas file, or '-' for stdin."),
    node_id: str = typer.Argument(..., help="Node whose inputs to list."),
) -> None:
    """List the nodes that feed into a node."""
    _print_neighbours(_load_document(path), node_id, outgoing=False)


@canvas_app.command("outputs")
def canvas_outputs(
    path: str = typer.Argument(..., help="Path to a .canvas file, or '-' for stdin."),
    node_id: str = typer.Argument(..., help="Node whose outputs to list."),
) -> None:
    """List the nodes a node feeds into."""
    _print_neighbours(_load_document(path), node_id, outgoing=True)
