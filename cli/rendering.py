"""Utilities for rendering canvas graphs in the CLI."""

from __future__ import annotations

from flowcanvas.canvas.models import CanvasDocument, CanvasEdge, CanvasNode


def node_title(node: CanvasNode) -> str:
    """Short display name for a node.

    Text cards use their first non-empty line with markdown heading marks
    stripped; other types fall back to their file / url / label.
    """
    if node.type == "text":
        for line in (node.text or "").splitlines():
            line = line.strip().lstrip("#").strip()
            if line:
                return line
        return "(empty)"
    for key in ("file", "url", "label"):
        if node.extra.get(key):
            return str(node.extra[key])
    return node.id


def render_list(doc: CanvasDocument) -> str:
    """Render nodes and edges as a flat list."""
    lines = [f"Nodes ({len(doc.nodes)}):"]
    for n in doc.nodes:
        color = f"  color={n.color}" if n.color is not None else ""
        lines.append(f"  {_get_icon(n.type)} [{n.type}] {node_title(n)} ({n.id}){color}")
    lines.append(f"Edges ({len(doc.edges)}):")
    for e in doc.edges:
        label = f"[{e.label}]" if e.label is not None else ""
        lines.append(f"  {e.from_node} --{label}--> {e.to_node} ({e.id})")
    return "\n".join(lines)


def render_tree(doc: CanvasDocument, root_id: str) -> str:
    """Render the graph reachable from *root_id* as an ASCII tree.

    Children are shown in edge order, prefixed with the edge label when it
    has one.  A node already printed is shown once more as a reference and
    not expanded again, which also stops cycles.
    """
    node_map = {n.id: n for n in doc.nodes}
    root = node_map.get(root_id)
    if root is None:
        return "Root node not found in canvas."

    adj: dict[str, list[CanvasEdge]] = {}
    for e in doc.edges:
        adj.setdefault(e.from_node, []).append(e)

    lines = [f"{_get_icon(root.type)} {node_title(root)}"]
    visited = {root_id}

    def _render_children(node_id: str, prefix: str) -> None:
        children = adj.get(node_id, [])
        count = len(children)
        for i, edge in enumerate(children):
            is_last = i == count - 1
            connector = "└── " if is_last else "├── "
            relation = f"[{edge.label}] " if edge.label else ""
            child = node_map.get(edge.to_node)

            if child is None:
                lines.append(f"{prefix}{connector}{relation}Unknown({edge.to_node})")
                continue
            if child.id in visited:
                lines.append(f"{prefix}{connector}{relation}↺ {node_title(child)}")
                continue

            visited.add(child.id)
            lines.append(f"{prefix}{connector}{relation}{_get_icon(child.type)} {node_title(child)}")
            _render_children(child.id, prefix + ("    " if is_last else "│   "))

    _render_children(root_id, "")
    return "\n".join(lines)


def _get_icon(node_type: str) -> str:
    icons = {
        "text": "📝",
        "file": "📄",
        "link": "🔗",
        "group": "📁",
    }
    return icons.get(node_type, "📦")
