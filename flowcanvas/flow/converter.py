"""Bidirectional converter between JSON Canvas documents and the visual-editor graph.

Both directions are pure: they read only their arguments, never mutate them
and always build fresh output objects.  Node and edge ids are copied, never
generated, and sequence order is kept as given.

Asymmetries between the two formats are resolved in one place each:

* ``measured`` is only set on the way in when the canvas node has a truthy
  width *and* height; on the way out a missing dimension falls back to
  :data:`DEFAULT_NODE_WIDTH` / :data:`DEFAULT_NODE_HEIGHT`.
* ``file``, ``link`` and ``group`` nodes are not modelled by the editor yet,
  so their whole canvas record is copied into ``data``.
* Every node is saved back as a ``text`` node.
* An empty ``label`` or ``color`` is treated as missing and never written.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from flowcanvas.canvas.models import CanvasDocument, CanvasEdge, CanvasNode
from flowcanvas.flow.models import (
    Measured,
    OpaqueNodeData,
    Position,
    TextNodeData,
    VisualEdge,
    VisualGraph,
    VisualNode,
)

logger = logging.getLogger(__name__)

# Dimensions used when the editor has not measured a node.
DEFAULT_NODE_WIDTH = 250
DEFAULT_NODE_HEIGHT = 60


def _present(value: Any) -> Any:
    """Empty labels and colours count as unset, in both directions."""
    return value or None


# ---------------------------------------------------------------------------
# Canvas -> visual editor
# ---------------------------------------------------------------------------

def _node_to_visual(node: CanvasNode) -> VisualNode:
    measured = None
    if node.width and node.height:
        measured = Measured(width=node.width, height=node.height)

    if node.type == "text":
        data: TextNodeData | OpaqueNodeData = TextNodeData(
            text=node.text, color=_present(node.color)
        )
    else:
        data = OpaqueNodeData(fields=node.to_dict())

    return VisualNode(
        id=node.id,
        type=node.type,
        position=Position(x=node.x, y=node.y),
        data=data,
        measured=measured,
    )


def _edge_to_visual(edge: CanvasEdge) -> VisualEdge:
    return VisualEdge(
        id=edge.id,
        source=edge.from_node,
        target=edge.to_node,
        label=_present(edge.label),
        data={"color": edge.color} if edge.color else None,
    )


def to_visual(document: CanvasDocument) -> VisualGraph:
    """Convert a canvas document into visual-editor nodes and edges.

    Never raises on missing optional fields; ``file`` / ``link`` / ``group``
    nodes are passed through whole in ``data``.
    """
    graph = VisualGraph(
        nodes=[_node_to_visual(n) for n in document.nodes],
        edges=[_edge_to_visual(e) for e in document.edges],
    )
    logger.debug(
        "Converted canvas to visual graph: %d nodes, %d edges",
        len(graph.nodes),
        len(graph.edges),
    )
    return graph


# ---------------------------------------------------------------------------
# Visual editor -> canvas
# ---------------------------------------------------------------------------

def _node_to_canvas(node: VisualNode) -> CanvasNode:
    measured = node.measured
    width = measured.width if measured and measured.width is not None else DEFAULT_NODE_WIDTH
    height = measured.height if measured and measured.height is not None else DEFAULT_NODE_HEIGHT

    if node.type != "text":
        # Only text cards are written back; the original type is lost here.
        logger.warning("Saving node %s of type %r as a text node", node.id, node.type)

    text = node.data.text
    return CanvasNode(
        id=node.id,
        type="text",
        text=text if text is not None else "",
        x=node.position.x,
        y=node.position.y,
        width=width,
        height=height,
        color=_present(node.data.color),
    )


def _edge_to_canvas(edge: VisualEdge) -> CanvasEdge:
    data = edge.data or {}
    return CanvasEdge(
        id=edge.id,
        from_node=edge.source,
        to_node=edge.target,
        label=_present(edge.label),
        color=_present(data.get("color")),
    )


def to_persisted(nodes: Iterable[VisualNode], edges: Iterable[VisualEdge]) -> CanvasDocument:
    """Convert visual-editor nodes and edges back into a canvas document.

    Nodes without a measured size get the 250x60 default; ``color`` and
    ``label`` are only written when the editor carries them.
    """
    document = CanvasDocument(
        nodes=[_node_to_canvas(n) for n in nodes],
        edges=[_edge_to_canvas(e) for e in edges],
    )
    logger.debug(
        "Converted visual graph to canvas: %d nodes, %d edges",
        len(document.nodes),
        len(document.edges),
    )
    return document


# ---------------------------------------------------------------------------
# Plain-dict wrappers
# ---------------------------------------------------------------------------

def canvas_to_flow(raw: dict[str, Any]) -> dict[str, Any]:
    """Dict-in, dict-out form of :func:`to_visual`."""
    return to_visual(CanvasDocument.from_dict(raw)).to_dict()


def flow_to_canvas(raw: dict[str, Any]) -> dict[str, Any]:
    """Dict-in, dict-out form of :func:`to_persisted`."""
    graph = VisualGraph.from_dict(raw)
    return to_persisted(graph.nodes, graph.edges).to_dict()
