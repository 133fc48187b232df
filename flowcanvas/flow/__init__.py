"""Visual-editor graph models and the canvas converter.

Public re-exports so callers can write::

    from flowcanvas.flow import to_visual, to_persisted
"""

from flowcanvas.flow.converter import (
    DEFAULT_NODE_HEIGHT,
    DEFAULT_NODE_WIDTH,
    canvas_to_flow,
    flow_to_canvas,
    to_persisted,
    to_visual,
)
from flowcanvas.flow.models import VisualEdge, VisualGraph, VisualNode

__all__ = [
    "DEFAULT_NODE_HEIGHT",
    "DEFAULT_NODE_WIDTH",
    "VisualEdge",
    "VisualGraph",
    "VisualNode",
    "canvas_to_flow",
    "flow_to_canvas",
    "to_persisted",
    "to_visual",
]
