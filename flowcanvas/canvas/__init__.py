"""JSON Canvas document layer.

Public re-exports so callers can write::

    from flowcanvas.canvas import CanvasDocument, loads_canvas, dumps_canvas
"""

from flowcanvas.canvas.models import CanvasDocument, CanvasEdge, CanvasNode
from flowcanvas.canvas.codec import dumps_canvas, dumps_flow, loads_canvas, loads_flow

__all__ = [
    "CanvasDocument",
    "CanvasEdge",
    "CanvasNode",
    "dumps_canvas",
    "dumps_flow",
    "loads_canvas",
    "loads_flow",
]
