"""Exception types raised by flowcanvas.

The converter itself never raises for loosely-shaped input; these cover the
text codec and the workflow editing helpers.
"""

from __future__ import annotations


class FlowCanvasError(Exception):
    """Base class for every error raised by this package."""


class CanvasFormatError(FlowCanvasError):
    """Raised when JSON text cannot be read as a canvas or flow graph."""


class NodeNotFoundError(FlowCanvasError):
    """Raised when a workflow edit targets a node that is not in the document."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node {node_id} not found")
        self.node_id = node_id
