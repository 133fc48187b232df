"""JSON text codec for canvas documents and visual-editor graphs."""

from __future__ import annotations

import json
import logging
from typing import Any

from flowcanvas.canvas.models import CanvasDocument
from flowcanvas.config import settings
from flowcanvas.errors import CanvasFormatError
from flowcanvas.flow.models import VisualGraph

logger = logging.getLogger(__name__)


def _load_object(text: str, what: str) -> dict[str, Any]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Error parsing %s: %s", what, exc)
        raise CanvasFormatError(f"Invalid {what} JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise CanvasFormatError(
            f"Invalid {what}: expected a JSON object, got {type(raw).__name__}"
        )
    return raw


def _dump(raw: dict[str, Any], indent: str | int | None) -> str:
    return json.dumps(
        raw,
        indent=settings.json_indent if indent is None else indent,
        ensure_ascii=False,
    )


def loads_canvas(text: str) -> CanvasDocument:
    """Parse ``.canvas`` file contents.

    Raises:
        CanvasFormatError: if *text* is not JSON or not a JSON object.
    """
    return CanvasDocument.from_dict(_load_object(text, "canvas"))


def dumps_canvas(document: CanvasDocument, indent: str | int | None = None) -> str:
    """Serialise a canvas document (tab-indented unless configured otherwise)."""
    return _dump(document.to_dict(), indent)


def loads_flow(text: str) -> VisualGraph:
    """Parse a visual-editor graph (``{"nodes": [...], "edges": [...]}``)."""
    return VisualGraph.from_dict(_load_object(text, "flow graph"))


def dumps_flow(graph: VisualGraph, indent: str | int | None = None) -> str:
    return _dump(graph.to_dict(), indent)
