"""Dataclass models for the persisted JSON Canvas document.

These mirror the JSON Canvas 1.0 file format (https://jsoncanvas.org/spec/1.0/).
Every optional key that is missing on read stays missing on write: a field
holding ``None`` is written back as ``null`` only when the key was read as an
explicit ``null`` (tracked in ``nulls``).  Keys the model does not name
(``file``, ``url``, ``fromSide`` ...) travel in ``extra`` and are written back verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_NODE_FIELDS = ("id", "type", "text", "x", "y", "width", "height", "color")
_EDGE_FIELDS = {
    "id": "id",
    "fromNode": "from_node",
    "toNode": "to_node",
    "label": "label",
    "color": "color",
}


@dataclass
class CanvasNode:
    id: str
    type: str
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    color: str | None = None
    text: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    nulls: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CanvasNode:
        return cls(
            id=raw.get("id"),  # type: ignore[arg-type]
            type=raw.get("type"),  # type: ignore[arg-type]
            x=raw.get("x"),
            y=raw.get("y"),
            width=raw.get("width"),
            height=raw.get("height"),
            color=raw.get("color"),
            text=raw.get("text"),
            extra={k: v for k, v in raw.items() if k not in _NODE_FIELDS},
            nulls=frozenset(k for k in _NODE_FIELDS if k in raw and raw[k] is None),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the on-disk key layout, omitting fields that were never set."""
        out: dict[str, Any] = {}
        for key in _NODE_FIELDS:
            value = getattr(self, key)
            if value is not None or key in self.nulls:
                out[key] = value
        out.update(self.extra)
        return out


@dataclass
class CanvasEdge:
    id: str
    from_node: str
    to_node: str
    label: str | None = None
    color: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    nulls: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CanvasEdge:
        kwargs = {attr: raw.get(key) for key, attr in _EDGE_FIELDS.items()}
        return cls(
            **kwargs,
            extra={k: v for k, v in raw.items() if k not in _EDGE_FIELDS},
            nulls=frozenset(k for k in _EDGE_FIELDS if k in raw and raw[k] is None),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, attr in _EDGE_FIELDS.items():
            value = getattr(self, attr)
            if value is not None or key in self.nulls:
                out[key] = value
        out.update(self.extra)
        return out


@dataclass
class CanvasDocument:
    nodes: list[CanvasNode] = field(default_factory=list)
    edges: list[CanvasEdge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> CanvasDocument:
        """Build a document; a missing or ``null`` container reads as empty."""
        return cls(
            nodes=[CanvasNode.from_dict(n) for n in raw.get("nodes") or []],
            edges=[CanvasEdge.from_dict(e) for e in raw.get("edges") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    def find_node(self, node_id: str) -> CanvasNode | None:
        """Return the first node with *node_id*, or ``None``."""
        return next((n for n in self.nodes if n.id == node_id), None)
