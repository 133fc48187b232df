"""Dataclass models for the visual-editor graph.

This is the render-oriented shape a node editor keeps in memory: nodes carry
a ``position``, an optional ``measured`` size and a ``data`` payload; edges
carry ``source`` / ``target`` plus an optional ``label`` and ``data`` bag.

The node payload is a closed union keyed by the node ``type``:
:class:`TextNodeData` for text cards and :class:`OpaqueNodeData` for every
type the editor does not model yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Position:
    x: float | None
    y: float | None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in (("x", self.x), ("y", self.y)) if v is not None}


@dataclass
class Measured:
    width: float | None = None
    height: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            k: v
            for k, v in (("width", self.width), ("height", self.height))
            if v is not None
        }


@dataclass
class TextNodeData:
    text: str | None = None
    color: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> TextNodeData:
        return cls(
            text=raw.get("text"),
            color=raw.get("color"),
            extra={k: v for k, v in raw.items() if k not in ("text", "color")},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.text is not None:
            out["text"] = self.text
        if self.color is not None:
            out["color"] = self.color
        out.update(self.extra)
        return out


@dataclass
class OpaqueNodeData:
    """Payload for node types the editor does not model (file, link, group)."""

    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str | None:
        return self.fields.get("text")

    @property
    def color(self) -> str | None:
        return self.fields.get("color")

    def to_dict(self) -> dict[str, Any]:
        return dict(self.fields)


NodeData = Union[TextNodeData, OpaqueNodeData]


def node_data_from_dict(node_type: str, raw: dict[str, Any] | None) -> NodeData:
    """Pick the payload variant for *node_type*."""
    raw = raw or {}
    if node_type == "text":
        return TextNodeData.from_dict(raw)
    return OpaqueNodeData(fields=dict(raw))


@dataclass
class VisualNode:
    id: str
    type: str
    position: Position
    data: NodeData
    measured: Measured | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> VisualNode:
        position = raw.get("position") or {}
        measured = raw.get("measured")
        return cls(
            id=raw.get("id"),  # type: ignore[arg-type]
            type=raw.get("type"),  # type: ignore[arg-type]
            position=Position(x=position.get("x"), y=position.get("y")),
            data=node_data_from_dict(raw.get("type"), raw.get("data")),  # type: ignore[arg-type]
            measured=(
                Measured(width=measured.get("width"), height=measured.get("height"))
                if measured is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "position": self.position.to_dict(),
        }
        if self.measured is not None:
            out["measured"] = self.measured.to_dict()
        out["data"] = self.data.to_dict()
        return out


@dataclass
class VisualEdge:
    id: str
    source: str
    target: str
    label: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> VisualEdge:
        data = raw.get("data")
        return cls(
            id=raw.get("id"),  # type: ignore[arg-type]
            source=raw.get("source"),  # type: ignore[arg-type]
            target=raw.get("target"),  # type: ignore[arg-type]
            label=raw.get("label"),
            data=dict(data) if data is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "source": self.source, "target": self.target}
        if self.label is not None:
            out["label"] = self.label
        if self.data is not None:
            out["data"] = dict(self.data)
        return out


@dataclass
class VisualGraph:
    nodes: list[VisualNode] = field(default_factory=list)
    edges: list[VisualEdge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> VisualGraph:
        return cls(
            nodes=[VisualNode.from_dict(n) for n in raw.get("nodes") or []],
            edges=[VisualEdge.from_dict(e) for e in raw.get("edges") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
