"""Tests for the JSON text codec."""

from __future__ import annotations

import json

import pytest

from flowcanvas.canvas.codec import dumps_canvas, dumps_flow, loads_canvas, loads_flow
from flowcanvas.canvas.models import CanvasDocument, CanvasNode
from flowcanvas.errors import CanvasFormatError, FlowCanvasError


def test_loads_canvas() -> None:
    text = json.dumps(
        {"nodes": [{"id": "a", "type": "text", "text": "Hi", "x": 0, "y": 0, "width": 1, "height": 1}]}
    )
    doc = loads_canvas(text)
    assert [n.id for n in doc.nodes] == ["a"]
    assert doc.edges == []


def test_loads_canvas_invalid_json() -> None:
    with pytest.raises(CanvasFormatError, match="Invalid canvas JSON"):
        loads_canvas("{invalid-json")


def test_loads_canvas_rejects_non_object() -> None:
    with pytest.raises(CanvasFormatError, match="expected a JSON object"):
        loads_canvas("[1, 2, 3]")


def test_format_error_is_a_flowcanvas_error() -> None:
    with pytest.raises(FlowCanvasError):
        loads_flow("not json")


def test_dumps_canvas_tab_indent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("flowcanvas.config.settings.json_indent", "\t")
    text = dumps_canvas(CanvasDocument())
    assert text == '{\n\t"nodes": [],\n\t"edges": []\n}'


def test_dumps_canvas_configured_indent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("flowcanvas.config.settings.json_indent", 2)
    text = dumps_canvas(CanvasDocument())
    assert text == '{\n  "nodes": [],\n  "edges": []\n}'


def test_dumps_canvas_explicit_indent_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("flowcanvas.config.settings.json_indent", 2)
    assert dumps_canvas(CanvasDocument(), indent=4).startswith('{\n    "nodes"')


def test_dumps_canvas_keeps_unicode() -> None:
    doc = CanvasDocument(nodes=[CanvasNode(id="a", type="text", text="# 🤖 Agent", x=0, y=0)])
    assert "🤖" in dumps_canvas(doc)


def test_flow_text_round_trip() -> None:
    raw = {
        "nodes": [{"id": "a", "type": "text", "position": {"x": 1, "y": 2}, "data": {"text": "t"}}],
        "edges": [{"id": "e", "source": "a", "target": "a", "label": "self"}],
    }
    assert json.loads(dumps_flow(loads_flow(json.dumps(raw)))) == raw
