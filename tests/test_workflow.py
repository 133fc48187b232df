"""Tests for in-memory workflow canvas editing."""

from __future__ import annotations

import pytest

from flowcanvas.canvas.models import CanvasDocument, CanvasEdge, CanvasNode
from flowcanvas.canvas.workflow import (
    DEFAULT_ASSISTANT_ID,
    AgentCard,
    add_agent_node,
    add_connection,
    add_default_assistant,
    add_output_node,
    add_processing_node,
    agent_card_text,
    agent_color,
    get_input_nodes,
    get_node_content,
    get_output_nodes,
    remove_node,
    update_agent_node,
    update_output_node,
)
from flowcanvas.errors import NodeNotFoundError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def researcher() -> AgentCard:
    return AgentCard(
        id="agent-r",
        name="Researcher",
        role="Research Analyst",
        system_prompt="Find sources.",
    )


@pytest.fixture()
def pipeline() -> CanvasDocument:
    """in-a, in-b -> proc -> out, plus a file node and a dangling edge."""
    return CanvasDocument(
        nodes=[
            CanvasNode(id="in-a", type="text", text="A", x=0, y=0, width=10, height=10),
            CanvasNode(id="in-b", type="text", text="B", x=0, y=50, width=10, height=10),
            CanvasNode(id="proc", type="text", text="P", x=100, y=0, width=10, height=10),
            CanvasNode(id="out", type="text", text="O", x=200, y=0, width=10, height=10),
            CanvasNode(id="doc", type="file", x=0, y=100, width=10, height=10, extra={"file": "a.md"}),
        ],
        edges=[
            CanvasEdge(id="e1", from_node="in-b", to_node="proc"),
            CanvasEdge(id="e2", from_node="in-a", to_node="proc"),
            CanvasEdge(id="e3", from_node="ghost", to_node="proc"),
            CanvasEdge(id="e4", from_node="proc", to_node="out"),
        ],
    )


# ---------------------------------------------------------------------------
# Agent cards
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("role", "color"),
    [
        ("Coordinator", "1"),
        ("project manager", "1"),
        ("Research Analyst", "5"),
        ("Copy Editor", "3"),
        ("critic", "2"),
        ("Domain Expert", "6"),
        ("general", "4"),
    ],
)
def test_agent_color(role: str, color: str) -> None:
    assert agent_color(role) == color


def test_agent_card_text(researcher: AgentCard) -> None:
    assert agent_card_text(researcher) == (
        "# Researcher\n\n**Role:** Research Analyst\n\n**System Prompt:**\nFind sources."
    )


def test_add_agent_node_default_layout(pipeline: CanvasDocument, researcher: AgentCard) -> None:
    doc = add_agent_node(pipeline, researcher)
    node = doc.nodes[-1]
    assert (node.x, node.y) == (100 + 5 * 250, 100)
    assert (node.width, node.height) == (300, 200)
    assert node.color == "5"
    assert len(pipeline.nodes) == 5


def test_add_agent_node_explicit_position(researcher: AgentCard) -> None:
    node = add_agent_node(CanvasDocument(), researcher, position=(7, -3)).nodes[0]
    assert (node.x, node.y) == (7, -3)


def test_update_agent_node_keeps_geometry(researcher: AgentCard) -> None:
    doc = add_agent_node(CanvasDocument(), researcher, position=(40, 50))
    renamed = AgentCard(id=researcher.id, name="Reviewer", role="reviewer", system_prompt="Check.")

    updated = update_agent_node(doc, renamed)

    node = updated.nodes[0]
    assert len(updated.nodes) == 1
    assert (node.x, node.y, node.width, node.height) == (40, 50, 300, 200)
    assert node.text.startswith("# Reviewer")
    assert node.color == "2"
    assert doc.nodes[0].text.startswith("# Researcher")


def test_update_agent_node_adds_missing(researcher: AgentCard) -> None:
    doc = update_agent_node(CanvasDocument(), researcher)
    assert [n.id for n in doc.nodes] == [researcher.id]


def test_add_default_assistant_replaces_in_place() -> None:
    doc = add_default_assistant(CanvasDocument())
    doc = add_processing_node(doc, "p", "Summarizer", "Summarise inputs.")
    doc = add_default_assistant(doc, position=(0, 0))

    assert [n.id for n in doc.nodes] == [DEFAULT_ASSISTANT_ID, "p"]
    assistant = doc.nodes[0]
    assert (assistant.x, assistant.y, assistant.width, assistant.height) == (0, 0, 400, 250)
    assert assistant.color == "4"
    assert assistant.text.startswith("# Default Assistant")


# ---------------------------------------------------------------------------
# Processing / output cards
# ---------------------------------------------------------------------------

def test_add_processing_node() -> None:
    node = add_processing_node(CanvasDocument(), "p1", "Summarizer", "Summarise.").nodes[0]
    assert (node.x, node.y, node.width, node.height, node.color) == (300, 100, 350, 200, "6")
    assert node.text.startswith("# 🤖 Summarizer\n\n**AI Processing Node**\n\nSummarise.")


def test_add_output_node() -> None:
    node = add_output_node(CanvasDocument(), "o1", "Result").nodes[0]
    assert (node.x, node.y, node.width, node.height, node.color) == (600, 100, 350, 300, "3")
    assert node.text == "# Result\n\n*Waiting for AI processing...*"


def test_update_output_node(pipeline: CanvasDocument) -> None:
    doc = update_output_node(pipeline, "out", "Done.")
    assert get_node_content(doc, "out") == "Done."
    assert get_node_content(pipeline, "out") == "O"


def test_update_output_node_missing(pipeline: CanvasDocument) -> None:
    with pytest.raises(NodeNotFoundError, match="nope"):
        update_output_node(pipeline, "nope", "x")


# ---------------------------------------------------------------------------
# Graph structure
# ---------------------------------------------------------------------------

def test_remove_node_drops_touching_edges(pipeline: CanvasDocument) -> None:
    doc = remove_node(pipeline, "proc")
    assert "proc" not in [n.id for n in doc.nodes]
    assert doc.edges == []
    assert len(pipeline.edges) == 4


def test_add_connection(pipeline: CanvasDocument) -> None:
    doc = add_connection(pipeline, "out", "in-a")
    edge = doc.edges[-1]
    assert edge.to_dict() == {"id": "edge-out-in-a", "fromNode": "out", "toNode": "in-a", "color": "4"}
    assert len(pipeline.edges) == 4


def test_add_connection_with_label() -> None:
    edge = add_connection(CanvasDocument(), "a", "b", label="feeds").edges[0]
    assert edge.label == "feeds"


def test_get_node_content(pipeline: CanvasDocument) -> None:
    assert get_node_content(pipeline, "in-a") == "A"
    assert get_node_content(pipeline, "doc") is None
    assert get_node_content(pipeline, "missing") is None


def test_get_input_nodes_in_edge_order(pipeline: CanvasDocument) -> None:
    assert [n.id for n in get_input_nodes(pipeline, "proc")] == ["in-b", "in-a"]
    assert get_input_nodes(pipeline, "in-a") == []


def test_get_output_nodes(pipeline: CanvasDocument) -> None:
    assert [n.id for n in get_output_nodes(pipeline, "proc")] == ["out"]
    assert get_output_nodes(pipeline, "out") == []
