"""In-memory editing of multi-agent workflow canvases.

A workflow canvas is an ordinary JSON Canvas document whose text cards stand
for agents, AI processing steps and output slots, wired together by edges.
Every function here takes a :class:`CanvasDocument` and returns a new one;
the input document is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from flowcanvas.canvas.models import CanvasDocument, CanvasEdge, CanvasNode
from flowcanvas.errors import NodeNotFoundError

Point = tuple[float, float]

DEFAULT_ASSISTANT_ID = "default-assistant"
DEFAULT_ASSISTANT_PROMPT = (
    "You are a friendly and thoughtful journaling assistant.\n"
    "Offer concise observations or questions (2-3 sentences). Be warm but not verbose.\n"
    "Focus on: training and exercise, personal growth, how the user unwinds,\n"
    "and patterns between today and previous days."
)

# First matching keyword wins; "4" (green) when nothing matches.
_ROLE_COLORS: list[tuple[tuple[str, ...], str]] = [
    (("coordinator", "manager"), "1"),
    (("research", "analyst"), "5"),
    (("writer", "editor"), "3"),
    (("critic", "reviewer"), "2"),
    (("specialist", "expert"), "6"),
]


@dataclass
class AgentCard:
    id: str
    name: str
    role: str
    system_prompt: str


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _copy(doc: CanvasDocument, nodes: Optional[list[CanvasNode]] = None) -> CanvasDocument:
    return CanvasDocument(
        nodes=list(doc.nodes) if nodes is None else nodes,
        edges=list(doc.edges),
    )


def _index_of(doc: CanvasDocument, node_id: str) -> int:
    return next((i for i, n in enumerate(doc.nodes) if n.id == node_id), -1)


def _append(doc: CanvasDocument, node: CanvasNode) -> CanvasDocument:
    return _copy(doc, nodes=[*doc.nodes, node])


# ---------------------------------------------------------------------------
# Agent cards
# ---------------------------------------------------------------------------

def agent_color(role: str) -> str:
    """Map an agent role to a preset canvas colour."""
    lower_role = role.lower()
    for keywords, color in _ROLE_COLORS:
        if any(k in lower_role for k in keywords):
            return color
    return "4"


def agent_card_text(agent: AgentCard) -> str:
    return (
        f"# {agent.name}\n\n**Role:** {agent.role}\n\n"
        f"**System Prompt:**\n{agent.system_prompt}"
    )


def add_agent_node(
    doc: CanvasDocument,
    agent: AgentCard,
    position: Optional[Point] = None,
) -> CanvasDocument:
    """Append a card for *agent*.

    Without an explicit *position* cards are laid out left to right, 250 units
    apart.
    """
    x, y = position if position is not None else (100 + len(doc.nodes) * 250, 100)
    node = CanvasNode(
        id=agent.id,
        type="text",
        text=agent_card_text(agent),
        x=x,
        y=y,
        width=300,
        height=200,
        color=agent_color(agent.role),
    )
    return _append(doc, node)


def update_agent_node(doc: CanvasDocument, agent: AgentCard) -> CanvasDocument:
    """Refresh the text and colour of *agent*'s card, adding it if missing."""
    index = _index_of(doc, agent.id)
    if index == -1:
        return add_agent_node(doc, agent)

    nodes = list(doc.nodes)
    nodes[index] = replace(
        nodes[index],
        type="text",
        text=agent_card_text(agent),
        color=agent_color(agent.role),
    )
    return _copy(doc, nodes=nodes)


def add_default_assistant(
    doc: CanvasDocument,
    position: Optional[Point] = None,
) -> CanvasDocument:
    """Add the default assistant card, replacing it in place if already present."""
    x, y = position if position is not None else (100, 100)
    assistant = CanvasNode(
        id=DEFAULT_ASSISTANT_ID,
        type="text",
        text=(
            "# Default Assistant\n\n**Role:** general\n\n"
            f"**System Prompt:**\n{DEFAULT_ASSISTANT_PROMPT}"
        ),
        x=x,
        y=y,
        width=400,
        height=250,
        color="4",
    )

    index = _index_of(doc, DEFAULT_ASSISTANT_ID)
    if index == -1:
        return _append(doc, assistant)
    nodes = list(doc.nodes)
    nodes[index] = assistant
    return _copy(doc, nodes=nodes)


# ---------------------------------------------------------------------------
# Processing / output cards
# ---------------------------------------------------------------------------

def add_processing_node(
    doc: CanvasDocument,
    node_id: str,
    title: str,
    instruction: str,
    position: Optional[Point] = None,
) -> CanvasDocument:
    """Append an AI processing card that takes inputs and produces outputs."""
    x, y = position if position is not None else (300, 100)
    node = CanvasNode(
        id=node_id,
        type="text",
        text=(
            f"# 🤖 {title}\n\n**AI Processing Node**\n\n{instruction}\n\n---\n\n"
            "*Connect input nodes to this node, then connect this node to output nodes*"
        ),
        x=x,
        y=y,
        width=350,
        height=200,
        color="6",
    )
    return _append(doc, node)


def add_output_node(
    doc: CanvasDocument,
    node_id: str,
    title: str,
    position: Optional[Point] = None,
) -> CanvasDocument:
    """Append an empty output card waiting for a processing result."""
    x, y = position if position is not None else (600, 100)
    node = CanvasNode(
        id=node_id,
        type="text",
        text=f"# {title}\n\n*Waiting for AI processing...*",
        x=x,
        y=y,
        width=350,
        height=300,
        color="3",
    )
    return _append(doc, node)


def update_output_node(doc: CanvasDocument, node_id: str, content: str) -> CanvasDocument:
    """Replace the text of an output card.

    Raises:
        NodeNotFoundError: if no node has *node_id*.
    """
    index = _index_of(doc, node_id)
    if index == -1:
        raise NodeNotFoundError(node_id)
    nodes = list(doc.nodes)
    nodes[index] = replace(nodes[index], text=content)
    return _copy(doc, nodes=nodes)


# ---------------------------------------------------------------------------
# Graph structure
# ---------------------------------------------------------------------------

def remove_node(doc: CanvasDocument, node_id: str) -> CanvasDocument:
    """Drop a node together with every edge that starts or ends at it."""
    return CanvasDocument(
        nodes=[n for n in doc.nodes if n.id != node_id],
        edges=[e for e in doc.edges if e.from_node != node_id and e.to_node != node_id],
    )


def add_connection(
    doc: CanvasDocument,
    from_id: str,
    to_id: str,
    label: Optional[str] = None,
) -> CanvasDocument:
    """Append a green edge ``edge-<from>-<to>`` between two nodes."""
    edge = CanvasEdge(
        id=f"edge-{from_id}-{to_id}",
        from_node=from_id,
        to_node=to_id,
        label=label,
        color="4",
    )
    return CanvasDocument(nodes=list(doc.nodes), edges=[*doc.edges, edge])


def get_node_content(doc: CanvasDocument, node_id: str) -> Optional[str]:
    """Return the text of a text node, ``None`` for other types or unknown ids."""
    node = doc.find_node(node_id)
    if node is None or node.type != "text":
        return None
    return node.text


def get_input_nodes(doc: CanvasDocument, node_id: str) -> list[CanvasNode]:
    """Nodes with an edge pointing *to* ``node_id``, in edge order."""
    found = (doc.find_node(e.from_node) for e in doc.edges if e.to_node == node_id)
    return [n for n in found if n is not None]


def get_output_nodes(doc: CanvasDocument, node_id: str) -> list[CanvasNode]:
    """Nodes that ``node_id`` has an edge pointing to, in edge order."""
    found = (doc.find_node(e.to_node) for e in doc.edges if e.from_node == node_id)
    return [n for n in found if n is not None]
