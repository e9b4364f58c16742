"""Shared data models for tree layout."""

from dataclasses import dataclass, field
from typing import Optional

from itombs.models import RelativeRecord

ROOT_ID = "root"


def node_id_for(record: RelativeRecord) -> str:
    """Graph node id for a stored relative."""
    return f"node-{record.id}"


@dataclass(frozen=True)
class GraphNode:
    """Positioned node in the tree diagram."""
    id: str
    name: str
    x: float
    y: float
    is_root: bool = False
    record: Optional[RelativeRecord] = None

    @property
    def clickable(self) -> bool:
        """The synthetic root (no backing record) has no details to open."""
        return self.record is not None


@dataclass(frozen=True)
class GraphEdge:
    """Edge from the root to a relative."""
    source: str
    target: str
    relationship: str


@dataclass
class TreeLayout:
    """Result of a layout pass."""
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    skipped: list[RelativeRecord] = field(default_factory=list)

    @property
    def root(self) -> GraphNode:
        return self.nodes[0]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None
