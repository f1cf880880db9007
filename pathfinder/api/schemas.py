"""
Pydantic schemas for the FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathfinder import config


# ── Graph payload ──────────────────────────────────────────────────

class NodeInput(BaseModel):
    """A node; coordinates are only needed for position-based heuristics."""

    id: str
    x: float | None = None
    y: float | None = None


class EdgeInput(BaseModel):
    source: str
    target: str
    cost: float | None = Field(default=None, ge=0, description="Defaults to 1")


class GraphInput(BaseModel):
    """An explicit graph."""

    nodes: list[NodeInput] = Field(..., description="Nodes array")
    edges: list[EdgeInput] = Field(..., description="Edges array")
    directed: bool = Field(default=True, description="Treat edges as one-way")

    def to_graph_json(self) -> dict:
        return {
            "directed": self.directed,
            "nodes": [n.model_dump() for n in self.nodes],
            "edges": [e.model_dump() for e in self.edges],
        }


# ── Search ─────────────────────────────────────────────────────────

class SearchInput(GraphInput):
    """Search request: graph + algorithm + start/goal."""

    start: str
    goal: str | None = Field(
        default=None, description="Omit to explore every reachable node"
    )
    algorithm: str = Field(default=config.DEFAULT_ALGORITHM)
    heuristic: str = Field(
        default=config.DEFAULT_HEURISTIC,
        description="zero, manhattan, euclidean or chebyshev",
    )
    limit_steps: int | None = Field(default=None, ge=0, description="A* expansion cap")


class SearchResultOutput(BaseModel):
    """Result of a search."""

    algorithm: str
    success: bool
    solutions: list[str]
    distance: float | None
    distances: dict[str, float]
    paths: list[list[str]]
    node_count: int
    edge_count: int


# ── Traversal ──────────────────────────────────────────────────────

class TraverseInput(GraphInput):
    start: str


class TraverseLevel(BaseModel):
    """One stratum of the acyclic traversal."""

    level: int
    nodes: list[str]
    previous: list[str]
