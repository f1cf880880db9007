"""
FastAPI routes for the Pathfinder Core backend.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from pathfinder.api.schemas import (
    SearchInput,
    SearchResultOutput,
    TraverseInput,
    TraverseLevel,
)
from pathfinder.engine.search_engine import SearchEngine
from pathfinder.solver.registry import list_solvers

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Shared instances ───────────────────────────────────────────────
# The engine holds no per-request state; every search builds its own graph.

engine = SearchEngine()


# ── Algorithms ─────────────────────────────────────────────────────

@router.get("/algorithms")
async def get_algorithms() -> dict[str, list[str]]:
    """List the registered search algorithms."""
    return {"algorithms": list_solvers()}


# ── Search ─────────────────────────────────────────────────────────

@router.post("/search", response_model=SearchResultOutput)
async def search_graph(payload: SearchInput) -> SearchResultOutput:
    """
    Search an explicit graph from a start node.
    An unreachable goal is a normal result with ``success = false``.
    """
    try:
        result = engine.run(
            payload.to_graph_json(),
            start=payload.start,
            goal=payload.goal,
            algorithm=payload.algorithm,
            heuristic=payload.heuristic,
            limit_steps=payload.limit_steps,
        )
        return SearchResultOutput(**result)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except Exception as exc:
        logger.exception("Search failed")
        raise HTTPException(status_code=400, detail=str(exc))


# ── Traversal ──────────────────────────────────────────────────────

@router.post("/traverse", response_model=list[TraverseLevel])
async def traverse_graph(payload: TraverseInput) -> list[TraverseLevel]:
    """
    Return the graph stratified into BFS levels from the start node.
    """
    try:
        levels = engine.traverse(payload.to_graph_json(), start=payload.start)
        return [TraverseLevel(**level) for level in levels]
    except Exception as exc:
        logger.exception("Traversal failed")
        raise HTTPException(status_code=400, detail=str(exc))
