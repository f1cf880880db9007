"""
Pathfinder Core — Graph Search Backend
======================================

FastAPI entry point.
Start with:  uvicorn main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathfinder import config
from pathfinder.api.routes import router

# ── Logging ────────────────────────────────────────────────────────
logging.basicConfig(
    level=config.LOG_LEVEL,
    format=config.LOG_FORMAT,
)

# ── App ────────────────────────────────────────────────────────────
app = FastAPI(
    title=config.API_TITLE,
    description=(
        "Graph search backend.  Runs Dijkstra, A*, breadth-first and "
        "depth-first search on graphs posted as JSON and reports "
        "distances, every shortest path, and BFS level strata."
    ),
    version=config.API_VERSION,
)

# CORS — allow browser frontends to connect
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount all routes
app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": config.API_TITLE,
        "version": config.API_VERSION,
        "status": "running",
        "docs": "/docs",
    }
