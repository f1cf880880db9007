"""
Configuration constants for Pathfinder Core.

Tunable settings are defined here; a few can be overridden through
environment variables.
"""

import os

# =============================================================================
# Service
# =============================================================================

API_TITLE = "Pathfinder Core"
API_VERSION = "0.1.0"

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("PATHFINDER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# =============================================================================
# Search defaults
# =============================================================================

# Algorithm used when a request does not name one
DEFAULT_ALGORITHM = os.environ.get("PATHFINDER_DEFAULT_ALGORITHM", "dijkstra")

# A* cost estimation used when a request does not name one (0 = Dijkstra)
DEFAULT_HEURISTIC = "zero"

# Cost of an edge that carries no explicit cost
DEFAULT_EDGE_COST = 1

# Expansion cap for A* requests without their own limit; unset = unlimited
_astar_max_steps = os.environ.get("PATHFINDER_ASTAR_MAX_STEPS")
ASTAR_MAX_STEPS = int(_astar_max_steps) if _astar_max_steps else None

# Upper bound on strata returned by the traversal endpoint; the two-level
# exclusion of the acyclic traversal does not end on every cyclic graph
MAX_TRAVERSE_LEVELS = int(os.environ.get("PATHFINDER_MAX_TRAVERSE_LEVELS", "1000"))
