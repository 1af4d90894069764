from __future__ import annotations
from .nearest_neighbor import NearestNeighbor

class GreedyHeuristic(NearestNeighbor):
    """Named greedy strategy. Currently the nearest-neighbour construction.

    Kept as its own class so a greedy-edge construction (sort all edges, add the
    shortest ones that keep degrees <= 2 and close no early cycle) can replace
    `_search` without touching the dispatcher.
    """
    name = "greedy"
