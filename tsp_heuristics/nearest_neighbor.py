from __future__ import annotations
from typing import List, Sequence, Tuple
from .heuristic_base import HeuristicBase
from .tsp import City, distance

def nearest_neighbor_order(cities: Sequence[City]) -> Tuple[List[int], float]:
    """Open nearest-neighbour tour from city 0 and its closed length.

    Ties go to the lowest index. The returned length is the running sum of the
    chosen edges plus the edge back to city 0.
    """
    n = len(cities)
    if n == 0:
        return [], 0.0
    tour = [0]
    visited = {0}
    current = 0
    total = 0.0
    for _ in range(1, n):
        nxt, best = None, None
        for j in range(n):
            if j in visited:
                continue
            d = distance(cities[current], cities[j])
            if nxt is None or d < best:
                nxt, best = j, d
        tour.append(nxt)
        visited.add(nxt)
        total += best
        current = nxt
    total += distance(cities[current], cities[0])
    return tour, total

class NearestNeighbor(HeuristicBase):
    """Repeatedly move to the closest unvisited city. Deterministic, O(n^2)."""
    name = "nearest-neighbor"

    def _search(self):
        return nearest_neighbor_order(self.cities)
