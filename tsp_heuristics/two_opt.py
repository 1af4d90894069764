from __future__ import annotations
import logging
from typing import List
from .heuristic_base import HeuristicBase
from .nearest_neighbor import nearest_neighbor_order

logger = logging.getLogger(__name__)

def two_opt_swap(tour: List[int], i: int, j: int) -> List[int]:
    """Copy of `tour` with positions i..j (inclusive) reversed."""
    return tour[:i] + tour[i:j + 1][::-1] + tour[j + 1:]

class TwoOpt(HeuristicBase):
    """First-improvement 2-opt seeded from the nearest-neighbour tour.

    Every candidate is scored by recomputing the full tour length, so a sweep
    costs O(n^3); fine for the few dozen cities this is meant for.
    """
    name = "two-opt"

    def _search(self):
        tour, _ = nearest_neighbor_order(self.cities)
        current = self._tour_length(tour)
        self.history_best_lengths.append(current)
        self.history_best_tours.append(list(tour))

        sweeps = 0
        improved = True
        while improved:
            improved = False
            sweeps += 1
            for i in range(1, len(tour) - 1):
                for j in range(i + 1, len(tour)):
                    candidate = two_opt_swap(tour, i, j)
                    cand_len = self._tour_length(candidate)
                    if cand_len < current:
                        tour, current = candidate, cand_len
                        improved = True
            self.history_best_lengths.append(current)
            self.history_best_tours.append(list(tour))

        logger.debug("two-opt converged after %d sweeps", sweeps)
        return tour, current
