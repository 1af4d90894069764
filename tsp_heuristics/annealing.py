from __future__ import annotations
import logging
import math
import random
from typing import Optional, Sequence
from .heuristic_base import HeuristicBase, HeuristicConfig, rotate_to_start
from .nearest_neighbor import nearest_neighbor_order
from .tsp import City

logger = logging.getLogger(__name__)

class SimulatedAnnealing(HeuristicBase):
    """Swap-move annealing with Metropolis acceptance, seeded from nearest neighbour.

    The number of iterations depends only on the temperature schedule
    (about 1838 with the defaults), not on the number of cities. Pass `rng`
    (anything with `random()` and `randrange(n)`) to control the random source;
    otherwise a `random.Random(cfg.seed)` is created per instance.
    """
    name = "simulated-annealing"

    def __init__(self, cities: Sequence[City], cfg: Optional[HeuristicConfig] = None, rng=None):
        super().__init__(cities, cfg)
        if self.cfg.initial_temperature <= 0:
            raise ValueError("initial_temperature must be > 0.")
        if not 0.0 < self.cfg.cooling_rate < 1.0:
            raise ValueError("cooling_rate must be in (0, 1).")
        if self.cfg.min_temperature <= 0:
            raise ValueError("min_temperature must be > 0.")
        self.rng = rng if rng is not None else random.Random(self.cfg.seed)
        self.n_iterations = 0

    def _accept(self, current: float, candidate: float, temperature: float) -> bool:
        if candidate < current:
            return True
        return self.rng.random() < math.exp((current - candidate) / temperature)

    def _search(self):
        current_tour, _ = nearest_neighbor_order(self.cities)
        current = self._tour_length(current_tour)
        best_tour, best = list(current_tour), current

        temperature = self.cfg.initial_temperature
        self.n_iterations = 0
        n = len(current_tour)
        while temperature > self.cfg.min_temperature:
            i = self.rng.randrange(n)
            j = self.rng.randrange(n)
            candidate = list(current_tour)
            candidate[i], candidate[j] = candidate[j], candidate[i]
            cand_len = self._tour_length(candidate)

            if self._accept(current, cand_len, temperature):
                current_tour, current = candidate, cand_len
                if cand_len < best:
                    best_tour, best = list(candidate), cand_len

            temperature *= self.cfg.cooling_rate
            self.n_iterations += 1
            self.history_best_lengths.append(best)
            self.history_best_tours.append(best_tour)

        logger.debug("annealing: %d iterations, best=%.4f", self.n_iterations, best)
        # swaps can move city 0 away from the front
        return rotate_to_start(best_tour, 0), best
