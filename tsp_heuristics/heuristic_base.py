from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .tsp import City, close_tour, tour_length

logger = logging.getLogger(__name__)

@dataclass
class HeuristicConfig:
    initial_temperature: float = 1000.0  # annealing start temperature
    cooling_rate: float = 0.995          # multiplicative, per iteration
    min_temperature: float = 0.1         # annealing stops at or below this
    seed: Optional[int] = None           # used only when no rng is injected

@dataclass
class SolveResult:
    tour: List[int]
    length: float
    history_best_lengths: List[float] = field(default_factory=list, compare=False)
    elapsed_sec: float = field(default=0.0, compare=False)

    @property
    def open_tour(self) -> List[int]:
        return self.tour[:-1]

def rotate_to_start(order: Sequence[int], start: int = 0) -> List[int]:
    """Cyclic rotation of `order` so that it begins at `start`; length is unchanged."""
    k = list(order).index(start)
    return list(order[k:]) + list(order[:k])

class HeuristicBase:
    """Common driver: subclasses implement `_search` returning an open tour and its length."""
    name = "base"

    def __init__(self, cities: Sequence[City], cfg: Optional[HeuristicConfig] = None):
        self.cities = list(cities)
        self.n = len(self.cities)
        self.cfg = cfg or HeuristicConfig()
        self.history_best_lengths: List[float] = []
        self.history_best_tours: List[List[int]] = []

    def _tour_length(self, order: Sequence[int]) -> float:
        return tour_length(order, self.cities)

    def _search(self) -> Tuple[List[int], float]:
        raise NotImplementedError

    def run(self) -> SolveResult:
        start = time.time()
        self.history_best_lengths = []
        self.history_best_tours = []
        if self.n == 0:
            return SolveResult(tour=[], length=0.0, elapsed_sec=time.time() - start)

        order, length = self._search()
        if not self.history_best_lengths:
            self.history_best_lengths.append(length)
            self.history_best_tours.append(list(order))

        elapsed = time.time() - start
        logger.debug("%s: n=%d length=%.4f in %.4fs", self.name, self.n, length, elapsed)
        return SolveResult(tour=close_tour(order), length=length,
                           history_best_lengths=list(self.history_best_lengths), elapsed_sec=elapsed)
