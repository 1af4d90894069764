from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

@dataclass(frozen=True)
class City:
    id: int
    x: float
    y: float

def distance(a: City, b: City) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)

def tour_length(order: Sequence[int], cities: Sequence[City]) -> float:
    """Length of the open tour `order`, including the edge back to its first city."""
    if not order:
        return 0.0
    dist = 0.0
    for k in range(len(order) - 1):
        dist += distance(cities[order[k]], cities[order[k + 1]])
    dist += distance(cities[order[-1]], cities[order[0]])
    return dist

def close_tour(order: Sequence[int]) -> List[int]:
    if not order:
        return []
    return list(order) + [order[0]]

def _to_float(s: str) -> float:
    try:
        v = float(s)
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(v) else v

def parse_cities(text: str) -> List[City]:
    """One "x, y" per line. Blank lines are skipped, unparsable values become 0."""
    lines = [ln for ln in text.strip().splitlines() if ln.strip()]
    cities = []
    for i, line in enumerate(lines):
        parts = [p.strip() for p in line.split(",")]
        x = _to_float(parts[0])
        y = _to_float(parts[1]) if len(parts) > 1 else 0.0
        cities.append(City(id=i, x=x, y=y))
    return cities

@dataclass
class TSPInstance:
    cities: List[City] = field(default_factory=list)
    name: str = "euclidean_tsp"

    @staticmethod
    def from_coords(coords, name: str = "euclidean_tsp"):
        return TSPInstance(cities=[City(id=i, x=float(x), y=float(y)) for i, (x, y) in enumerate(coords)], name=name)

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, square_size: float = 100.0, name: str = "random_euclidean"):
        rng = random.Random(seed)
        coords = [(rng.uniform(0, square_size), rng.uniform(0, square_size)) for _ in range(n)]
        return TSPInstance.from_coords(coords, name=name)

    @property
    def coords(self):
        return [(c.x, c.y) for c in self.cities]

    def n_cities(self) -> int:
        return len(self.cities)

    def distance(self, i: int, j: int) -> float:
        return distance(self.cities[i], self.cities[j])

    def tour_length(self, tour: Sequence[int]) -> float:
        return tour_length(tour, self.cities)
