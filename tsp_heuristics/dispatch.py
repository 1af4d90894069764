from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union
from .annealing import SimulatedAnnealing
from .greedy import GreedyHeuristic
from .heuristic_base import HeuristicConfig, SolveResult
from .nearest_neighbor import NearestNeighbor
from .tsp import City
from .two_opt import TwoOpt

logger = logging.getLogger(__name__)

class MethodId(str, Enum):
    NEAREST_NEIGHBOR = "nearest-neighbor"
    TWO_OPT = "two-opt"
    SIMULATED_ANNEALING = "simulated-annealing"
    GREEDY = "greedy"

ALGO_MAP = {
    MethodId.NEAREST_NEIGHBOR: NearestNeighbor,
    MethodId.TWO_OPT: TwoOpt,
    MethodId.SIMULATED_ANNEALING: SimulatedAnnealing,
    MethodId.GREEDY: GreedyHeuristic,
}

# the only methods whose result depends on the random source
STOCHASTIC_METHODS = frozenset({MethodId.SIMULATED_ANNEALING})

# tags used by the web form
_ALIASES: Dict[str, MethodId] = {
    "nearestneighbor": MethodId.NEAREST_NEIGHBOR,
    "twoopt": MethodId.TWO_OPT,
    "simulatedannealing": MethodId.SIMULATED_ANNEALING,
    "greedyheuristic": MethodId.GREEDY,
}

_DESCRIPTIONS = {
    MethodId.NEAREST_NEIGHBOR: "Nearest Neighbor: Starts at a city and repeatedly visits the nearest unvisited city.",
    MethodId.TWO_OPT: "2-Opt: Improves an initial solution by swapping edges to reduce tour length.",
    MethodId.SIMULATED_ANNEALING: "Simulated Annealing: Probabilistic technique that accepts worse solutions early to escape local optima.",
    MethodId.GREEDY: "Greedy Heuristic: Makes locally optimal choices at each step to find a solution.",
}

def resolve_method(method: Union[str, MethodId, None], strict: bool = False) -> MethodId:
    if isinstance(method, MethodId):
        return method
    key = str(method or "").strip()
    try:
        return MethodId(key.lower().replace("_", "-"))
    except ValueError:
        pass
    alias = _ALIASES.get(key.lower().replace("-", "").replace("_", ""))
    if alias is not None:
        return alias
    if strict:
        raise ValueError(f"Unknown method {method!r}")
    logger.debug("unknown method %r, using nearest-neighbor", method)
    return MethodId.NEAREST_NEIGHBOR

def describe_method(method: Union[str, MethodId, None]) -> str:
    return _DESCRIPTIONS[resolve_method(method)]

def solve(cities: Sequence[City], method: Union[str, MethodId, None] = MethodId.NEAREST_NEIGHBOR,
          cfg: Optional[HeuristicConfig] = None, rng=None) -> SolveResult:
    """Run one heuristic over `cities` and return the closed tour with its length.

    Unrecognised method names fall back to nearest neighbour. `rng` is only
    used by simulated annealing.
    """
    mid = resolve_method(method)
    algo_cls = ALGO_MAP[mid]
    if mid is MethodId.SIMULATED_ANNEALING:
        solver = algo_cls(cities, cfg, rng=rng)
    else:
        solver = algo_cls(cities, cfg)
    logger.info("solving %d cities with %s", len(solver.cities), mid.value)
    return solver.run()

def format_route(result: SolveResult, cities: Sequence[City]) -> List[int]:
    """1-based display labels of the cities along the closed tour."""
    return [cities[i].id + 1 for i in result.tour]
