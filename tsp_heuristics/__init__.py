from .tsp import City, TSPInstance, distance, tour_length, close_tour, parse_cities
from .heuristic_base import HeuristicConfig, SolveResult
from .nearest_neighbor import NearestNeighbor
from .two_opt import TwoOpt
from .annealing import SimulatedAnnealing
from .greedy import GreedyHeuristic
from .dispatch import MethodId, solve, resolve_method, describe_method, format_route
from .experiments import run_repeated_trials, compare_methods
