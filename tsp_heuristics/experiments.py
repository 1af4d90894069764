from __future__ import annotations
import csv, os, random, statistics
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence
from .dispatch import MethodId, STOCHASTIC_METHODS, resolve_method, solve
from .heuristic_base import HeuristicConfig
from .tsp import TSPInstance

def run_repeated_trials(instance: TSPInstance, method: str, cfg: Optional[HeuristicConfig] = None,
                        n_runs: int = 10, base_seed: int = 42):
    """Seeded runs of one method. Deterministic methods are run once, whatever `n_runs` says."""
    cfg = cfg or HeuristicConfig()
    mid = resolve_method(method, strict=True)
    if mid not in STOCHASTIC_METHODS:
        n_runs = 1
    lengths = []
    times = []
    best_tours = []
    for r in range(n_runs):
        cfg_r = HeuristicConfig(**{**asdict(cfg), "seed": base_seed + r})
        res = solve(instance.cities, mid, cfg_r, rng=random.Random(cfg_r.seed))
        lengths.append(res.length)
        times.append(res.elapsed_sec)
        best_tours.append(res.tour)
    stats = {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "method": mid.value,
        "n_runs": n_runs,
    }
    return stats, list(zip(lengths, times, best_tours))

def compare_methods(instance: TSPInstance, methods: Sequence[str] = tuple(m.value for m in MethodId),
                    cfg: Optional[HeuristicConfig] = None, n_runs: int = 5, base_seed: int = 100,
                    csv_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Repeated trials for each method; one summary row per method, optionally appended to a CSV."""
    rows = []
    for method in methods:
        stats, _ = run_repeated_trials(instance, method, cfg, n_runs=n_runs, base_seed=base_seed)
        row = {"instance": instance.name, "n_cities": instance.n_cities(), **stats}
        rows.append(row)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=row.keys())
                if write_header:
                    w.writeheader()
                w.writerow(row)
    return rows
