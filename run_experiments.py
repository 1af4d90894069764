# run_experiments.py
import os, json, argparse, logging
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from tsp_heuristics import TSPInstance, HeuristicConfig, MethodId, SimulatedAnnealing, TwoOpt
from tsp_heuristics.experiments import run_repeated_trials

OUTDIR = os.path.dirname(os.path.abspath(__file__))
METHODS = [m.value for m in MethodId]


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details_by_method, save_path):
    plt.figure()
    names = list(details_by_method.keys())
    for i, name in enumerate(names, start=1):
        lengths = [L for (L, t, tour) in details_by_method[name]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(names) + 1), names, rotation=15)
    plt.ylabel("Tour length")
    plt.title("Tour lengths across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_convergence(inst, cfg, save_path):
    """Best-so-far length of annealing per iteration, with the 2-opt fixed point for reference."""
    sa = SimulatedAnnealing(inst.cities, cfg)
    sa.run()
    two_opt = TwoOpt(inst.cities).run()
    plt.figure()
    plt.plot(sa.history_best_lengths, label="simulated-annealing")
    plt.axhline(two_opt.length, color="gray", linestyle="--", label="two-opt")
    plt.xlabel("Iteration")
    plt.ylabel("Best-so-far tour length")
    plt.title("Simulated annealing convergence")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=30)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--seed", type=int, default=123, help="seed for city coordinates")
    ap.add_argument("--methods", nargs="+", default=METHODS)
    ap.add_argument("--temperature", type=float, default=1000.0)
    ap.add_argument("--cooling", type=float, default=0.995)
    ap.add_argument("--min-temperature", type=float, default=0.1)
    ap.add_argument("--outdir", default=OUTDIR)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"demo{args.n}")
    cfg = HeuristicConfig(initial_temperature=args.temperature, cooling_rate=args.cooling,
                          min_temperature=args.min_temperature)

    records = []
    details_by_method = {}
    for name in args.methods:
        stats, details = run_repeated_trials(inst, name, cfg, n_runs=args.runs)
        print(name, json.dumps(stats, indent=2))
        records.append(stats)
        details_by_method[stats["method"]] = details

    df_summary = pd.DataFrame.from_records(records)
    summary_csv = os.path.join(args.outdir, "results_summary.csv")
    df_summary.to_csv(ensure(summary_csv), index=False)
    print("Saved:", summary_csv)

    scatter_png = os.path.join(args.outdir, "results_distribution.png")
    plot_scatter(details_by_method, scatter_png)
    print("Saved:", scatter_png)

    conv_png = os.path.join(args.outdir, "convergence_simulated-annealing.png")
    plot_convergence(inst, cfg, conv_png)
    print("Saved:", conv_png)


if __name__ == "__main__":
    main()
