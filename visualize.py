import os, argparse, logging, tempfile, shutil
import matplotlib.pyplot as plt
import imageio

from tsp_heuristics import (TSPInstance, HeuristicConfig, MethodId, SimulatedAnnealing, parse_cities,
                            solve, describe_method, format_route, resolve_method)


def load_instance(args):
    if args.cities:
        with open(args.cities) as f:
            cities = parse_cities(f.read())
        return TSPInstance(cities=cities, name=os.path.splitext(os.path.basename(args.cities))[0])
    return TSPInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")


def draw_tour(ax, coords, tour, title):
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]
    ax.plot(cx, cy, "o", zorder=2)
    for k, (x, y) in enumerate(coords):
        ax.annotate(str(k + 1), (x, y), textcoords="offset points", xytext=(4, 4), fontsize=8)
    # closed tour: one arrow per edge
    for a, b in zip(tour[:-1], tour[1:]):
        if a == b:
            continue
        ax.annotate("", xy=coords[b], xytext=coords[a],
                    arrowprops=dict(arrowstyle="->", color="tab:blue", lw=1.2), zorder=1)
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="datalim")


def save_tour_png(inst, result, method, out_png):
    fig, ax = plt.subplots(figsize=(6, 6))
    draw_tour(ax, inst.coords, result.tour, f"{method}  length={result.length:.2f}")
    fig.tight_layout()
    fig.savefig(out_png, dpi=150, bbox_inches="tight")
    plt.close(fig)


def save_annealing_gif(inst, solver, outdir, step=50):
    """GIF of a finished annealing run's best-so-far tour every `step` iterations. Frames go to a temp dir."""
    frames_dir = tempfile.mkdtemp(prefix="annealing_frames_")
    frames = []
    iters = list(range(0, len(solver.history_best_tours), step))
    for it in iters:
        tour = solver.history_best_tours[it]
        L = solver.history_best_lengths[it]
        fig, ax = plt.subplots(figsize=(5, 5))
        draw_tour(ax, inst.coords, tour + tour[:1], f"simulated-annealing best-so-far\niter={it+1}  length={L:.2f}")
        fig.tight_layout()
        frame_path = os.path.join(frames_dir, f"annealing_frame_{it:04d}.png")
        fig.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close(fig)
        frames.append(frame_path)

    gif_path = os.path.join(outdir, "annealing_convergence.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.3) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))
    shutil.rmtree(frames_dir, ignore_errors=True)
    return gif_path


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--method", default=MethodId.TWO_OPT.value,
                   help="nearest-neighbor, two-opt, simulated-annealing or greedy")
    p.add_argument("--cities", default=None, help='text file with one "x, y" per line')
    p.add_argument("--n", type=int, default=20, help="number of random cities")
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--sa-seed", type=int, default=None, help="seed for annealing's random source")
    p.add_argument("--outdir", default="viz")
    p.add_argument("--gif", action="store_true", help="with simulated-annealing, also render its convergence as a GIF")
    p.add_argument("--step", type=int, default=50, help="frame every k annealing iterations")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args()

    mid = resolve_method(args.method)
    if args.gif and mid is not MethodId.SIMULATED_ANNEALING:
        p.error("--gif requires --method simulated-annealing")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    os.makedirs(args.outdir, exist_ok=True)

    inst = load_instance(args)
    cfg = HeuristicConfig(seed=args.sa_seed)
    solver = None
    if mid is MethodId.SIMULATED_ANNEALING:
        solver = SimulatedAnnealing(inst.cities, cfg)
        result = solver.run()
    else:
        result = solve(inst.cities, mid, cfg)
    method = describe_method(args.method).split(":")[0]
    print(describe_method(args.method))
    print(f"Total distance: {result.length:.2f}")
    print("Route:", " -> ".join(str(label) for label in format_route(result, inst.cities)))

    png_path = os.path.join(args.outdir, f"{inst.name}_tour.png")
    save_tour_png(inst, result, method, png_path)
    print("Saved:", png_path)

    if args.gif:
        print("Saved:", save_annealing_gif(inst, solver, args.outdir, step=args.step))


if __name__ == "__main__":
    main()
