from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
        """
        Annotate points (x, y) on ax with formatted y values.

        Args:
            ax: matplotlib Axes
            xs: list of x coordinates
            ys: list of y coordinates
            fmt: format string for y values
            dx: x offset in points
            dy: y offset in points
            fontsize: font size for annotations
        """

        for x, y in zip(xs, ys):
            if y is None or np.isnan(y):
                continue
            ax.annotate(
                fmt.format(y),
                (x, y),
                textcoords="offset points",
                xytext=(dx, dy),
                ha="center",
                va="center",
                fontsize=fontsize,
            )


def compute_run_stats(results: dict):
    """
    Returns:
      attempts_stats (avg, min, max) attempts per won game, np.nan if none
      time_stats (avg, min, max) total time per won game in seconds
      avg_candidates, min_candidates, max_candidates (list[float]) remaining
        candidates after each turn index (turn 0 = before the first guess)
      n_won (int)
    """
    won = np.array(results.get("won", []), dtype=bool)
    attempts = np.array(results.get("attempts", []), dtype=np.float64)
    total_time = np.array(results.get("total_time_s", []), dtype=np.float64)

    # Guard against length mismatches
    n = min(len(won), len(attempts), len(total_time))
    won = won[:n]
    won_attempts = attempts[:n][won]
    won_times = total_time[:n][won]
    n_won = int(won_attempts.size)

    def _stats(values):
        if values.size == 0:
            return (np.nan, np.nan, np.nan)
        return (
            float(np.mean(values)),
            float(np.min(values)),
            float(np.max(values)),
        )

    # candidate counts per turn index, games have different lengths
    counts = [
        c for c, w in zip(results.get("candidate_counts", [])[:n], won) if w
    ]
    max_turns = max((len(c) for c in counts), default=0)
    avg_candidates = []
    min_candidates = []
    max_candidates = []
    for t in range(max_turns):
        vals = np.array([c[t] for c in counts if t < len(c)], dtype=np.float64)
        avg_candidates.append(float(np.mean(vals)))
        min_candidates.append(float(np.min(vals)))
        max_candidates.append(float(np.max(vals)))

    return (
        _stats(won_attempts),
        _stats(won_times),
        avg_candidates,
        min_candidates,
        max_candidates,
        n_won,
    )


def plot_benchmark(results: dict, outdir, label="minimax"):
    """
    Write benchmark charts as PNG files.

    Args:
        results: Collected benchmark data (see main.run_benchmark).
        outdir: Output directory, created if missing.
        label: Strategy name used in titles and file names.
    Returns:
        list[Path]: The written files.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    (
        (avg_attempts, _, _),
        _,
        avg_candidates,
        min_candidates,
        max_candidates,
        n_won,
    ) = compute_run_stats(results)

    # Plot configuration:
    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    written = []

    # Plot 1: attempts distribution
    attempts = np.array(
        [a for a, w in zip(results["attempts"], results["won"]) if w],
        dtype=int,
    )
    plt.figure(figsize=(10, 6))
    if attempts.size:
        values, counts = np.unique(attempts, return_counts=True)
        plt.bar(values, counts, width=0.6, label="Games")
        _annotate_points(plt.gca(), values, counts, fmt="{:.0f}", dy=6)
        plt.axvline(avg_attempts, linestyle="--", color="gray",
                    label=f"Average ({avg_attempts:.2f})")
        plt.xticks(values)
    # Titles and labels
    plt.title(f"Attempts per Game ({label})\n Games won: {n_won}")
    plt.xlabel("Attempts")
    plt.ylabel("Number of Games")
    plt.grid(True, axis="y")
    plt.legend()
    # Save plot
    out1 = outdir / f"attempts_{label}.png"
    plt.savefig(out1, dpi=200, bbox_inches="tight")
    plt.close()
    written.append(out1)

    # Plot 2: remaining candidates vs turn number
    if not avg_candidates:
        print(f"[info] No candidate data to plot ({label}).")
        return written
    x = np.arange(0, len(avg_candidates))
    plt.figure(figsize=(12, 8))
    # Average line with min/max scatter and band
    plt.plot(x, avg_candidates, marker="o", label="Average Candidates")
    plt.scatter(x, max_candidates, marker="^", s=20, label="Max Candidates")
    plt.scatter(x, min_candidates, marker="v", s=20, label="Min Candidates")
    plt.fill_between(x, min_candidates, max_candidates, alpha=0.2,
                     label="Min–Max range")
    _annotate_points(plt.gca(), x, avg_candidates, fmt="{:.1f}", dy=8)
    plt.yscale("log")
    # Titles and labels
    plt.title(f"Remaining Candidates per Turn ({label})")
    plt.xlabel("Turn Number")
    plt.ylabel("Candidates [won games]")
    plt.xticks(x)
    plt.grid(True)
    plt.legend()
    out2 = outdir / f"candidates_per_turn_{label}.png"
    plt.savefig(out2, dpi=200, bbox_inches="tight")
    plt.close()
    written.append(out2)

    return written
