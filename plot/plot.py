import argparse
import re
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from state.serializer import read_json


def _natural_turn_sort_key(s: str):
    m = re.search(r"(\d+)", str(s))
    return int(m.group(1)) if m else s


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


def _column_stats(columns: dict, turn_headers: list, won: np.ndarray):
    # avg, min, max per turn index over won games, nan where no game got that far
    avgs, mins, maxs = [], [], []
    for th in turn_headers:
        col = columns.get(th, [])
        vals = [
            float(v)
            for v, w in zip(col[: len(won)], won)
            if w and v is not None
        ]
        avgs.append(float(np.mean(vals)) if vals else np.nan)
        mins.append(float(np.min(vals)) if vals else np.nan)
        maxs.append(float(np.max(vals)) if vals else np.nan)
    return avgs, mins, maxs


def compute_run_stats(games: dict) -> dict:
    """
    Summarize the "games" section of a benchmark file.

    Returns a dict with:
      n_games, n_won (int)
      avg/min/max_total_time (float, np.nan if no won games)
      avg/min/max_attempts (float, np.nan if no won games)
      avg/min/max_turn_times (list[float]) per turn index, won games only
      avg/min/max_candidates (list[float]) per turn index, won games only
      attempt_histogram (dict[int, int]) attempts -> number of won games
    """
    won = np.array(games.get("won", []), dtype=bool)
    total_time = np.array(games.get("total_time_s", []), dtype=np.float64)
    attempts = np.array(games.get("attempts", []), dtype=np.int64)

    # Guard against length mismatches
    n = min(len(won), len(total_time), len(attempts))
    won = won[:n]
    total_time = total_time[:n]
    attempts = attempts[:n]

    won_times = total_time[won]
    won_attempts = attempts[won]

    def _agg(values):
        if values.size == 0:
            return np.nan, np.nan, np.nan
        return float(np.mean(values)), float(np.min(values)), float(np.max(values))

    avg_total_time, min_total_time, max_total_time = _agg(won_times)
    avg_attempts, min_attempts, max_attempts = _agg(won_attempts)

    turn_headers = sorted(games.get("turn_headers", []), key=_natural_turn_sort_key)
    avg_turn, min_turn, max_turn = _column_stats(
        games.get("turn_time_s_columns", {}) or {}, turn_headers, won
    )
    avg_cand, min_cand, max_cand = _column_stats(
        games.get("candidates_table", {}) or {}, turn_headers, won
    )

    values, counts = np.unique(won_attempts, return_counts=True)

    return {
        "n_games": int(n),
        "n_won": int(won_times.size),
        "avg_total_time": avg_total_time,
        "min_total_time": min_total_time,
        "max_total_time": max_total_time,
        "avg_attempts": avg_attempts,
        "min_attempts": min_attempts,
        "max_attempts": max_attempts,
        "avg_turn_times": avg_turn,
        "min_turn_times": min_turn,
        "max_turn_times": max_turn,
        "avg_candidates": avg_cand,
        "min_candidates": min_cand,
        "max_candidates": max_cand,
        "attempt_histogram": {int(v): int(c) for v, c in zip(values, counts)},
    }


def plot_attempts(stats: dict, max_rows: int, out: Path):
    plt.figure(figsize=(10, 6))
    xs = np.arange(1, max_rows + 1)
    ys = [stats["attempt_histogram"].get(int(x), 0) for x in xs]
    plt.bar(xs, ys)
    plt.axvline(stats["avg_attempts"], linestyle="--", color="gray",
                label=f"Average {stats['avg_attempts']:.2f}")
    plt.title(
        f"Attempts per won round\n Games won: {stats['n_won']} of {stats['n_games']}"
    )
    plt.xlabel("Attempts")
    plt.ylabel("Rounds")
    plt.xticks(xs)
    plt.grid(True, axis="y")
    plt.legend()
    plt.savefig(out, dpi=200, bbox_inches="tight")
    plt.close()


def plot_per_turn(avg, lo, hi, *, title: str, ylabel: str, fmt: str, out: Path):
    plt.figure(figsize=(12, 8))
    x = np.arange(1, len(avg) + 1)
    # Average line with min/max scatter and band
    plt.plot(x, avg, marker="o", label="Average")
    plt.scatter(x, hi, marker="^", s=20, label="Max")
    plt.scatter(x, lo, marker="v", s=20, label="Min")
    plt.fill_between(x, lo, hi, alpha=0.2, label="Min–Max range")
    _annotate_points(plt.gca(), x, avg, fmt=fmt, dy=8)
    plt.title(title)
    plt.xlabel("Turn Number")
    plt.ylabel(ylabel)
    plt.xticks(x)
    plt.grid(True)
    plt.legend()
    plt.savefig(out, dpi=200, bbox_inches="tight")
    plt.close()


def render_all(data: dict, outdir: Path) -> list[Path]:
    """Write every chart for one benchmark file. Returns the PNG paths."""
    outdir.mkdir(parents=True, exist_ok=True)
    stats = compute_run_stats(data.get("games", {}))
    rules = data.get("rules", {})
    pegs = rules.get("code_length", 4)
    colors = rules.get("num_colors", 6)
    max_rows = rules.get("max_attempts", len(stats["avg_turn_times"]) or 10)

    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    written = []
    if stats["n_won"] == 0:
        print(f"[skip] No won games in benchmark for {pegs}x{colors}.")
        return written

    out1 = outdir / f"{pegs}x{colors}_attempts.png"
    plot_attempts(stats, max_rows, out1)
    written.append(out1)

    out2 = outdir / f"{pegs}x{colors}_turn_time.png"
    plot_per_turn(
        stats["avg_turn_times"], stats["min_turn_times"], stats["max_turn_times"],
        title=f"Turn Time for {pegs} pegs, {colors} colors",
        ylabel="Turn Time (s) [won games]",
        fmt="{:.4f}s",
        out=out2,
    )
    written.append(out2)

    out3 = outdir / f"{pegs}x{colors}_candidates.png"
    plot_per_turn(
        stats["avg_candidates"], stats["min_candidates"], stats["max_candidates"],
        title=f"Consistent Codes Left for {pegs} pegs, {colors} colors",
        ylabel="Candidates left after turn [won games]",
        fmt="{:.1f}",
        out=out3,
    )
    written.append(out3)
    return written


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", default="benchmark.json", help="Path to benchmark JSON")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args(argv)

    data = read_json(Path(args.file))
    for path in render_all(data, Path(args.outdir)):
        print(f"wrote {path}")


if __name__ == "__main__":
    main()
