from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from solver.solver_manager import BenchmarkConfig, run_benchmark
from state.serializer import write_json
from ui.cli import gameloop


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Mastermind")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="command")

    sub.add_parser("play", help="Play a round in the terminal (default)")

    bench = sub.add_parser("bench", help="Let the solver play many rounds")
    bench.add_argument("--games", type=int, default=10)
    bench.add_argument("--seed", type=int, default=None)
    bench.add_argument("--randomized", action="store_true",
                       help="Play random consistent codes instead of the first one")
    bench.add_argument("--out", default="benchmark.json", help="Where to write results")
    bench.add_argument("--plot", metavar="OUTDIR", default=None,
                       help="Also render charts into OUTDIR")
    return ap


def bench(args) -> dict:
    start_time = time.perf_counter()
    data = run_benchmark(
        BenchmarkConfig(games=args.games, seed=args.seed, randomized=args.randomized),
        progress=True,
    )
    write_json(data, args.out)

    games = data["games"]
    won = sum(games["won"])
    attempts = [a for a, w in zip(games["attempts"], games["won"]) if w]
    print(f"\nTotal time taken: {time.perf_counter() - start_time:.2f} seconds.")
    print(f"Games won: {won} of {len(games['won'])}")
    if attempts:
        print(f"Average attempts over won games: {sum(attempts) / len(attempts):.2f}")
        print(f"Max attempts: {max(attempts)}")
        print(f"Min attempts: {min(attempts)}")
    print(f"Results written to {args.out}")

    if args.plot:
        # matplotlib is only needed here
        from plot.plot import render_all

        for path in render_all(data, Path(args.plot)):
            print(f"wrote {path}")
    return data


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "bench":
        bench(args)
    else:
        gameloop()


if __name__ == "__main__":
    main()
