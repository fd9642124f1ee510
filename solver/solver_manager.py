from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field

from game.engine import GameEngine
from game.ruleset import DEFAULT_RULES
from solver.candidate_solver import CandidateSolver

logger = logging.getLogger(__name__)


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


@dataclass(frozen=True)
class BenchmarkConfig:
    games: int = 10
    seed: int | None = None
    # pick random consistent candidates instead of the first one
    randomized: bool = False


@dataclass
class RoundResult:
    """Outcome of one self-played round."""

    won: bool
    attempts: int
    total_time_s: float
    secret: str
    turn_times_s: list[float] = field(default_factory=list)
    candidates_left: list[int] = field(default_factory=list)


def play_round(
    engine: GameEngine, solver: CandidateSolver, *, progress: bool = False
) -> RoundResult:
    """
    Play the engine's current round to the end with the given solver.

    Only the public command interface is used: colors are placed one at a
    time and the row is submitted, exactly like a player would.

    Args:
        engine: GameEngine - A freshly started round.
        solver: CandidateSolver - Will be reset before playing.
        progress: bool - Print a progress line per turn.
    Returns:
        RoundResult for the round.
    """
    solver.reset()
    turn_times = []
    candidates_left = []
    start_time = time.perf_counter()

    while not engine.is_over:
        turn_start = time.perf_counter()
        guess = solver.choose_guess()
        for color in guess:
            engine.place_color(color)
        feedback = engine.submit_guess()
        left = solver.apply_feedback(guess, feedback)
        turn_times.append(time.perf_counter() - turn_start)
        candidates_left.append(left)
        if progress:
            progress_print(
                f"turn {len(turn_times)}: {''.join(c.letter for c in guess)} "
                f"-> {left} candidate(s) left"
            )

    total_time = time.perf_counter() - start_time
    secret = "".join(c.letter for c in engine.revealed_code)
    if progress:
        log_print(
            f"{'won' if engine.has_won else 'lost'} in {len(turn_times)} "
            f"turn(s), secret {secret}"
        )
    return RoundResult(
        won=engine.has_won,
        attempts=engine.attempts_used(),
        total_time_s=total_time,
        secret=secret,
        turn_times_s=turn_times,
        candidates_left=candidates_left,
    )


def run_benchmark(
    config: BenchmarkConfig | None = None, *, rules=None, progress: bool = False
) -> dict:
    """
    Self-play `config.games` rounds and collect statistics.

    Args:
        config: BenchmarkConfig - Number of games, seed, strategy.
        rules: dict - Ruleset to play with.
        progress: bool - Print progress while playing.
    Returns:
        dict in the benchmark format read by plot/plot.py:
        {"rules": {...}, "games": {"won", "attempts", "total_time_s",
        "secrets", "turn_headers", "turn_time_s_columns",
        "candidates_table"}}
    """
    cfg = config or BenchmarkConfig()
    rules = rules or DEFAULT_RULES
    rng = random.Random(cfg.seed)
    engine = GameEngine(rules=rules, rng=rng)
    solver = CandidateSolver(rules=rules, rng=rng if cfg.randomized else None)

    results = []
    for game_idx in range(cfg.games):
        if game_idx > 0:
            engine.start_round()
        if progress:
            log_print(f"\n--- Game {game_idx + 1} ---")
        result = play_round(engine, solver, progress=progress)
        logger.info(
            "Game %d: %s in %d attempt(s)",
            game_idx + 1,
            "won" if result.won else "lost",
            result.attempts,
        )
        results.append(result)

    return {
        "rules": {
            "code_length": rules["code_length"],
            "num_colors": rules["num_colors"],
            "max_attempts": rules["max_attempts"],
        },
        "games": collect_games(results, rules["max_attempts"]),
    }


def collect_games(results: list[RoundResult], max_attempts: int) -> dict:
    """
    Lay round results out column-wise, one column per turn number.
    Turns a round did not reach are None.
    """
    turn_headers = [f"turn_{i}" for i in range(1, max_attempts + 1)]
    turn_cols = {th: [] for th in turn_headers}
    cand_cols = {th: [] for th in turn_headers}

    for result in results:
        for i, th in enumerate(turn_headers):
            if i < len(result.turn_times_s):
                turn_cols[th].append(result.turn_times_s[i])
                cand_cols[th].append(result.candidates_left[i])
            else:
                turn_cols[th].append(None)
                cand_cols[th].append(None)

    return {
        "won": [r.won for r in results],
        "attempts": [r.attempts for r in results],
        "total_time_s": [r.total_time_s for r in results],
        "secrets": [r.secret for r in results],
        "turn_headers": turn_headers,
        "turn_time_s_columns": turn_cols,
        "candidates_table": cand_cols,
    }
