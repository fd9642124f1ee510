# tests/test_solver.py
import random

import pytest

from game.engine import GameEngine
from game.pegs import Color, FeedbackPeg
from solver.candidate_solver import CandidateSolver, feedback_counts
from solver.solver_manager import BenchmarkConfig, play_round, run_benchmark


def test_feedback_counts_ignores_order():
    pegs = (
        FeedbackPeg.INCORRECT,
        FeedbackPeg.CORRECT,
        FeedbackPeg.WRONG_POSITION,
        FeedbackPeg.CORRECT,
    )
    assert feedback_counts(pegs) == (2, 1)


def test_solver_starts_with_every_code():
    solver = CandidateSolver()
    assert len(solver.candidates) == 6**4
    assert solver.choose_guess() == (Color.RED, Color.RED, Color.PURPLE, Color.PURPLE)


def test_feedback_narrows_candidates():
    solver = CandidateSolver()
    guess = solver.choose_guess()
    left = solver.apply_feedback(guess, (FeedbackPeg.INCORRECT,) * 4)
    # no red and no purple anywhere: 4 colors per position remain
    assert left == 4**4
    assert all(Color.RED not in c and Color.PURPLE not in c for c in solver.candidates)


@pytest.mark.parametrize(
    "secret",
    [
        (Color.RED, Color.RED, Color.PURPLE, Color.PURPLE),
        (Color.BLUE, Color.BLUE, Color.BLUE, Color.BLUE),
        (Color.GREEN, Color.BROWN, Color.YELLOW, Color.RED),
        (Color.BLUE, Color.GREEN, Color.BROWN, Color.YELLOW),
        (Color.PURPLE, Color.BLUE, Color.PURPLE, Color.BLUE),
    ],
)
def test_solver_breaks_code(secret):
    engine = GameEngine(rng=random.Random(0))
    engine.start_round(secret=secret)
    result = play_round(engine, CandidateSolver())

    assert result.won
    assert engine.revealed_code == secret
    assert result.attempts == len(result.turn_times_s)
    assert result.candidates_left[-1] >= 1


def test_benchmark_layout():
    data = run_benchmark(BenchmarkConfig(games=3, seed=11))
    games = data["games"]

    assert data["rules"]["code_length"] == 4
    assert games["won"] == [True, True, True]
    assert len(games["attempts"]) == 3
    assert games["turn_headers"][0] == "turn_1"
    assert len(games["turn_headers"]) == 10
    for i, attempts in enumerate(games["attempts"]):
        column = [games["turn_time_s_columns"][th][i] for th in games["turn_headers"]]
        assert sum(v is not None for v in column) == attempts


def test_benchmark_is_reproducible_with_seed():
    a = run_benchmark(BenchmarkConfig(games=2, seed=3, randomized=True))
    b = run_benchmark(BenchmarkConfig(games=2, seed=3, randomized=True))
    assert a["games"]["secrets"] == b["games"]["secrets"]
    assert a["games"]["attempts"] == b["games"]["attempts"]
