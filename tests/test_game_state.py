# tests/test_game_state.py
import random

from game.engine import GameEngine
from game.pegs import Color
from state.game_state import GameState
from state.serializer import from_json, to_json


def test_snapshot_hides_secret_until_round_ends():
    engine = GameEngine(rng=random.Random(4))
    engine.start_round(secret=(Color.RED,) * 4)
    engine.place_color(Color.BLUE)

    data = engine.get_current_state().to_dict()
    assert data["secret_code"] is None
    assert data["guesses"][0] == ["blue", None, None, None]
    assert data["selected_color"] == "blue"
    assert data["time_remaining"] == 600

    engine.clear_row()
    for _ in range(4):
        engine.place_color(Color.RED)
    engine.submit_guess()

    data = engine.get_current_state().to_dict()
    assert data["secret_code"] == ["red"] * 4
    assert data["feedback"][0] == ["correct"] * 4
    assert data["has_won"] is True


def test_snapshot_is_detached_from_engine():
    engine = GameEngine(rng=random.Random(4))
    snapshot = engine.get_current_state()
    engine.place_color(Color.GREEN)
    assert snapshot.guesses[0] == (None,) * 4


def test_snapshot_survives_json():
    engine = GameEngine(rng=random.Random(8))
    engine.place_color(Color.PURPLE)
    snapshot = engine.get_current_state()

    restored = GameState.from_dict(from_json(to_json(snapshot.to_dict())))
    assert restored == snapshot
