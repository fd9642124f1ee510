# tests/test_secret_code.py
import random
from collections import Counter

import pytest

from game.errors import InvalidColor
from game.pegs import Color, FeedbackPeg
from game.secret_code import Code

R, P, Y, N, G, B = (
    Color.RED,
    Color.PURPLE,
    Color.YELLOW,
    Color.BROWN,
    Color.GREEN,
    Color.BLUE,
)


def test_exact_and_color_matches_with_repeats():
    code = Code([R, R, B, G])
    assert code.match_counts([R, B, R, G]) == (2, 2)

    pegs = code.compare_with([R, B, R, G], random.Random(1))
    assert len(pegs) == 4
    assert Counter(pegs) == Counter(
        {FeedbackPeg.CORRECT: 2, FeedbackPeg.WRONG_POSITION: 2}
    )


def test_no_matches_gives_four_incorrect():
    pegs = Code([R, P, Y, N]).compare_with([B, B, B, B], random.Random(0))
    assert pegs == (FeedbackPeg.INCORRECT,) * 4


def test_exact_match_is_not_counted_again():
    # the red at position 0 is used up by the exact match
    assert Code([R, B, B, B]).match_counts([R, R, R, R]) == (1, 0)


def test_one_secret_peg_satisfies_one_guess_peg():
    # only one blue is left in the secret for the two guessed blues
    assert Code([B, R, Y, Y]).match_counts([R, R, B, B]) == (1, 1)
    assert Code([G, G, P, P]).match_counts([P, G, G, G]) == (1, 2)


def test_counts_agree_with_color_overlap():
    rng = random.Random(42)
    for _ in range(200):
        secret = rng.choices(list(Color), k=4)
        guess = rng.choices(list(Color), k=4)
        correct, wrong = Code(secret).match_counts(guess)

        overlap = sum((Counter(secret) & Counter(guess)).values())
        assert correct == sum(s == g for s, g in zip(secret, guess))
        assert correct + wrong == overlap
        assert correct + wrong <= 4


def test_feedback_order_is_seeded_shuffle():
    code = Code([R, P, Y, N])
    first = code.compare_with([R, B, B, B], random.Random(7))
    second = code.compare_with([R, B, B, B], random.Random(7))
    assert first == second


def test_feedback_order_does_not_follow_columns():
    code = Code([R, P, Y, N])
    positions = {
        code.compare_with([R, B, B, B], random.Random(seed)).index(
            FeedbackPeg.CORRECT
        )
        for seed in range(50)
    }
    assert len(positions) > 1


def test_generate_random_is_reproducible():
    a = Code.generate_random(random.Random(123))
    b = Code.generate_random(random.Random(123))
    assert a == b
    assert len(a.sequence) == 4
    assert all(isinstance(c, Color) for c in a.sequence)


def test_generate_random_draws_with_replacement():
    rng = random.Random(5)
    codes = [Code.generate_random(rng) for _ in range(300)]
    assert any(len(set(c.sequence)) < 4 for c in codes)


def test_invalid_codes_are_rejected():
    with pytest.raises(InvalidColor):
        Code([R, R, R])
    with pytest.raises(InvalidColor):
        Code(["red", "red", "red", "red"])
    assert Code([R, R, R, R]).validate() is True


def test_as_string():
    assert Code([R, P, N, B]).as_string() == "RPNB"
    assert Code().as_string() == "EMPTY"
