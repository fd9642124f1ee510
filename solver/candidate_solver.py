from __future__ import annotations

import random
from collections import Counter
from collections.abc import Sequence
from itertools import product

from game.pegs import Color, FeedbackPeg
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code


def feedback_counts(feedback: Sequence[FeedbackPeg]) -> tuple[int, int]:
    """
    Reduce a (shuffled) list of pegs to (correct, wrong_position).
    """
    counts = Counter(feedback)
    return counts[FeedbackPeg.CORRECT], counts[FeedbackPeg.WRONG_POSITION]


class CandidateSolver:
    """
    Code-breaker that only ever plays codes still consistent with every
    feedback seen so far.

    Attributes:
        rules: dict
        rng: random.Random | None - when set, picks a random consistent
            candidate instead of the first one
        opening: tuple[Color, ...] - fixed first guess
        candidates: list[tuple[Color, ...]]

    Methods:
        choose_guess(): Returns the next guess.
        apply_feedback(guess, feedback): Drops inconsistent candidates.
    """

    def __init__(
        self,
        *,
        rules=None,
        rng: random.Random | None = None,
        opening: Sequence[Color] | None = None,
    ):
        self.rules = rules or DEFAULT_RULES
        self.rng = rng
        self.opening = tuple(opening) if opening is not None else self._default_opening()
        self.all_combinations = list(
            product(self.rules["colors"], repeat=self.rules["code_length"])
        )
        self.candidates = list(self.all_combinations)
        self.history: list[tuple[tuple[Color, ...], tuple[int, int]]] = []

    def _default_opening(self) -> tuple[Color, ...]:
        # Two colors, two pegs each (red, red, purple, purple for 4 pegs)
        colors = self.rules["colors"]
        length = self.rules["code_length"]
        half = length // 2
        return tuple([colors[0]] * half + [colors[1]] * (length - half))

    def reset(self):
        self.candidates = list(self.all_combinations)
        self.history = []

    def choose_guess(self) -> tuple[Color, ...]:
        """
        Pick the next code to play.
        Returns:
            tuple[Color, ...]: The guess.
        """
        if not self.history:
            return self.opening
        if not self.candidates:
            raise RuntimeError("No code is consistent with the feedback so far.")
        if self.rng is not None:
            return self.rng.choice(self.candidates)
        return self.candidates[0]

    def apply_feedback(
        self, guess: Sequence[Color], feedback: Sequence[FeedbackPeg]
    ) -> int:
        """
        Keep only candidates that would have produced the same feedback.

        Args:
            guess: The code that was played.
            feedback: The pegs the engine returned for it.
        Returns:
            Number of candidates left.
        """
        guess = tuple(guess)
        observed = feedback_counts(feedback)
        self.history.append((guess, observed))
        self.candidates = [
            c
            for c in self.candidates
            if Code(c, rules=self.rules).match_counts(guess) == observed
        ]
        return len(self.candidates)
