import random
from collections.abc import Sequence

from .errors import InvalidColor
from .pegs import Color, FeedbackPeg
from .ruleset import DEFAULT_RULES


class Code:
    """
        Represents the secret code for one round.
    Attributes:
        sequence (tuple[Color, ...]): The colors of the code, left to right.
        rules (dict): The ruleset for validation.
        is_valid (bool): Whether the code is valid according to the rules."""

    def __init__(self, sequence: Sequence[Color] | None = None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (Sequence[Color] or None): The colors of the code.
            rules (dict or None): Reference to the ruleset (defines length,
            colors, duplicates, etc.).
        """

        self.rules = rules or DEFAULT_RULES
        self.sequence = tuple(sequence) if sequence is not None else ()

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate()

    @classmethod
    def generate_random(cls, rng: random.Random | None = None, rules=None):
        """
        Generate a random valid code according to the rules.

        Every position is an independent uniform draw from the color set,
        so repeated colors are possible when duplicates are allowed.

        Args:
            rng (random.Random or None): Source of randomness. A fresh
            unseeded generator is used when omitted.
            rules (dict or None): Ruleset to generate for.

        Returns:
            Code: The new secret code.
        """

        rules = rules or DEFAULT_RULES
        rng = rng or random.Random()
        colors = rules["colors"]
        length = rules["code_length"]

        if rules["allow_duplicates"]:
            sequence = rng.choices(colors, k=length)
        else:
            sequence = rng.sample(colors, k=length)

        return cls(sequence, rules=rules)

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length, colors, duplicates).

        Args:
            strict (bool): If True, raise InvalidColor with an explanatory
            message when validation fails. If False, return False on failure.

        Returns:
            bool: True if the code sequence is valid; False if invalid and
            strict is False.
        """

        def fail(msg: str) -> bool:
            if strict:
                raise InvalidColor(msg)
            return False

        if len(self.sequence) != self.rules["code_length"]:
            return fail(
                f"Code length must be {self.rules['code_length']}, "
                f"but got {len(self.sequence)}."
            )

        if not self.rules.get("allow_duplicates", True) and len(
            set(self.sequence)
        ) != len(self.sequence):
            return fail("Duplicates are not allowed in this ruleset.")

        for color in self.sequence:
            if color not in self.rules["colors"]:
                allowed = ", ".join(str(c) for c in self.rules["colors"])
                return fail(f"Invalid color '{color}'. Allowed: {allowed}.")

        return True

    def match_counts(self, guess: Sequence[Color]) -> tuple[int, int]:
        """
        Compare this secret code with a guess.

        Args:
            guess (Sequence[Color]): A full row of colors, same length as
            the code.

        Returns:
            tuple[int, int]: (correct, wrong_position)
            correct - pegs with the right color in the right position,
            wrong_position - pegs with a right color in the wrong position.

        Notes:
            Matched cells are nulled out on both sides, so a secret peg
            can satisfy at most one guess peg and a guess peg contributes
            at most one feedback peg.
        """

        if len(guess) != len(self.sequence):
            raise InvalidColor(
                f"Guess length must be {len(self.sequence)}, "
                f"but got {len(guess)}."
            )

        correct = 0
        wrong_position = 0

        remaining_code = list(self.sequence)
        remaining_guess = list(guess)

        # Exact matches first
        for i in range(len(self.sequence)):
            if self.sequence[i] == remaining_guess[i]:
                correct += 1
                remaining_guess[i] = None
                remaining_code[i] = None

        # Then color-only matches against what is left of the code
        for i, color in enumerate(remaining_guess):
            if color is not None and color in remaining_code:
                wrong_position += 1
                remaining_code[remaining_code.index(color)] = None
                remaining_guess[i] = None

        return (correct, wrong_position)

    def compare_with(
        self, guess: Sequence[Color], rng: random.Random | None = None
    ) -> tuple[FeedbackPeg, ...]:
        """
        Score a guess and return exactly one feedback peg per column.

        The pegs are shuffled, so their order says nothing about which
        guess column they belong to.

        Args:
            guess (Sequence[Color]): The guessed row.
            rng (random.Random or None): Source of randomness for the shuffle.

        Returns:
            tuple[FeedbackPeg, ...]: The feedback pegs in random order.
        """

        rng = rng or random.Random()
        correct, wrong_position = self.match_counts(guess)
        incorrect = len(self.sequence) - correct - wrong_position

        pegs = (
            [FeedbackPeg.CORRECT] * correct
            + [FeedbackPeg.WRONG_POSITION] * wrong_position
            + [FeedbackPeg.INCORRECT] * incorrect
        )
        rng.shuffle(pegs)
        return tuple(pegs)

    def as_string(self):
        """
        Return a short representation of the code (e.g. 'RRBG').
        Returns:
            str: The code as a string.
        """
        return (
            "".join(c.letter for c in self.sequence)
            if self.sequence
            else "EMPTY"
        )

    def __eq__(self, other):
        """
        Check equality between this Code and another object.

        Args:
            other (Code, list or tuple): What to compare against.

        Returns:
            bool: True if the sequences are equal, False otherwise.
        """

        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return self.sequence == tuple(other)
        return False

    def __str__(self):
        return self.as_string()
