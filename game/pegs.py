from enum import Enum

from .errors import InvalidColor


class Color(Enum):
    """The six peg colors a player can place."""

    RED = "red"
    PURPLE = "purple"
    YELLOW = "yellow"
    BROWN = "brown"
    GREEN = "green"
    BLUE = "blue"

    @property
    def letter(self) -> str:
        return COLOR_LETTERS[self]

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Look up a color by name ("red") or by letter ("R").
        Args:
            text (str): User input.
        Returns:
            Color: The matching color.
        Raises:
            InvalidColor: If nothing matches.
        """
        key = text.strip().lower()
        for color in cls:
            if key == color.value or key == color.letter.lower():
                return color
        allowed = ", ".join(f"{c.value} ({c.letter})" for c in cls)
        raise InvalidColor(f"Unknown color '{text}'. Allowed: {allowed}.")

    def __str__(self):
        return self.value


# Brown uses N so it does not clash with Blue
COLOR_LETTERS = {
    Color.RED: "R",
    Color.PURPLE: "P",
    Color.YELLOW: "Y",
    Color.BROWN: "N",
    Color.GREEN: "G",
    Color.BLUE: "B",
}


class FeedbackPeg(Enum):
    """Classification of one guess peg against the secret code."""

    CORRECT = "correct"  # right color, right position
    WRONG_POSITION = "wrong_position"  # right color, wrong position
    INCORRECT = "incorrect"

    def __str__(self):
        return self.value
