from .errors import InvalidColor, RowFull
from .pegs import Color, FeedbackPeg
from .ruleset import DEFAULT_RULES


class Guess:
    """
        One row of the guess grid and the feedback it received.
    Attributes:
        cells (list[Color | None]): The colors placed so far, None for empty.
        rules (dict): The ruleset for validation.
        feedback (tuple[FeedbackPeg, ...]): Empty until the row is scored."""

    def __init__(self, rules=None):
        """
        Initialize an empty row.
        Args:
            rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
        """

        self.rules = rules or DEFAULT_RULES
        self.cells: list[Color | None] = [None] * self.rules["code_length"]
        self.feedback: tuple[FeedbackPeg, ...] = ()

    def next_available_slot(self) -> int | None:
        """
        Return the leftmost empty column, or None if the row is full.
        Returns:
            int | None: Column index.
        """
        for col, cell in enumerate(self.cells):
            if cell is None:
                return col
        return None

    def check_color(self, color):
        """
        Make sure `color` belongs to the ruleset's color set.
        Raises:
            InvalidColor: If it does not.
        """
        if not isinstance(color, Color) or color not in self.rules["colors"]:
            allowed = ", ".join(str(c) for c in self.rules["colors"])
            raise InvalidColor(f"Invalid color '{color}'. Allowed: {allowed}.")

    def place(self, color: Color) -> int:
        """
        Put a color into the next empty column.
        Args:
            color (Color): The color to place.
        Returns:
            int: The column the color landed in.
        Raises:
            InvalidColor: If the color is not part of the ruleset.
            RowFull: If every column is already filled.
        """
        self.check_color(color)
        slot = self.next_available_slot()
        if slot is None:
            raise RowFull()
        self.cells[slot] = color
        return slot

    def clear(self):
        self.cells = [None] * self.rules["code_length"]

    @property
    def is_filled(self) -> bool:
        return None not in self.cells

    @property
    def is_scored(self) -> bool:
        return bool(self.feedback)

    def apply_feedback(self, feedback: tuple[FeedbackPeg, ...]):
        """
        Store feedback after evaluation by the secret code. A row is
        scored exactly once.
        Args:
            feedback (tuple[FeedbackPeg, ...]): One peg per column.
        """
        if self.is_scored:
            raise RuntimeError("Feedback for this row was already recorded.")
        if len(feedback) != self.rules["code_length"]:
            raise ValueError(
                f"Feedback must have {self.rules['code_length']} pegs, "
                f"but got {len(feedback)}."
            )
        self.feedback = tuple(feedback)

    def get_feedback(self):
        return self.feedback

    def get_guess(self):
        """
        Return a snapshot of the row.

        Returns:
            tuple[Color | None, ...]: The cells, None for empty."""
        return tuple(self.cells)

    def as_string(self):
        """
        Return a short representation of the row (e.g. 'RG..').
        Returns:
            str: The row as a string."""
        return "".join(c.letter if c else "." for c in self.cells)

    def __str__(self):
        return self.as_string()
