from .guess import Guess
from .ruleset import DEFAULT_RULES


class Board:
    """The guess grid: one Guess row per attempt, each with its feedback."""

    def __init__(self, rules=None):
        self.rules = rules or DEFAULT_RULES
        self.rows = [Guess(rules=self.rules) for _ in range(self.rules["max_attempts"])]

    def reset(self):
        """Empty every row and drop all feedback."""
        self.rows = [Guess(rules=self.rules) for _ in range(self.rules["max_attempts"])]

    def __getitem__(self, index: int) -> Guess:
        return self.rows[index]

    def __len__(self):
        return len(self.rows)

    def guesses(self):
        """Return the whole grid as a tuple of row tuples."""
        return tuple(row.get_guess() for row in self.rows)

    def feedback(self):
        """Return the per-row feedback, an empty tuple for unscored rows."""
        return tuple(row.get_feedback() for row in self.rows)

    def is_empty(self):
        return all(
            not row.is_scored and row.next_available_slot() == 0
            for row in self.rows
        )

    def render(self, current_row=None):
        """
        Build a text representation of the grid for the CLI.

        Args:
            current_row (int | None): Row to mark with an arrow.

        Returns:
            str: The rendered board, one line per row.
        """

        symbols = self.rules["display"]["emoji_map"]
        empty = self.rules["display"]["empty"]
        width = self.rules["code_length"]
        title = "| ++++ Guesses ++++ | +++ Feedback ++++ |"
        line = "+" + "-" * (len(title) - 2) + "+"

        lines = [line, title, line]
        for index, row in enumerate(self.rows):
            cells = " ".join(
                symbols[c] if c is not None else f" {empty}" for c in row.cells
            )
            pegs = " ".join(symbols[p] for p in row.feedback) if row.is_scored else ""
            pegs = pegs or " ".join([f" {empty}"] * width)
            marker = " <" if index == current_row else ""
            lines.append(f"| {index + 1:>2} {cells} | {pegs} |{marker}")
        lines.append(line)
        return "\n".join(lines)
