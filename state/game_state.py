# state/game_state.py
from dataclasses import dataclass

from game.pegs import Color, FeedbackPeg


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a round, handed to the presentation layer"""

    guesses: tuple[tuple[Color | None, ...], ...]
    feedback: tuple[tuple[FeedbackPeg, ...], ...]
    current_row: int
    time_remaining: int
    is_over: bool
    has_won: bool
    is_secret_revealed: bool
    selected_color: Color | None = None
    secret_code: tuple[Color, ...] | None = None

    def to_dict(self):
        # Return the snapshot as plain data, i.e. for json.
        # The engine only fills in the secret once the round revealed it.
        code = None
        if self.secret_code is not None:
            code = [c.value for c in self.secret_code]
        return {
            "guesses": [
                [c.value if c is not None else None for c in row]
                for row in self.guesses
            ],
            "feedback": [[p.value for p in row] for row in self.feedback],
            "current_row": self.current_row,
            "time_remaining": self.time_remaining,
            "is_over": self.is_over,
            "has_won": self.has_won,
            "is_secret_revealed": self.is_secret_revealed,
            "selected_color": (
                self.selected_color.value if self.selected_color else None
            ),
            "secret_code": code,
        }

    @classmethod
    def from_dict(cls, data):
        # Rebuild a snapshot from a dictionary
        code = data.get("secret_code")
        selected = data.get("selected_color")
        return cls(
            guesses=tuple(
                tuple(Color(c) if c is not None else None for c in row)
                for row in data["guesses"]
            ),
            feedback=tuple(
                tuple(FeedbackPeg(p) for p in row) for row in data["feedback"]
            ),
            current_row=data["current_row"],
            time_remaining=data["time_remaining"],
            is_over=data["is_over"],
            has_won=data["has_won"],
            is_secret_revealed=data["is_secret_revealed"],
            selected_color=Color(selected) if selected else None,
            secret_code=tuple(Color(c) for c in code) if code else None,
        )
