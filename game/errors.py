"""
Advisory errors raised by the game engine.

None of these are defects: they are expected, user-driven conditions.
The engine checks before it mutates anything, so after any of them is
raised the round is exactly as it was before the call.
"""


class GameError(Exception):
    """Base class for all recoverable game conditions."""

    default_message = "Action not allowed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class RowFull(GameError):
    default_message = "No available slots in this row!"


class RowIncomplete(GameError):
    default_message = "Please fill the current row"


class RoundOver(GameError):
    default_message = "The round is over. Start a new round to keep playing."


class InvalidColor(GameError, ValueError):
    default_message = "Invalid color."
