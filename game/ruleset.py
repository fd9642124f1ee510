# Configuration: colors, code length, rows, round duration, etc.
from .pegs import Color, FeedbackPeg

DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code (columns of the grid)
    "num_colors": 6,  # Available colors (see color set below)
    "allow_duplicates": True,  # Can the code contain repeated colors?
    "max_attempts": 10,  # Number of rows per round
    "round_duration": 600,  # Seconds on the clock at round start
    "colors": list(Color),  # Red, Purple, Yellow, Brown, Green, Blue
    "display": {
        "emoji_map": {  # For CLI rendering
            Color.RED: "🔴",
            Color.PURPLE: "🟣",
            Color.YELLOW: "🟡",
            Color.BROWN: "🟤",
            Color.GREEN: "🟢",
            Color.BLUE: "🔵",
            FeedbackPeg.CORRECT: "⚫",
            FeedbackPeg.WRONG_POSITION: "⚪",
            FeedbackPeg.INCORRECT: "▫️",
        },
        "empty": "·",
    },
}
