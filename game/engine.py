import logging
import random

from .board import Board
from .errors import RoundOver, RowIncomplete
from .pegs import Color, FeedbackPeg
from .ruleset import DEFAULT_RULES
from .secret_code import Code
from state.game_state import GameState

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns one round of Mastermind: the secret code, the guess grid with its
    feedback, the countdown and the win/loss transitions.

    The engine is driven entirely from outside. The presentation layer calls
    the command methods in response to player input, and an external clock
    calls `tick` once per elapsed second. Calls are expected one at a time.

    Every command either succeeds completely or raises a GameError and leaves
    the round untouched.
    """

    def __init__(self, rules=None, rng: random.Random | None = None):
        """
        Create an engine and start the first round.

        Args:
            rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
            rng (random.Random, optional): Source of randomness for secret
            codes and feedback order. Pass a seeded generator for
            reproducible rounds.
        """
        self.rules = rules or DEFAULT_RULES
        self.rng = rng or random.Random()
        self.board = Board(rules=self.rules)
        self.secret_code = Code(rules=self.rules)
        self.current_row = 0
        self.time_remaining = self.rules["round_duration"]
        self.is_over = False
        self.has_won = False
        self.is_secret_revealed = False
        self.selected_color: Color | None = None
        self.start_round()

    def start_round(self, secret=None):
        """
        Set up a new round: draw a secret code and reset all round state.

        Args:
            secret (Sequence[Color], optional): Use this code instead of a
            random one. It is validated like any other code.
        """
        if secret is not None:
            code = Code(secret, rules=self.rules)
            code.validate()
        else:
            code = Code.generate_random(self.rng, rules=self.rules)

        self.secret_code = code
        self.board.reset()
        self.current_row = 0
        self.time_remaining = self.rules["round_duration"]
        self.is_over = False
        self.has_won = False
        self.is_secret_revealed = False
        self.selected_color = None
        logger.info("New round started")
        logger.debug("Secret code: %s", self.secret_code)

    def tick(self):
        """Count down one second; running out of time loses the round."""
        if self.is_over or self.time_remaining <= 0:
            return
        self.time_remaining -= 1
        if self.time_remaining == 0:
            logger.info("Time is up")
            self.end_round(won=False)

    def next_available_slot(self) -> int | None:
        return self.board[self.current_row].next_available_slot()

    def select_color(self, color: Color):
        """Remember the color the player is holding. Purely a UI hint."""
        self._ensure_running()
        self.board[self.current_row].check_color(color)
        self.selected_color = color

    def place_color(self, color: Color) -> int:
        """
        Drop a color into the leftmost empty slot of the current row.

        Args:
            color (Color): The color to place.

        Returns:
            int: The column the color landed in.

        Raises:
            RoundOver: The round has ended.
            InvalidColor: `color` is not one of the ruleset's colors.
            RowFull: The current row has no empty slot.
        """
        self._ensure_running()
        slot = self.board[self.current_row].place(color)
        self.selected_color = color
        logger.debug("Placed %s at row %d, column %d", color, self.current_row, slot)
        return slot

    def clear_row(self):
        """Empty the current row. Other rows and all feedback stay as they are."""
        self._ensure_running()
        self.board[self.current_row].clear()
        logger.debug("Cleared row %d", self.current_row)

    @property
    def is_current_row_filled(self) -> bool:
        return self.board[self.current_row].is_filled

    def submit_guess(self) -> tuple[FeedbackPeg, ...]:
        """
        Score the current row and move the round forward.

        A row of four correct pegs wins. Otherwise the next row becomes
        current, or the round is lost if this was the last row.

        Returns:
            tuple[FeedbackPeg, ...]: The feedback pegs, in random order.

        Raises:
            RoundOver: The round has ended.
            RowIncomplete: The current row still has an empty slot.
        """
        self._ensure_running()
        row = self.board[self.current_row]
        if not row.is_filled:
            raise RowIncomplete()

        feedback = self.secret_code.compare_with(row.get_guess(), self.rng)
        row.apply_feedback(feedback)
        logger.info(
            "Row %d submitted: %s -> %s",
            self.current_row,
            row,
            ", ".join(str(p) for p in feedback),
        )

        if all(peg == FeedbackPeg.CORRECT for peg in feedback):
            self.end_round(won=True)
        elif self.current_row == self.rules["max_attempts"] - 1:
            self.end_round(won=False)
        else:
            self.current_row += 1
        return feedback

    def end_round(self, won: bool):
        """Finish the round and reveal the secret. Later calls do nothing."""
        if self.is_over:
            return
        self.is_over = True
        self.has_won = won
        self.is_secret_revealed = True
        logger.info(
            "Round %s after %d row(s), %ds left; secret was %s",
            "won" if won else "lost",
            self.attempts_used(),
            self.time_remaining,
            self.secret_code,
        )

    def _ensure_running(self):
        if self.is_over:
            raise RoundOver()

    @property
    def revealed_code(self) -> tuple[Color, ...] | None:
        """The secret code once the round is over, otherwise None."""
        if not self.is_secret_revealed:
            return None
        return self.secret_code.sequence

    @property
    def guesses(self):
        return self.board.guesses()

    @property
    def feedback(self):
        return self.board.feedback()

    def attempts_used(self) -> int:
        return sum(1 for row in self.board.rows if row.is_scored)

    def remaining_attempts(self) -> int:
        """Return how many rows can still be submitted."""
        if self.is_over:
            return 0
        return self.rules["max_attempts"] - self.current_row

    def get_current_state(self) -> GameState:
        """Return a read-only GameState snapshot for the presentation layer."""
        return GameState(
            guesses=self.guesses,
            feedback=self.feedback,
            current_row=self.current_row,
            time_remaining=self.time_remaining,
            is_over=self.is_over,
            has_won=self.has_won,
            is_secret_revealed=self.is_secret_revealed,
            selected_color=self.selected_color,
            secret_code=self.revealed_code,
        )
