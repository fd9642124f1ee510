# Command-line interface (text-based play)

import time

from game.engine import GameEngine
from game.errors import GameError
from game.pegs import Color
from game.ruleset import DEFAULT_RULES
from state.serializer import to_json
from ui.clock import WallClock, format_time


def render(engine: GameEngine):
    print(engine.board.render(None if engine.is_over else engine.current_row))
    print(f"Time left: {format_time(engine.time_remaining)}")
    if engine.is_secret_revealed:
        emoji = engine.rules["display"]["emoji_map"]
        print("Secret code: " + " ".join(emoji[c] for c in engine.revealed_code))


def handle_command(engine: GameEngine, command: str) -> str | None:
    """
    Apply one line of player input to the engine.

    Returns the notice to show the player, or None. Game errors are turned
    into notices; nothing is changed when one occurs.
    """
    command = command.strip().lower()
    try:
        if command == "clear":
            engine.clear_row()
            return "Current row cleared."
        if command == "submit":
            engine.submit_guess()
            if engine.is_over:
                return (
                    "Congratulations! You've won!"
                    if engine.has_won
                    else "Game Over! Try again!"
                )
            return None
        if command == "new":
            engine.start_round()
            return "New round started."
        if command == "state":
            return to_json(engine.get_current_state().to_dict())
        engine.place_color(Color.parse(command))
        return None
    except GameError as e:
        return e.message


def gameloop(engine: GameEngine | None = None, read=input, now=time.monotonic):
    print("=== Mastermind CLI ===")
    colors = ", ".join(f"{c.value} ({c.letter})" for c in DEFAULT_RULES["colors"])
    print(
        f"Place colors by name or letter: {colors}.\n"
        "Commands: 'clear', 'submit', 'new', 'state', 'exit'.\n"
    )

    engine = engine or GameEngine()
    clock = WallClock(engine, now=now)

    while True:
        render(engine)
        try:
            user_input = read("> ")
        except EOFError:
            break
        if clock.poll() and engine.is_over and not engine.has_won:
            print("\nTime is up! Game Over! Try again!")
            render(engine)

        if user_input.strip().lower() == "exit":
            print("Exiting game.")
            break

        notice = handle_command(engine, user_input)
        # the countdown begins with the first command of a round
        if not clock.started or user_input.strip().lower() == "new":
            clock.start()
        if notice:
            print(f"\n{notice}")

    print("\n=== Game Over ===")
