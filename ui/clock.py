import time


class WallClock:
    """
    Drives an engine's one-second `tick` from real elapsed time.

    The CLI blocks on input, so instead of a background timer the clock is
    polled after every command and catches up on the seconds that passed.
    Nothing is counted until `start` is called.
    """

    def __init__(self, engine, now=time.monotonic):
        self.engine = engine
        self.now = now
        self.started = False
        self._last = None

    def start(self):
        """Begin counting from now. Calling it again restarts the count."""
        self.started = True
        self._last = self.now()

    def poll(self) -> int:
        """
        Call `engine.tick()` once per whole second elapsed since the last poll.
        Returns:
            int: Number of ticks delivered, 0 before the clock is started.
        """
        if not self.started:
            return 0
        elapsed = int(self.now() - self._last)
        ticks = 0
        for _ in range(elapsed):
            if self.engine.is_over:
                break
            self.engine.tick()
            ticks += 1
        # carry the fractional second over to the next poll
        self._last += elapsed
        return ticks


def format_time(seconds: int) -> str:
    return f"{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"
