# managers.py

from config import FRAME_DURATION


class FrameClock:
    """Turn variable frame times into fixed physics steps.

    At most one step is due per tick. Time beyond the threshold stays in the
    accumulator and counts toward the next step, so while no single frame
    reaches the threshold the step count is ``floor(total / duration)``.
    """

    def __init__(self, duration=FRAME_DURATION):
        self.duration = duration
        self.accumulator = 0.0

    def tick(self, elapsed_ms):
        self.accumulator += elapsed_ms
        if self.accumulator >= self.duration:
            self.accumulator -= self.duration
            return True
        return False

    def reset(self):
        self.accumulator = 0.0
