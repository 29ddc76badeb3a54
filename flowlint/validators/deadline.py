"""Wall-clock budget enforcement for a validation call."""

import time

from .errors import ValidationTimeout

# Loop iterations between clock reads inside traversals
TICK_STRIDE = 256


class Deadline:
    """A monotonic deadline shared by every stage of one validation call.

    ``check`` is called at checker boundaries; ``tick`` is called once per
    iteration inside traversal loops and only reads the clock every
    ``TICK_STRIDE`` iterations.
    """

    def __init__(self, timeout_ms: float | None, clock=time.monotonic):
        self.timeout_ms = timeout_ms
        self._clock = clock
        self._started = clock()
        self._expires = None if timeout_ms is None else self._started + timeout_ms / 1000.0
        self._ticks = 0

    @property
    def elapsed_ms(self) -> float:
        return (self._clock() - self._started) * 1000.0

    def expired(self) -> bool:
        return self._expires is not None and self._clock() >= self._expires

    def check(self, stage: str) -> None:
        """Raise ValidationTimeout if the budget is spent.

        Args:
            stage: Name of the stage about to run (or running).

        Raises:
            ValidationTimeout: If the deadline has passed.
        """
        if self.expired():
            raise ValidationTimeout(self.timeout_ms, stage, self.elapsed_ms)

    def tick(self, stage: str) -> None:
        """Cheap per-iteration check for hot loops."""
        if self._expires is None:
            return
        self._ticks += 1
        if self._ticks % TICK_STRIDE == 0:
            self.check(stage)
