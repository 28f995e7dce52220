import logging
import typing as t

from movavg.errors import require_positive_int
from movavg.moving_average import T
from movavg.numeric import total
from movavg.running_sum import RunningSumMovingAverage

logger = logging.getLogger(__name__)


class CorrectedSumMovingAverage(RunningSumMovingAverage[T]):
    """Running sum that is rebuilt from the window every ``resync_every`` adds.

    Amortized cost stays O(1) for ``resync_every`` on the order of the
    capacity (the default). The sum is never more than ``capacity +
    2 * resync_every`` roundings away from a fresh summation, however long
    the stream runs.
    """

    _resync_every: int
    _since_resync: int

    def __init__(self, capacity: int, zero: T = 0, resync_every: t.Optional[int] = None):
        super().__init__(capacity, zero)
        if resync_every is None:
            resync_every = capacity
        self._resync_every = require_positive_int("resync_every", resync_every)
        self._since_resync = 0

    @property
    def resync_every(self) -> int:
        return self._resync_every

    def add_sample(self, sample: T) -> None:
        super().add_sample(sample)

        self._since_resync += 1
        if self._since_resync >= self._resync_every:
            self.resync()

    def resync(self):
        fresh = total(self._window, self._zero)
        logger.debug(f"resync after {self._since_resync} samples: {self._sum!r} -> {fresh!r}")
        self._sum = fresh
        self._since_resync = 0
