import typing as t

from movavg.moving_average import T, WindowedAverage
from movavg.numeric import mean


class RunningSumMovingAverage(WindowedAverage[T]):
    """O(1) add and query from a sum updated on every push.

    With floats the sum drifts away from the true window sum as samples come
    and go, and nothing ever corrects it. Use ``CorrectedSumMovingAverage``
    when the stream is long or its magnitudes vary wildly.
    """

    _sum: T

    def __init__(self, capacity: int, zero: T = 0):
        super().__init__(capacity, zero)
        self._sum = zero

    def add_sample(self, sample: T) -> None:
        evicted = self._window.push(sample)
        if evicted is None:
            self._sum = self._sum + sample
        else:
            self._sum = self._sum + sample - evicted

    def get_average(self) -> t.Optional[T]:
        return mean(self._sum, len(self._window))
