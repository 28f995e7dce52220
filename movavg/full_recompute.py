import typing as t

from movavg.moving_average import T, WindowedAverage
from movavg.numeric import mean, total


class FullRecomputeMovingAverage(WindowedAverage[T]):
    """O(capacity) per query, but rounding error never carries over between queries."""

    def add_sample(self, sample: T) -> None:
        self._window.push(sample)

    def get_average(self) -> t.Optional[T]:
        return mean(total(self._window, self._zero), len(self._window))
