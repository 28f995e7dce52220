import typing as t

from movavg.corrected_sum import CorrectedSumMovingAverage
from movavg.errors import InvalidConfiguration
from movavg.full_recompute import FullRecomputeMovingAverage
from movavg.moving_average import MovingAverage
from movavg.running_sum import RunningSumMovingAverage
from movavg.sum_tree import SumTreeMovingAverage

STRATEGIES: dict[str, type] = {
    "full": FullRecomputeMovingAverage,
    "running": RunningSumMovingAverage,
    "corrected": CorrectedSumMovingAverage,
    "tree": SumTreeMovingAverage,
}

DEFAULT_STRATEGY = "corrected"


def make_moving_average(
    name: str = DEFAULT_STRATEGY, capacity: int = 1, **options: t.Any
) -> MovingAverage:
    try:
        cls = STRATEGIES[name]
    except KeyError:
        choices = ", ".join(sorted(STRATEGIES))
        raise InvalidConfiguration(f"unknown strategy {name!r}, expected one of: {choices}") from None

    return cls(capacity, **options)
