import typing as t

from movavg.moving_average import T, WindowedAverage
from movavg.numeric import mean


def _leaf_count(capacity: int) -> int:
    leaves = 1
    while leaves < capacity:
        leaves *= 2
    return leaves


class SumTreeMovingAverage(WindowedAverage[T]):
    # _tree[1] is the root, node i has children 2i and 2i + 1, and leaf
    # _leaves + k mirrors window slot k. The root is re-summed pairwise on
    # every add, so error does not build up over the stream.
    _leaves: int
    _tree: list[T]

    def __init__(self, capacity: int, zero: T = 0):
        super().__init__(capacity, zero)
        self._leaves = _leaf_count(self.capacity)
        self._tree = [zero] * (2 * self._leaves)

    def add_sample(self, sample: T) -> None:
        slot = self._window.front
        self._window.push(sample)

        node = self._leaves + slot
        self._tree[node] = sample
        node //= 2
        while node >= 1:
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]
            node //= 2

    def get_average(self) -> t.Optional[T]:
        return mean(self._tree[1], len(self._window))
