import typing as t

from movavg.circular_buffer import CircularBuffer
from movavg.numeric import Summable

T = t.TypeVar("T", bound=Summable)


@t.runtime_checkable
class MovingAverage(t.Protocol[T]):
    # get_average() is None until a sample arrives, never a made-up 0
    @property
    def capacity(self) -> int: ...

    def add_sample(self, sample: T) -> None: ...

    def get_average(self) -> t.Optional[T]: ...

    def most_recent_sample(self) -> t.Optional[T]: ...

    def samples(self) -> list[T]: ...

    def is_full(self) -> bool: ...

    def __len__(self) -> int: ...


class WindowedAverage(t.Generic[T]):
    _window: CircularBuffer[T]
    _zero: T

    def __init__(self, capacity: int, zero: T = 0):
        self._window = CircularBuffer[T](capacity)
        self._zero = zero

    @property
    def capacity(self) -> int:
        return self._window.capacity

    def most_recent_sample(self) -> t.Optional[T]:
        return self._window.newest()

    def samples(self) -> list[T]:
        return self._window.to_list()

    def is_full(self) -> bool:
        return self._window.is_full()

    def __len__(self) -> int:
        return len(self._window)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self.capacity}, "
            f"samples={len(self)}, average={self.get_average()!r})"
        )
