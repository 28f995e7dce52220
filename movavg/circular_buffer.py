import typing as t

from movavg.errors import require_positive_int

T = t.TypeVar("T")


class CircularBuffer(t.Generic[T]):
    # _front is the slot the next push writes; once full it holds the oldest sample
    _buffer: list[t.Optional[T]]
    _capacity: int
    _front: int
    _len: int

    def __init__(self, capacity: int):
        self._capacity = require_positive_int("capacity", capacity)
        self._buffer = [None] * self._capacity
        self._front = 0
        self._len = 0

    @classmethod
    def from_samples(
        cls, samples: t.Iterable[T], capacity: t.Optional[int] = None
    ) -> "CircularBuffer[T]":
        samples = list(samples)
        if capacity is None:
            capacity = len(samples)

        self = cls(capacity)
        for sample in samples[-self._capacity :]:
            self.push(sample)

        return self

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def front(self) -> int:
        return self._front

    def push(self, sample: T) -> t.Optional[T]:
        evicted = self._buffer[self._front] if self.is_full() else None

        self._buffer[self._front] = sample
        self._increment_index()

        return evicted

    def newest(self) -> t.Optional[T]:
        if self._len == 0:
            return None
        return self._buffer[(self._front - 1) % self._capacity]

    def to_list(self) -> list[T]:
        return list(self)

    def is_full(self) -> bool:
        return self._len == self._capacity

    def _increment_index(self):
        self._front = (self._front + 1) % self._capacity
        if self._len < self._capacity:
            self._len += 1

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> t.Iterator[T]:
        # Copy the held slots so pushes made after iter() never show up in it.
        start = (self._front - self._len) % self._capacity
        held = self._buffer[start:] + self._buffer[:start]
        return iter(held[: self._len])

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self._capacity}, samples={self.to_list()!r})"
