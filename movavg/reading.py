import typing as t

T = t.TypeVar("T")


class Reading(t.Generic[T]):
    start_ns: int
    stop_ns: int
    window_len: int
    value: T

    def __init__(self, start_ns: int, stop_ns: int, window_len: int, value: T):
        self.start_ns = start_ns
        self.stop_ns = stop_ns
        self.window_len = window_len
        self.value = value

    @property
    def elapsed_ns(self) -> int:
        return self.stop_ns - self.start_ns

    @classmethod
    def csv_header(cls, value_title: str, units: str) -> str:
        return f"emitted at (ns), since last (ns), window samples, {value_title} ({units})"

    def __str__(self) -> str:
        return f"{self.stop_ns}, {self.elapsed_ns}, {self.window_len}, {self.value}"

    def __repr__(self) -> str:
        return f"Reading({self.start_ns}, {self.stop_ns}, {self.window_len}, {self.value!r})"
