import typing as t


class Summable(t.Protocol):
    def __add__(self, other: t.Any) -> t.Any: ...
    def __sub__(self, other: t.Any) -> t.Any: ...
    def __truediv__(self, other: int) -> t.Any: ...


T = t.TypeVar("T", bound=Summable)


def total(samples: t.Iterable[T], zero: T) -> T:
    result = zero
    for sample in samples:
        result = result + sample
    return result


def mean(sum_: T, count: int) -> t.Optional[T]:
    if count == 0:
        return None
    return sum_ / count
