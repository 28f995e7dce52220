# tests/test_circular_buffer.py
import pytest

from movavg.circular_buffer import CircularBuffer
from movavg.errors import InvalidConfiguration


@pytest.mark.parametrize("capacity", [0, -1, 2.5, "3", True])
def test_rejects_invalid_capacity(capacity):
    with pytest.raises(InvalidConfiguration):
        CircularBuffer(capacity)


def test_push_evicts_oldest_once_full():
    buf = CircularBuffer(3)
    assert buf.push(1) is None
    assert buf.push(2) is None
    assert buf.push(3) is None
    assert buf.is_full()

    assert buf.push(4) == 1
    assert buf.push(5) == 2
    assert list(buf) == [3, 4, 5]


@pytest.mark.parametrize("capacity", [1, 2, 5])
@pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 17])
def test_holds_last_capacity_samples_in_order(capacity, n):
    buf = CircularBuffer(capacity)
    for i in range(n):
        buf.push(i)

    assert len(buf) == min(n, capacity)
    assert buf.is_full() == (n >= capacity)
    assert list(buf) == list(range(n))[-capacity:]


def test_iteration_is_restartable():
    buf = CircularBuffer(2)
    buf.push(1.5)
    buf.push(2.5)

    assert list(buf) == [1.5, 2.5]
    assert list(buf) == [1.5, 2.5]

    buf.push(3.5)
    assert list(buf) == [2.5, 3.5]


def test_iterator_ignores_later_pushes():
    buf = CircularBuffer(3)
    for value in (1, 2, 3):
        buf.push(value)

    it = iter(buf)
    buf.push(4)
    buf.push(5)

    assert list(it) == [1, 2, 3]
    assert list(buf) == [3, 4, 5]


def test_iterator_over_partial_window_ignores_later_pushes():
    buf = CircularBuffer(2)
    buf.push(1)

    it = iter(buf)
    buf.push(2)
    buf.push(3)

    assert list(it) == [1]
    assert list(buf) == [2, 3]


def test_newest():
    buf = CircularBuffer(2)
    assert buf.newest() is None
    buf.push(7)
    assert buf.newest() == 7
    buf.push(8)
    buf.push(9)
    assert buf.newest() == 9


def test_from_samples_keeps_tail():
    buf = CircularBuffer.from_samples([1, 2, 3, 4, 5], capacity=3)
    assert buf.capacity == 3
    assert buf.to_list() == [3, 4, 5]
    assert buf.push(6) == 3


def test_from_samples_defaults_to_full_buffer():
    buf = CircularBuffer.from_samples([0.5, 1.5])
    assert buf.capacity == 2
    assert buf.is_full()
    assert buf.to_list() == [0.5, 1.5]


def test_from_samples_requires_samples_or_capacity():
    with pytest.raises(InvalidConfiguration):
        CircularBuffer.from_samples([])
