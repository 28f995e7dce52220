# tests/conftest.py
import math

import pytest

from movavg.registry import STRATEGIES


@pytest.fixture(params=sorted(STRATEGIES), ids=sorted(STRATEGIES))
def strategy(request):
    return STRATEGIES[request.param]


@pytest.fixture
def all_strategies():
    def make(capacity, **kwargs):
        return {name: cls(capacity, **kwargs) for name, cls in STRATEGIES.items()}
    return make


@pytest.fixture
def reference_average():
    # exact window mean, independent of any strategy
    def average(values, capacity):
        window = values[-capacity:]
        if not window:
            return None
        return math.fsum(window) / len(window)
    return average
