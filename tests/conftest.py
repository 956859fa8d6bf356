import numpy as np
import pytest
from core.cached_matrix import CachedMatrix

@pytest.fixture
def diag_two():
    return np.array([[2.0, 0.0], [0.0, 2.0]])

@pytest.fixture
def cached(diag_two):
    return CachedMatrix(diag_two)

@pytest.fixture
def solve_log(caplog):
    caplog.set_level("INFO", logger="core.solve")
    return caplog

@pytest.fixture
def count_inversions(monkeypatch):
    """Patch the solver used by cache_solve and count how often it runs."""
    import core.solve as solve_mod
    calls = []
    real_invert = solve_mod.invert

    def counting_invert(matrix, **kwargs):
        calls.append(kwargs)
        return real_invert(matrix, **kwargs)

    monkeypatch.setattr(solve_mod, "invert", counting_invert)
    return calls
