# utils/matrix.py
from typing import Optional

import numpy as np


def as_matrix(value) -> np.ndarray:
    """Return a private, read-only copy of ``value`` as an ndarray."""
    arr = np.array(value, copy=True)
    arr.setflags(write=False)
    return arr


def random_matrix(n: int, seed: Optional[int] = None, dtype: str = "float") -> np.ndarray:
    """
    Build an ``n`` x ``n`` matrix of standard normal entries.

    Args:
        n: Matrix order.
        seed: Optional seed for ``numpy.random.default_rng``.
        dtype: ``"float"`` or ``"complex"``.

    Returns:
        A dense square matrix (almost surely non-singular).
    """
    rng = np.random.default_rng(seed)
    M = rng.standard_normal((n, n))
    if dtype == "complex":
        M = M + 1j * rng.standard_normal((n, n))
    return M
