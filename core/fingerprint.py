# core/fingerprint.py
"""
Cheap change detector for cached matrices.

The fingerprint is the grand sum of the matrix (the sum of its row sums).
It is not an integrity guarantee: two different matrices with the same
grand sum collide and the change goes unnoticed.
"""
from typing import Union

import numpy as np

Fingerprint = Union[float, complex]

# absorbs rounding noise when the same matrix is summed twice
FINGERPRINT_TOL = 1.0e-10


def fingerprint(m: np.ndarray) -> Fingerprint:
    """Return the sum of all row sums of ``m`` as a Python scalar."""
    m = np.asarray(m)
    if m.ndim < 2:
        return np.sum(m).item()
    return np.sum(np.sum(m, axis=1)).item()


def fingerprints_match(a: Fingerprint, b: Fingerprint, tol: float = FINGERPRINT_TOL) -> bool:
    # NaN never matches; cache_solve refuses non-finite registrations up front
    return bool(abs(a - b) < tol)
