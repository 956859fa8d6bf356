# core/cached_matrix.py
"""
Owned state for a matrix and its lazily computed inverse.

``matrix_fingerprint`` always reflects the last sanctioned write
(construction or ``set_matrix``), never merely the last write. The
``corrupt_*`` methods exist to break that on purpose so the staleness
check in ``core.solve.cache_solve`` can be exercised.
"""
from __future__ import annotations
from typing import Optional

import numpy as np

from core.fingerprint import Fingerprint, fingerprint
from utils.matrix import as_matrix


class CachedMatrix:
    __slots__ = ("_matrix", "_matrix_fp", "_inverse", "_inverse_fp")

    def __init__(self, initial):
        self._matrix = as_matrix(initial)
        self._matrix_fp: Fingerprint = fingerprint(self._matrix)
        self._inverse: Optional[np.ndarray] = None
        self._inverse_fp: Optional[Fingerprint] = None

    def __repr__(self) -> str:
        state = "cached" if self._inverse is not None else "empty"
        return f"CachedMatrix(shape={self._matrix.shape}, inverse={state})"

    # ------------------------------------------------------------------
    # Matrix
    # ------------------------------------------------------------------
    def set_matrix(self, new) -> None:
        """Replace the matrix; any cached inverse is discarded."""
        self._matrix = as_matrix(new)
        self._matrix_fp = fingerprint(self._matrix)
        self._inverse = None
        self._inverse_fp = None

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    def get_matrix_fingerprint(self) -> Fingerprint:
        """Fingerprint recorded at the last ``set_matrix``; not recomputed."""
        return self._matrix_fp

    # ------------------------------------------------------------------
    # Inverse
    # ------------------------------------------------------------------
    def get_inverse(self) -> Optional[np.ndarray]:
        return self._inverse

    def set_inverse(self, inv) -> None:
        self._inverse = as_matrix(inv)

    def get_inverse_fingerprint(self) -> Optional[Fingerprint]:
        return self._inverse_fp

    def set_inverse_fingerprint(self, fp: Fingerprint) -> None:
        self._inverse_fp = fp

    # ------------------------------------------------------------------
    # Test/demo only: write without updating fingerprints
    # ------------------------------------------------------------------
    def corrupt_matrix(self, new) -> None:
        """
        Overwrite the matrix behind the cache's back.

        Simulates external code mutating the cache internals directly. The
        stored fingerprint and the cached inverse are left as they were, so
        the next ``cache_solve`` sees a mismatch. Never use this as an update
        path; that is what ``set_matrix`` is for.
        """
        self._matrix = as_matrix(new)

    def corrupt_inverse(self, new) -> None:
        """Overwrite the cached inverse leaving its fingerprint untouched."""
        self._inverse = as_matrix(new)
