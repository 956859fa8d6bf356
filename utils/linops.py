# utils/linops.py
from __future__ import annotations
from typing import Optional

import numpy as np
import scipy.linalg as la

from core.exceptions import MatrixShapeError, SingularMatrixError

# assume_a hints under which LAPACK reads only one triangle of A
_STRUCTURE_CHECKS = {
    "sym": lambda A: np.allclose(A, A.T),
    "her": lambda A: np.allclose(A, A.conj().T),
    "pos": lambda A: np.allclose(A, A.conj().T),
}


def invert(A: np.ndarray, b: Optional[np.ndarray] = None,
           assume_a: str = "gen", check_finite: bool = True) -> np.ndarray:
    """
    Solve ``A @ X = b`` densely; with ``b`` omitted this is the inverse of ``A``.

    Args:
        A: Square matrix to invert.
        b: Optional right-hand side. The result is then ``A^{-1} b``.
        assume_a: LAPACK driver hint passed to ``scipy.linalg.solve``
            ("gen", "sym", "her" or "pos").
        check_finite: Reject inf/NaN entries before factorising.

    Raises:
        MatrixShapeError: ``A`` is not a 2-D square matrix, or does not have
            the symmetry ``assume_a`` claims.
        SingularMatrixError: ``A`` is singular (or not positive definite
            when ``assume_a="pos"``).
    """
    A = np.asarray(A)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise MatrixShapeError(f"Expected a square 2-D matrix, got shape {A.shape}")

    check = _STRUCTURE_CHECKS.get(assume_a)
    if check is not None and not check(A):
        # scipy would silently use one triangle and invert a different matrix
        raise MatrixShapeError(f"assume_a={assume_a!r} does not hold for the given matrix")

    rhs = np.eye(A.shape[0], dtype=A.dtype) if b is None else np.asarray(b)
    try:
        return la.solve(A, rhs, assume_a=assume_a, check_finite=check_finite)
    except la.LinAlgError as e:
        raise SingularMatrixError(f"Matrix of shape {A.shape} is not invertible: {e}") from e
