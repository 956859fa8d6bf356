# core/solve.py
"""
Cache-aware inversion of a ``CachedMatrix``.
"""
from typing import Optional

import numpy as np

from core.cached_matrix import CachedMatrix
from core.exceptions import NonFiniteMatrixError
from core.fingerprint import fingerprint, fingerprints_match
from utils.linops import invert
from utils.logging_config import get_logger

logger = get_logger(__name__)


def cache_solve(cache: CachedMatrix, assume_a: str = "gen",
                check_finite: bool = True) -> Optional[np.ndarray]:
    """
    Return the inverse of the matrix held by ``cache``.

    The stored matrix fingerprint is checked first. If the matrix no longer
    matches it, it was changed outside ``set_matrix``; since there is no way
    to tell whether that change was intended, nothing is computed and
    ``None`` is returned so the caller re-registers the matrix.

    Otherwise a cached inverse is returned as-is, unless its own recorded
    fingerprint shows it was tampered with. On a miss the inverse is
    computed with ``utils.linops.invert``, stored together with its
    fingerprint, and returned.

    Only options that leave the result an inverse are accepted; solving
    against a right-hand side goes through ``invert(A, b=...)`` directly.
    A cache hit ignores the options.

    Raises:
        NonFiniteMatrixError: the matrix was registered with NaN or inf
            entries, so re-entering it can never pass the check.
        SingularMatrixError, MatrixShapeError: propagated from the solver.
            The cache is left unchanged.
    """
    matrix = cache.get_matrix()
    matrix_fp = cache.get_matrix_fingerprint()
    inverse = cache.get_inverse()
    inverse_fp = cache.get_inverse_fingerprint()

    if not np.isfinite(matrix_fp):
        raise NonFiniteMatrixError(
            f"Registered matrix of shape {matrix.shape} has a non-finite fingerprint ({matrix_fp})")

    if not fingerprints_match(fingerprint(matrix), matrix_fp):
        logger.warning("matrix altered - re-enter using set_matrix()")
        return None

    if inverse is not None:
        if inverse_fp is None or fingerprints_match(fingerprint(inverse), inverse_fp):
            logger.info("getting cached inverse")
            return inverse
        logger.warning("cached inverse altered - recomputing")

    logger.info("inverting matrix")
    inv = invert(matrix, assume_a=assume_a, check_finite=check_finite)
    cache.set_inverse(inv)
    cache.set_inverse_fingerprint(fingerprint(inv))
    return cache.get_inverse()
