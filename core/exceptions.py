# core/exceptions.py

class CacheMatrixError(Exception):
    """Base exception for cachematrix errors."""
    pass

class MatrixShapeError(CacheMatrixError):
    """Raised when a matrix is not 2-D and square where inversion needs it."""
    pass

class SingularMatrixError(CacheMatrixError):
    """Raised when the solver finds the matrix is not invertible."""
    pass

class ConfigError(CacheMatrixError):
    """Raised when a demo configuration file cannot be read or validated."""
    pass

class NonFiniteMatrixError(CacheMatrixError):
    """Raised when a registered matrix holds NaN or infinite entries."""
    pass
