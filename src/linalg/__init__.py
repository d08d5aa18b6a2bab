"""
Small fixed-size linear algebra: Matrix container and 2x2 / 3x3 operations.

Pure functions over immutable matrices; every operation returns a new Matrix.
"""

from src.linalg.domain import Dimensions, Matrix
from src.linalg.errors import (
    DimensionMismatch,
    MalformedInput,
    MatrixError,
    SingularMatrix,
)
from src.linalg.math import (
    InversionConfig,
    add,
    allclose,
    determinant,
    determinant2,
    determinant3,
    inverse,
    inverse2,
    inverse3,
    is_identity,
    multiply,
    scalar_multiply,
    transpose,
)

__all__ = [
    # Domain
    "Dimensions",
    "Matrix",
    # Errors
    "MatrixError",
    "DimensionMismatch",
    "SingularMatrix",
    "MalformedInput",
    # Config
    "InversionConfig",
    # Operations
    "add",
    "multiply",
    "scalar_multiply",
    "transpose",
    "determinant",
    "determinant2",
    "determinant3",
    "inverse",
    "inverse2",
    "inverse3",
    "allclose",
    "is_identity",
]
