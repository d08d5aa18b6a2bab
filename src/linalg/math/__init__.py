"""
Math modules для linalg

Матричные операции 2x2 / 3x3 и численные примитивы сравнения float.
"""

# Numerical Safeguards
from src.linalg.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    IDENTITY_TOL,
    SINGULAR_DET_TOL,
    # Float checks
    is_close,
    is_valid_float,
    is_zero,
    validate_tolerance,
)

# Matrix Ops
from src.linalg.math.matrix_ops import (
    SIGN_PATTERN_3,
    SIGN_ROW_3,
    InversionConfig,
    add,
    allclose,
    determinant,
    determinant2,
    determinant3,
    extract_2x2,
    inverse,
    inverse2,
    inverse3,
    is_identity,
    multiply,
    scalar_multiply,
    transpose,
)

__all__ = [
    # Numerical Safeguards - Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "IDENTITY_TOL",
    "SINGULAR_DET_TOL",
    # Numerical Safeguards - Float checks
    "is_close",
    "is_valid_float",
    "is_zero",
    "validate_tolerance",
    # Matrix Ops - Constants
    "SIGN_PATTERN_3",
    "SIGN_ROW_3",
    # Matrix Ops - Config
    "InversionConfig",
    # Matrix Ops - Arithmetic
    "add",
    "multiply",
    "scalar_multiply",
    "transpose",
    # Matrix Ops - Determinants
    "determinant",
    "determinant2",
    "determinant3",
    "extract_2x2",
    # Matrix Ops - Inversion
    "inverse",
    "inverse2",
    "inverse3",
    # Matrix Ops - Comparisons
    "allclose",
    "is_identity",
]
