"""
Numerical Safeguards - float сравнения для матричной арифметики

Модуль собирает epsilon-параметры и примитивы сравнения float,
которые используются матричными операциями:
- Проверка валидности float (не NaN, не Inf)
- Сравнение с относительной/абсолютной толерантностью
- Детекция нулевого определителя

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float сравнения всегда учитывают машинную точность
2. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close / allclose
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close / allclose
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Толерантность проверки A · A⁻¹ ≈ I
IDENTITY_TOL: Final[float] = 1e-4

# Порог вырожденности: |det| <= SINGULAR_DET_TOL → SingularMatrix
# 0.0 - только точный ноль
SINGULAR_DET_TOL: Final[float] = 0.0


# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-5, abs_tol=1e-4)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (tol=0.0 → только точный ноль)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def validate_tolerance(tol: float, name: str) -> None:
    """
    Валидация толерантности: конечная и неотрицательная.

    Raises:
        ValueError: Если tol < 0 или NaN/Inf
    """
    if not is_valid_float(tol):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {tol}")

    if tol < 0:
        raise ValueError(f"{name} must be non-negative, got {tol}")
