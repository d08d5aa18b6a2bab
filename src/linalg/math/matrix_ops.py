"""
Matrix Ops - арифметика, определители и обращение матриц 2x2 / 3x3

Stateless функции над Matrix. Каждая операция валидирует размерности,
вычисляет результат и возвращает НОВУЮ Matrix; входы никогда не изменяются
и не разделяют storage с результатом.

Обращение 3x3 - метод алгебраических дополнений (cofactor/adjugate):
    1. Для клетки (j, i) минор берётся по строкам {(j+1)%3, (j+2)%3}
       и столбцам {(i+1)%3, (i+2)%3} (wraparound вместо удаления строки/столбца)
    2. cofactor[j][i] = det2(minor) * SIGN_PATTERN_3[j][i]
    3. adjugate = transpose(cofactor)
    4. inverse = adjugate * (1 / det3)

ФОРМУЛЫ:
    det2([[a, b], [c, d]]) = a*d - b*c
    inverse2([[a, b], [c, d]]) = [[d, -b], [-c, a]] / det2
    det3(A) = Σ_i A[0][i] * det2(minor(0, i)) * (+1, -1, +1)[i]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. multiply: (i, k) = Σ_j a[i][j] * b[j][k]
2. |det| <= singular_tol → SingularMatrix (default: только точный ноль)
3. Нарушение формы → DimensionMismatch
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.linalg.domain.matrix import Matrix
from src.linalg.errors import DimensionMismatch, SingularMatrix
from src.linalg.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    IDENTITY_TOL,
    SINGULAR_DET_TOL,
    is_close,
    is_valid_float,
    is_zero,
    validate_tolerance,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Знаки разложения по первой строке
SIGN_ROW_3: Final[tuple[int, int, int]] = (1, -1, 1)

# Шахматный знаковый паттерн алгебраических дополнений 3x3, индекс [row][col]
SIGN_PATTERN_3: Final[tuple[tuple[int, int, int], ...]] = (
    (1, -1, 1),
    (-1, 1, -1),
    (1, -1, 1),
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class InversionConfig:
    """Конфигурация обращения матриц.

    singular_tol: |det| <= singular_tol считается вырожденной матрицей.
    Default 0.0 - вырожденной считается только матрица с точным нулём.
    """
    singular_tol: float = SINGULAR_DET_TOL

    def __post_init__(self) -> None:
        validate_tolerance(self.singular_tol, "singular_tol")


_DEFAULT_INVERSION_CONFIG: Final[InversionConfig] = InversionConfig()


# =============================================================================
# ВАЛИДАЦИЯ ФОРМЫ
# =============================================================================


def _require_shape(a: Matrix, rows: int, cols: int, operation: str) -> None:
    if a.row_count() != rows or a.cols() != cols:
        raise DimensionMismatch(
            f"{operation} requires a {rows}x{cols} matrix, "
            f"got {a.row_count()}x{a.cols()}"
        )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная сумма двух матриц.

    Raises:
        DimensionMismatch: Если a.dimensions() != b.dimensions()
    """
    if a.dimensions() != b.dimensions():
        raise DimensionMismatch(
            f"add requires equal dimensions, got {tuple(a.dimensions())} "
            f"and {tuple(b.dimensions())} (width, height)"
        )

    return Matrix(
        values=tuple(
            tuple(a[y][x] + b[y][x] for x in range(a.cols()))
            for y in range(a.row_count())
        )
    )


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение a · b.

    Порядок множителей важен: результат имеет размер
    a.row_count() x b.cols(), элемент (i, k) = Σ_j a[i][j] * b[j][k].

    Raises:
        DimensionMismatch: Если a.cols() != b.row_count()

    Examples:
        >>> multiply(Matrix(values=[[1, 2]]), Matrix(values=[[3], [4]])).rows()
        ((11.0,),)
    """
    if a.cols() != b.row_count():
        raise DimensionMismatch(
            f"multiply requires a.cols() == b.row_count(), "
            f"got {a.cols()} and {b.row_count()}"
        )

    inner = a.cols()
    return Matrix(
        values=tuple(
            tuple(
                sum(a[i][j] * b[j][k] for j in range(inner))
                for k in range(b.cols())
            )
            for i in range(a.row_count())
        )
    )


def scalar_multiply(a: Matrix, scalar: float) -> Matrix:
    """Умножение каждого элемента на scalar."""
    return Matrix(values=tuple(tuple(v * scalar for v in row) for row in a.rows()))


def transpose(a: Matrix) -> Matrix:
    """
    Транспонирование: result[x][y] = a[y][x].

    Результат всегда в новом storage, вход не изменяется.
    """
    return Matrix(
        values=tuple(
            tuple(a[y][x] for y in range(a.row_count()))
            for x in range(a.cols())
        )
    )


# =============================================================================
# ОПРЕДЕЛИТЕЛИ
# =============================================================================


def extract_2x2(
    a: Matrix, x1: int, y1: int, x2: int, y2: int
) -> tuple[tuple[float, float], tuple[float, float]]:
    """
    Извлечение подматрицы 2x2 по столбцам {x1, x2} и строкам {y1, y2}.

    Пары индексов сортируются по возрастанию, чтобы подматрица сохраняла
    порядок строк и столбцов исходной матрицы.

    Returns:
        ((a[y1][x1], a[y1][x2]), (a[y2][x1], a[y2][x2]))
    """
    if x1 > x2:
        x1, x2 = x2, x1
    if y1 > y2:
        y1, y2 = y2, y1

    return (
        (a[y1][x1], a[y1][x2]),
        (a[y2][x1], a[y2][x2]),
    )


def _det2(grid: tuple[tuple[float, float], tuple[float, float]]) -> float:
    # Без проверки формы: вызывается только на результатах extract_2x2
    return grid[0][0] * grid[1][1] - grid[0][1] * grid[1][0]


def determinant2(a: Matrix) -> float:
    """
    Определитель матрицы 2x2: a[0][0]*a[1][1] - a[0][1]*a[1][0].

    Raises:
        DimensionMismatch: Если матрица не 2x2
    """
    _require_shape(a, 2, 2, "determinant2")
    return _det2(a.rows())


def determinant3(a: Matrix) -> float:
    """
    Определитель матрицы 3x3 разложением по первой строке.

    Для каждого столбца i минор берётся по строкам {1, 2} и столбцам
    {(i+1)%3, (i+2)%3}, вклад = a[0][i] * det2(minor) * SIGN_ROW_3[i].

    Raises:
        DimensionMismatch: Если матрица не 3x3
    """
    _require_shape(a, 3, 3, "determinant3")

    det = 0.0
    for i in range(3):
        minor = extract_2x2(a, (i + 1) % 3, 1, (i + 2) % 3, 2)
        det += a[0][i] * _det2(minor) * SIGN_ROW_3[i]
    return det


def determinant(a: Matrix) -> float:
    """
    Определитель матрицы 2x2 или 3x3.

    Raises:
        DimensionMismatch: Для любой другой формы
    """
    if a.dimensions() == (2, 2):
        return determinant2(a)
    if a.dimensions() == (3, 3):
        return determinant3(a)
    raise DimensionMismatch(
        f"determinant supports 2x2 and 3x3 matrices only, "
        f"got {a.row_count()}x{a.cols()}"
    )


# =============================================================================
# ОБРАЩЕНИЕ
# =============================================================================


def _reciprocal_det(det: float, config: InversionConfig, operation: str) -> float:
    """
    1 / det с проверкой вырожденности.

    Raises:
        SingularMatrix: det не конечен, |det| <= singular_tol или 1/det не конечен
    """
    if not is_valid_float(det):
        logger.debug(f"{operation}: determinant is not finite, det={det!r}")
        raise SingularMatrix(
            f"Matrix has no inverse: determinant is not finite ({det!r})"
        )

    if is_zero(det, tol=config.singular_tol):
        logger.debug(
            f"{operation}: singular matrix, det={det!r} "
            f"(singular_tol={config.singular_tol!r})"
        )
        raise SingularMatrix(f"Matrix has no inverse: determinant is {det!r}")

    scale = 1.0 / det
    if not is_valid_float(scale):
        logger.debug(f"{operation}: 1/det is not finite, det={det!r}")
        raise SingularMatrix(
            f"Matrix has no inverse: 1/det is not finite (determinant {det!r})"
        )
    return scale


def _require_finite(result: Matrix, operation: str) -> Matrix:
    """
    Проверка, что все элементы обратной матрицы конечны.

    Raises:
        SingularMatrix: Если результат содержит NaN/Inf
    """
    if not all(is_valid_float(v) for row in result.rows() for v in row):
        logger.debug(f"{operation}: inverse contains NaN/Inf")
        raise SingularMatrix("Matrix has no finite inverse: result contains NaN/Inf")
    return result


def inverse2(a: Matrix, config: Optional[InversionConfig] = None) -> Matrix:
    """
    Обратная матрица 2x2.

    inverse([[a, b], [c, d]]) = [[d, -b], [-c, a]] * (1 / (a*d - b*c))

    Args:
        a: Матрица 2x2
        config: Конфигурация (default: InversionConfig())

    Raises:
        DimensionMismatch: Если матрица не 2x2
        SingularMatrix: Если определитель нулевой или не конечен
    """
    _require_shape(a, 2, 2, "inverse2")
    config = config or _DEFAULT_INVERSION_CONFIG

    det = determinant2(a)
    logger.debug(f"inverse2: det={det!r}")
    scale = _reciprocal_det(det, config, "inverse2")

    adjugate = Matrix(
        values=(
            (a[1][1], -a[0][1]),
            (-a[1][0], a[0][0]),
        )
    )
    return _require_finite(scalar_multiply(adjugate, scale), "inverse2")


def inverse3(a: Matrix, config: Optional[InversionConfig] = None) -> Matrix:
    """
    Обратная матрица 3x3 методом алгебраических дополнений.

    Для каждой клетки (j, i) индексы x1=(i+1)%3, x2=(i+2)%3, y1=(j+1)%3,
    y2=(j+2)%3 выбирают две строки и два столбца, отличные от текущих.
    Минор умножается на SIGN_PATTERN_3[j][i] и записывается в cofactor[j][i].
    Транспонированная матрица дополнений (adjugate) делится на det3.

    Args:
        a: Матрица 3x3
        config: Конфигурация (default: InversionConfig())

    Raises:
        DimensionMismatch: Если матрица не 3x3
        SingularMatrix: Если определитель нулевой или не конечен
    """
    _require_shape(a, 3, 3, "inverse3")
    config = config or _DEFAULT_INVERSION_CONFIG

    cofactors = []
    for j in range(3):
        row = []
        for i in range(3):
            minor = extract_2x2(a, (i + 1) % 3, (j + 1) % 3, (i + 2) % 3, (j + 2) % 3)
            row.append(_det2(minor) * SIGN_PATTERN_3[j][i])
        cofactors.append(row)

    adjugate = transpose(Matrix(values=cofactors))

    det = determinant3(a)
    logger.debug(f"inverse3: det={det!r}")
    scale = _reciprocal_det(det, config, "inverse3")

    return _require_finite(scalar_multiply(adjugate, scale), "inverse3")


def inverse(a: Matrix, config: Optional[InversionConfig] = None) -> Matrix:
    """
    Обратная матрица 2x2 или 3x3.

    Raises:
        DimensionMismatch: Для любой другой формы
        SingularMatrix: Если определитель нулевой или не конечен
    """
    if a.dimensions() == (2, 2):
        return inverse2(a, config)
    if a.dimensions() == (3, 3):
        return inverse3(a, config)
    raise DimensionMismatch(
        f"inverse supports 2x2 and 3x3 matrices only, "
        f"got {a.row_count()}x{a.cols()}"
    )


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def allclose(
    a: Matrix,
    b: Matrix,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение матриц с толерантностью.

    Returns:
        False при разных размерностях, иначе True если все элементы is_close
    """
    if a.dimensions() != b.dimensions():
        return False

    return all(
        is_close(va, vb, rel_tol=rel_tol, abs_tol=abs_tol)
        for row_a, row_b in zip(a.rows(), b.rows())
        for va, vb in zip(row_a, row_b)
    )


def is_identity(a: Matrix, tol: float = IDENTITY_TOL) -> bool:
    """
    Проверка a ≈ I (абсолютная толерантность tol).

    Используется для проверки A · A⁻¹ ≈ I.
    """
    if not a.is_square():
        return False
    return allclose(a, Matrix.identity(a.row_count()), rel_tol=0.0, abs_tol=tol)
