"""
Matrix Errors - таксономия ошибок матричных операций

Все операции валидируют предусловия синхронно и бросают исключение сразу:
частичных результатов нет, ошибки не перехватываются внутри библиотеки.
"""


class MatrixError(Exception):
    """Базовая ошибка для всех матричных операций."""
    pass


class DimensionMismatch(MatrixError):
    """
    Размерности операндов нарушают предусловие операции.

    Примеры:
    - add: размерности операндов различаются
    - multiply: a.cols() != b.row_count()
    - inverse2/inverse3: матрица не строго 2x2 / 3x3
    """
    pass


class SingularMatrix(MatrixError):
    """
    Определитель равен нулю (в пределах singular_tol) - обратной матрицы нет.
    """
    pass


class MalformedInput(MatrixError):
    """
    Невалидные данные при построении матрицы.

    Пустые строки, jagged rows (строки разной длины), нечисловые значения.
    """
    pass
