"""
Matrix - Модель прямоугольной матрицы float

Immutable Pydantic модель (frozen=True). Сетка хранится row-major как
tuple[tuple[float, ...], ...]: внешний индекс - строка, внутренний - столбец.
Данные вызывающего копируются при построении, поэтому последующие изменения
исходных списков не влияют на матрицу.

ИНВАРИАНТЫ:
1. height >= 1, width >= 1
2. Все строки имеют ровно width элементов (без jagged rows)
3. Матрица не изменяется после построения; операции создают новый экземпляр
"""

import numbers
import sys
from typing import Any, NamedTuple, Optional, Sequence, TextIO

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.linalg.errors import MalformedInput


# =============================================================================
# DIMENSIONS
# =============================================================================


class Dimensions(NamedTuple):
    """Размерность матрицы (width, height)."""

    width: int  # Количество столбцов
    height: int  # Количество строк


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Прямоугольная матрица float фиксированного размера.

    Построение:
    - Matrix(values=rows) - pydantic валидация (ValidationError)
    - Matrix.from_rows(rows) - то же, но с MalformedInput
    - Matrix.identity(n) - единичная матрица n×n

    Доступ:
    - rows() / cols() / row_count() / dimensions()
    - m[i][j] - элемент строки i, столбца j
    """

    values: tuple[tuple[float, ...], ...] = Field(
        ..., min_length=1, description="Строки матрицы (row-major)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("values", mode="before")
    @classmethod
    def validate_numeric(cls, v: Any) -> Any:
        """
        Проверка типов элементов до приведения к float.

        Допускаются только int/float: строки и bool отклоняются.
        """
        if not isinstance(v, (list, tuple)):
            return v

        for row in v:
            if not isinstance(row, (list, tuple)):
                continue
            for value in row:
                if isinstance(value, bool) or not isinstance(value, numbers.Real):
                    raise ValueError(f"matrix elements must be numeric, got {value!r}")
        return v

    @field_validator("values")
    @classmethod
    def validate_rectangular(
        cls, v: tuple[tuple[float, ...], ...]
    ) -> tuple[tuple[float, ...], ...]:
        """
        Проверка прямоугольности: непустые строки одинаковой длины.
        """
        width = len(v[0])
        if width == 0:
            raise ValueError("matrix rows must be non-empty")

        for index, row in enumerate(v):
            if len(row) != width:
                raise ValueError(
                    f"row {index} has {len(row)} elements, expected {width} "
                    f"(jagged rows are not allowed)"
                )
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Построение матрицы из последовательности строк.

        Args:
            rows: Непустая последовательность непустых числовых строк равной длины

        Returns:
            Новая Matrix (данные скопированы)

        Raises:
            MalformedInput: Пустые/jagged/нечисловые данные
        """
        try:
            return cls(values=rows)
        except ValidationError as e:
            raise MalformedInput(f"Invalid matrix data: {e}") from e

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """
        Единичная матрица n×n.

        Raises:
            MalformedInput: Если n < 1
        """
        if n < 1:
            raise MalformedInput(f"identity size must be >= 1, got {n}")

        return cls(
            values=tuple(
                tuple(1.0 if row == col else 0.0 for col in range(n))
                for row in range(n)
            )
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        """Количество столбцов."""
        return len(self.values[0])

    @property
    def height(self) -> int:
        """Количество строк."""
        return len(self.values)

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """Сетка значений (row-major)."""
        return self.values

    def cols(self) -> int:
        return self.width

    def row_count(self) -> int:
        return self.height

    def dimensions(self) -> Dimensions:
        """Размерность (width, height)."""
        return Dimensions(self.width, self.height)

    def is_square(self) -> bool:
        return self.width == self.height

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.values[index]

    # -------------------------------------------------------------------------
    # Display (диагностика)
    # -------------------------------------------------------------------------

    def format_matrix(self) -> str:
        """Строки матрицы, значения через пробелы, одна строка матрицы на line."""
        return "\n".join("    ".join(str(v) for v in row) for row in self.values)

    def format_info(self) -> str:
        """Размерность и содержимое матрицы."""
        return (
            "DIMENSION .. \n"
            f"\tWidth: {self.width}\n"
            f"\tHeight: {self.height}\n"
            "\n"
            "MATRIX .. \n"
            f"{self.format_matrix()}"
        )

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Вывод строк матрицы в stream (default: sys.stdout)."""
        out = stream if stream is not None else sys.stdout
        out.write(self.format_matrix() + "\n")

    def display_info(self, stream: Optional[TextIO] = None) -> None:
        """Вывод размерности и строк матрицы в stream (default: sys.stdout)."""
        out = stream if stream is not None else sys.stdout
        out.write(self.format_info() + "\n")

    def __str__(self) -> str:
        return self.format_info()
