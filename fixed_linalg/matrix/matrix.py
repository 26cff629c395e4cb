################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Dense R x C matrices stored as a flat row-major array.

Entry (i, j) of an R x C matrix lives at flat index i * C + j. Reads,
writes, tuple extraction, multiplication and the square-only operations all
use this addressing.
"""

from __future__ import annotations

import logging
import math
from typing import Any
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from fixed_linalg.config.linalg_params import LinalgParams
from fixed_linalg.config.linalg_params import resolve_params
from fixed_linalg.errors import MatrixInvalidDimensionsError
from fixed_linalg.errors import MatrixUndefinedIndexError
from fixed_linalg.errors import SingularMatrixError
from fixed_linalg.math_utils.validation import as_flat_array
from fixed_linalg.math_utils.validation import index_in_range
from fixed_linalg.matrix.direction import Direction
from fixed_linalg.vector.vector_n import VectorN


_LOG: logging.Logger = logging.getLogger(__name__)


def _is_dimension(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Matrix:
    """
    An R x C matrix of double-precision values
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        data: Sequence[float] | NDArray[np.float64],
    ) -> None:
        """Create a matrix from row-major data, copying the input."""
        if not (_is_dimension(rows) and _is_dimension(cols)):
            _LOG.debug("Rejecting %r x %r matrix", rows, cols)
            raise MatrixInvalidDimensionsError(
                f"Matrix dimensions must be integers, got {rows!r} x {cols!r}"
            )
        rows = int(rows)
        cols = int(cols)

        if rows < 1 or cols < 1:
            _LOG.debug("Rejecting %s x %s matrix", rows, cols)
            raise MatrixInvalidDimensionsError(
                f"Matrix dimensions must be positive, got {rows} x {cols}"
            )

        try:
            values: NDArray[np.float64] = as_flat_array(data, "data")
        except ValueError as exc:
            raise MatrixInvalidDimensionsError(str(exc)) from exc

        if values.size != rows * cols:
            _LOG.debug(
                "Rejecting %d entries for a %d x %d matrix", values.size, rows, cols
            )
            raise MatrixInvalidDimensionsError()

        self._rows: int = rows
        self._cols: int = cols
        self._data: NDArray[np.float64] = values

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Return the n x n identity matrix."""
        if not _is_dimension(n) or n < 1:
            raise MatrixInvalidDimensionsError(
                f"Identity dimension must be a positive integer, got {n!r}"
            )
        values: list[float] = [1.0 if k % n == k // n else 0.0 for k in range(n * n)]
        return cls(n, n, values)

    @property
    def rows(self) -> int:
        """Return the number of rows R."""
        return self._rows

    @property
    def cols(self) -> int:
        """Return the number of columns C."""
        return self._cols

    def dimensions(self) -> tuple[int, int]:
        """Return the dimensions in the form (rows, columns)."""
        return self._rows, self._cols

    def data(self) -> NDArray[np.float64]:
        """Return a copy of the flat row-major entries."""
        return self._data.copy()

    #
    # Reading and writing
    #

    def get(self, i: int, j: int) -> Optional[float]:
        """Return the entry at row i and column j, or None if it does not exist."""
        if not (index_in_range(i, self._rows) and index_in_range(j, self._cols)):
            return None
        return float(self._data[i * self._cols + j])

    def set(self, entry: float, i: int, j: int) -> None:
        """Write the entry at row i and column j."""
        if not (index_in_range(i, self._rows) and index_in_range(j, self._cols)):
            raise MatrixUndefinedIndexError()
        self._data[i * self._cols + j] = entry

    def fill(self, k: float) -> None:
        """Overwrite every entry with k."""
        self._data.fill(k)

    #
    # Tuples
    #

    def get_tuple(
        self,
        i: int,
        direction: Direction,
    ) -> Optional[NDArray[np.float64]]:
        """
        Return row or column i as a new array

        Rows have C entries and columns have R entries. Returns None if the
        matrix has no such row or column.
        """
        size: int = self._rows if direction == Direction.ROW else self._cols
        if not index_in_range(i, size):
            return None
        return self._tuple(int(i), direction)

    def get_row(self, i: int) -> Optional[NDArray[np.float64]]:
        """Return row i, or None if it does not exist."""
        return self.get_tuple(i, Direction.ROW)

    def get_column(self, j: int) -> Optional[NDArray[np.float64]]:
        """Return column j, or None if it does not exist."""
        return self.get_tuple(j, Direction.COLUMN)

    def _tuple(self, i: int, direction: Direction) -> NDArray[np.float64]:
        if direction == Direction.ROW:
            start: int = self._cols * i
            return self._data[start : start + self._cols].copy()

        # Walk the flat array from the column's first entry with a stride of C
        return self._data[i :: self._cols].copy()

    #
    # Arithmetic
    #

    def scalar_multiply(self, a: float) -> None:
        """Multiply every entry by a in place."""
        self._data *= a

    def add(self, other: Matrix) -> Matrix:
        """Return the element-wise sum of this matrix and other."""
        self._require_same_dimensions(other)
        return Matrix(self._rows, self._cols, self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        """Return the element-wise difference of this matrix and other."""
        self._require_same_dimensions(other)
        return Matrix(self._rows, self._cols, self._data - other._data)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Return the matrix product of this R x C matrix and a C x K matrix

        Each output entry is the dot product of a row of this matrix with a
        column of other, packed row-major into an R x K result.
        """
        if other.rows != self._cols:
            _LOG.debug(
                "Cannot multiply %d x %d by %d x %d",
                self._rows,
                self._cols,
                other.rows,
                other.cols,
            )
            raise MatrixInvalidDimensionsError(
                f"Cannot multiply a {self._rows} x {self._cols} matrix "
                f"by a {other.rows} x {other.cols} matrix"
            )

        k: int = other.cols

        row_tuples: list[VectorN] = [
            VectorN(self._tuple(i, Direction.ROW)) for i in range(self._rows)
        ]
        column_tuples: list[VectorN] = [
            VectorN(other._tuple(j, Direction.COLUMN)) for j in range(k)
        ]

        dotproducts: list[float] = []
        for index in range(self._rows * k):
            y: int = index // k
            x: int = index % k
            dotproducts.append(row_tuples[y].dotproduct(column_tuples[x]))

        return Matrix(self._rows, k, dotproducts)

    def is_close(self, other: Matrix, params: LinalgParams | None = None) -> bool:
        """Return True if both matrices agree within the configured tolerance."""
        if self.dimensions() != other.dimensions():
            return False
        resolved: LinalgParams = resolve_params(params)
        return bool(
            np.allclose(
                self._data,
                other._data,
                atol=resolved.tolerance.atol,
                rtol=resolved.tolerance.rtol,
            )
        )

    #
    # 2x2 operations
    #

    def determinant(self) -> float:
        """Return the determinant of a 2x2 matrix."""
        self._require_dimensions(2, 2, "determinant")

        a, b, c, d = (float(value) for value in self._data)
        return a * d - b * c

    def inverse(self, params: LinalgParams | None = None) -> Matrix:
        """
        Return the inverse of a 2x2 matrix

        For [a, b; c, d] this swaps a and d, negates b and c, and scales by
        1 / det. Raises SingularMatrixError when |det| does not exceed
        params.inverse.singular_eps or when 1 / det overflows.
        """
        self._require_dimensions(2, 2, "inverse")
        resolved: LinalgParams = resolve_params(params)

        det: float = self.determinant()
        if abs(det) <= resolved.inverse.singular_eps:
            _LOG.debug("Refusing to invert singular matrix %r", self)
            raise SingularMatrixError(
                f"Matrix is singular, determinant {det} is not invertible"
            )

        scale: float = 1.0 / det
        if not math.isfinite(scale):
            _LOG.debug("Refusing to invert matrix %r, 1 / det overflows", self)
            raise SingularMatrixError(
                f"Matrix is numerically singular, 1 / {det} is not finite"
            )

        values: NDArray[np.float64] = self._data.copy()

        # Switch a and d
        values[[0, 3]] = values[[3, 0]]

        # Negate b and c
        values[1] *= -1.0
        values[2] *= -1.0

        inverse: Matrix = Matrix(2, 2, values)
        inverse.scalar_multiply(scale)

        return inverse

    #
    # Transformations
    #

    def transform(self, vector: VectorN) -> VectorN:
        """
        Return this N x N matrix applied to an N-dimensional vector

        The result is the sum of the matrix columns, each weighted by the
        matching vector entry.
        """
        n: int = self._require_square("transform")
        if vector.dimensions() != n:
            _LOG.debug(
                "Cannot transform %d-vector by %d x %d matrix",
                vector.dimensions(),
                n,
                n,
            )
            raise MatrixInvalidDimensionsError(
                f"Expected a {n}-dimensional vector, got {vector.dimensions()}"
            )

        weights: NDArray[np.float64] = vector.data()
        transformed: VectorN = VectorN.zeros(n)

        for i in range(n):
            column: VectorN = VectorN(self._tuple(i, Direction.COLUMN))
            transformed += column.scalar_multiply_copy(float(weights[i]))

        return transformed

    #
    # Shape checks
    #

    def _require_same_dimensions(self, other: Matrix) -> None:
        if self.dimensions() != other.dimensions():
            _LOG.debug(
                "Matrix dimension mismatch: %s vs %s",
                self.dimensions(),
                other.dimensions(),
            )
            raise MatrixInvalidDimensionsError()

    def _require_dimensions(self, rows: int, cols: int, operation: str) -> None:
        if self.dimensions() != (rows, cols):
            raise MatrixInvalidDimensionsError(
                f"{operation} requires a {rows} x {cols} matrix, "
                f"got {self._rows} x {self._cols}"
            )

    def _require_square(self, operation: str) -> int:
        if self._rows != self._cols:
            raise MatrixInvalidDimensionsError(
                f"{operation} requires a square matrix, "
                f"got {self._rows} x {self._cols}"
            )
        return self._rows

    #
    # Operators
    #

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dimensions() == other.dimensions() and bool(
            np.all(self._data == other._data)
        )

    # Entries are mutable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data.tolist()!r})"
