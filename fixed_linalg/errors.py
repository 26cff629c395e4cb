################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error types raised by matrix and vector operations."""

from __future__ import annotations


class LinalgError(Exception):
    """Base class for linear algebra errors."""


class MatrixError(LinalgError):
    """Raised when a matrix operation fails."""


class MatrixInvalidDimensionsError(MatrixError):
    """Raised when matrix dimensions do not match what an operation expects."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Expected an R x C matrix, received different dimensions."
        )


class MatrixUndefinedIndexError(MatrixError):
    """Raised when a non-existent matrix entry is written."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "An attempt to access a non-existent index was made."
        )


class SingularMatrixError(MatrixError):
    """Raised when inverting a matrix whose determinant is zero."""


class VectorError(LinalgError):
    """Raised when a vector operation fails."""


class VectorInvalidDimensionsError(VectorError):
    """Raised when vector dimensions do not match what an operation expects."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Expected an N-dimensional vector, received different dimensions."
        )
