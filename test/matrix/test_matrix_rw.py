################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix reads and writes."""

from __future__ import annotations

import pytest

from fixed_linalg.errors import MatrixUndefinedIndexError
from fixed_linalg.matrix.matrix import Matrix


def test_successful_get() -> None:
    """Entries are addressed row-major."""
    matrix: Matrix = Matrix(2, 2, [3.14, 2.18, 6.28, 0.0])

    assert matrix.get(0, 0) == 3.14
    assert matrix.get(0, 1) == 2.18
    assert matrix.get(1, 0) == 6.28
    assert matrix.get(1, 1) == 0.0


def test_get_non_square() -> None:
    """Row-major addressing uses the column count as stride."""
    matrix: Matrix = Matrix(2, 3, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])

    assert matrix.get(0, 2) == 2.0
    assert matrix.get(1, 0) == 3.0
    assert matrix.get(1, 2) == 5.0


def test_unsuccessful_get() -> None:
    """Out-of-range lookups return None."""
    matrix: Matrix = Matrix(2, 2, [3.14, 2.18, 6.28, 0.0])

    assert matrix.get(5, 20) is None
    assert matrix.get(2, 0) is None
    assert matrix.get(0, 2) is None
    assert matrix.get(-1, 0) is None


def test_successful_set() -> None:
    """Writes land at the addressed entry."""
    matrix: Matrix = Matrix(2, 2, [3.14, 2.18, 6.28, 0.0])

    matrix.set(6.9, 0, 1)

    assert matrix.get(0, 1) == 6.9
    assert matrix.data().tolist() == [3.14, 6.9, 6.28, 0.0]


def test_unsuccessful_set() -> None:
    """Out-of-range writes fail and leave the matrix unchanged."""
    matrix: Matrix = Matrix(2, 2, [3.14, 2.18, 6.28, 0.0])

    with pytest.raises(MatrixUndefinedIndexError):
        matrix.set(6.9, 500, 600)
    with pytest.raises(MatrixUndefinedIndexError):
        matrix.set(6.9, 2, 0)
    with pytest.raises(MatrixUndefinedIndexError):
        matrix.set(6.9, 0, 2)

    assert matrix.data().tolist() == [3.14, 2.18, 6.28, 0.0]


def test_fill() -> None:
    """Fill overwrites every entry."""
    matrix: Matrix = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])

    matrix.fill(0.0)

    assert matrix.data().tolist() == [0.0, 0.0, 0.0, 0.0]
    assert matrix.dimensions() == (2, 2)
