################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for N x 1 vectors."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from fixed_linalg.config.linalg_params import LinalgParams
from fixed_linalg.config.linalg_params import ToleranceParams
from fixed_linalg.errors import VectorError
from fixed_linalg.errors import VectorInvalidDimensionsError
from fixed_linalg.vector.vector_n import VectorN


def test_construction_and_get() -> None:
    """Entries are readable at every valid index."""
    values: list[float] = [1.5, -2.0, 3.25, 0.0]
    vector: VectorN = VectorN(values)

    assert vector.dimensions() == 4
    assert len(vector) == 4
    for i, value in enumerate(values):
        assert vector.get(i) == value


def test_get_out_of_range() -> None:
    """Lookups at or past the end return None."""
    vector: VectorN = VectorN([1.0, 2.0, 3.0])

    assert vector.get(3) is None
    assert vector.get(100) is None
    assert vector.get(-1) is None


def test_construction_copies_input() -> None:
    """The vector does not alias the caller's data."""
    source: NDArray[np.float64] = np.array([1.0, 2.0], dtype=float)
    vector: VectorN = VectorN(source)
    source[0] = 9.0
    assert vector.get(0) == 1.0

    exported: NDArray[np.float64] = vector.data()
    exported[1] = 9.0
    assert vector.get(1) == 2.0


def test_empty_vector_rejected() -> None:
    """A vector needs at least one entry."""
    with pytest.raises(VectorInvalidDimensionsError):
        VectorN([])


def test_nested_data_rejected() -> None:
    """Only one-dimensional input is accepted."""
    with pytest.raises(VectorError):
        VectorN([[1.0, 2.0], [3.0, 4.0]])


def test_zeros() -> None:
    """Zero vectors have the requested dimension."""
    vector: VectorN = VectorN.zeros(3)
    assert vector == VectorN([0.0, 0.0, 0.0])
    with pytest.raises(VectorInvalidDimensionsError):
        VectorN.zeros(0)


def test_dotproduct() -> None:
    """Dot product of two 4-vectors."""
    a: VectorN = VectorN([1.0, 2.0, 3.0, 4.0])
    b: VectorN = VectorN([6.9, 4.2, 3.5, 6.7])

    assert np.isclose(a.dotproduct(b), 52.6)


def test_dotproduct_commutative() -> None:
    """Swapping operands does not change the dot product."""
    rng: np.random.Generator = np.random.default_rng(7)
    for n in (1, 2, 5, 9):
        a: VectorN = VectorN(rng.normal(size=n))
        b: VectorN = VectorN(rng.normal(size=n))
        assert np.isclose(a.dotproduct(b), b.dotproduct(a))


def test_dotproduct_dimension_mismatch() -> None:
    """Vectors of different dimensions cannot be dotted."""
    a: VectorN = VectorN([1.0, 2.0, 3.0])
    b: VectorN = VectorN([1.0, 2.0])
    with pytest.raises(VectorInvalidDimensionsError):
        a.dotproduct(b)


def test_scalar_multiplication() -> None:
    """In-place scalar multiplication scales every entry."""
    vector: VectorN = VectorN([1.0, 2.0, 3.0, 4.0])
    vector.scalar_multiply(5.0)
    assert vector.data().tolist() == [5.0, 10.0, 15.0, 20.0]


def test_scalar_multiplication_identity_and_zero() -> None:
    """Scaling by one keeps entries, scaling by zero clears them."""
    vector: VectorN = VectorN([1.0, -2.0, 3.5])

    assert vector.scalar_multiply_copy(1.0) == vector
    assert vector.scalar_multiply_copy(0.0) == VectorN([0.0, 0.0, 0.0])

    vector.scalar_multiply(1.0)
    assert vector.data().tolist() == [1.0, -2.0, 3.5]

    vector.scalar_multiply(0.0)
    assert vector == VectorN([0.0, 0.0, 0.0])


def test_scalar_multiply_copy_leaves_source() -> None:
    """The copying variant does not touch the original vector."""
    vector: VectorN = VectorN([1.0, 2.0])
    scaled: VectorN = vector.scalar_multiply_copy(3.0)

    assert scaled.data().tolist() == [3.0, 6.0]
    assert vector.data().tolist() == [1.0, 2.0]


def test_vector_addition() -> None:
    """Addition returns a new vector."""
    a: VectorN = VectorN([1.0, 2.0, 3.0, 4.0])
    b: VectorN = VectorN([5.0, 6.0, 7.0, 8.0])

    assert (a + b).data().tolist() == [6.0, 8.0, 10.0, 12.0]
    assert a.add(b) == a + b
    assert a.data().tolist() == [1.0, 2.0, 3.0, 4.0]


def test_vector_addition_with_addassign() -> None:
    """Compound addition updates the left operand."""
    a: VectorN = VectorN([1.0, 2.0, 3.0, 4.0])
    b: VectorN = VectorN([5.0, 6.0, 7.0, 8.0])
    original: VectorN = a

    a += b

    assert a is original
    assert a.data().tolist() == [6.0, 8.0, 10.0, 12.0]

    a.add_in_place(b)
    assert a.data().tolist() == [11.0, 14.0, 17.0, 20.0]


def test_vector_addition_laws() -> None:
    """Addition is commutative and associative within rounding."""
    rng: np.random.Generator = np.random.default_rng(11)
    a: VectorN = VectorN(rng.normal(size=6))
    b: VectorN = VectorN(rng.normal(size=6))
    c: VectorN = VectorN(rng.normal(size=6))

    assert (a + b).is_close(b + a)
    assert ((a + b) + c).is_close(a + (b + c))


def test_vector_addition_dimension_mismatch() -> None:
    """Adding vectors of different dimensions fails."""
    a: VectorN = VectorN([1.0, 2.0])
    b: VectorN = VectorN([1.0, 2.0, 3.0])
    with pytest.raises(VectorInvalidDimensionsError):
        a + b
    with pytest.raises(VectorInvalidDimensionsError):
        a += b


def test_equality() -> None:
    """Equality is exact and element-wise."""
    assert VectorN([1.0, 2.0]) == VectorN([1.0, 2.0])
    assert VectorN([1.0, 2.0]) != VectorN([1.0, 2.5])
    assert VectorN([1.0, 2.0]) != VectorN([1.0, 2.0, 0.0])
    assert VectorN([float("nan")]) != VectorN([float("nan")])


def test_is_close_tolerance() -> None:
    """Approximate equality follows the configured tolerance."""
    a: VectorN = VectorN([1.0, 2.0])
    b: VectorN = VectorN([1.0, 2.0 + 1e-6])

    assert not a.is_close(b)

    loose: LinalgParams = LinalgParams.defaults().replace(
        tolerance=ToleranceParams(atol=1e-3)
    )
    assert a.is_close(b, loose)
    assert not a.is_close(VectorN([1.0]), loose)
