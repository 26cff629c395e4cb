################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""N x 1 vectors of double-precision values."""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from fixed_linalg.config.linalg_params import LinalgParams
from fixed_linalg.config.linalg_params import resolve_params
from fixed_linalg.errors import VectorInvalidDimensionsError
from fixed_linalg.math_utils.validation import as_flat_array
from fixed_linalg.math_utils.validation import index_in_range


_LOG: logging.Logger = logging.getLogger(__name__)


class VectorN:
    """An N x 1 vector.

    The dimension N is fixed when the vector is created. Scalar
    multiplication and compound addition mutate the entries but never
    change the length.
    """

    def __init__(self, data: Sequence[float] | NDArray[np.float64]) -> None:
        """Create a vector from a sequence of values, copying the input."""
        try:
            values: NDArray[np.float64] = as_flat_array(data, "data")
        except ValueError as exc:
            raise VectorInvalidDimensionsError(str(exc)) from exc

        if values.size == 0:
            _LOG.debug("Rejecting empty vector")
            raise VectorInvalidDimensionsError("data must have at least one entry")

        self._data: NDArray[np.float64] = values

    @classmethod
    def zeros(cls, n: int) -> VectorN:
        """Return the N-dimensional zero vector."""
        if n < 1:
            raise VectorInvalidDimensionsError("n must be positive")
        return cls(np.zeros(n, dtype=np.float64))

    def dimensions(self) -> int:
        """Return the dimension N."""
        return int(self._data.size)

    def get(self, i: int) -> Optional[float]:
        """Return entry i, or None if it does not exist."""
        if not index_in_range(i, self._data.size):
            return None
        return float(self._data[i])

    def data(self) -> NDArray[np.float64]:
        """Return a copy of the entries."""
        return self._data.copy()

    def dotproduct(self, other: VectorN) -> float:
        """Return the dot product of this vector and other."""
        self._require_same_dimensions(other)
        return float(np.dot(self._data, other._data))

    def scalar_multiply(self, n: float) -> None:
        """Multiply every entry by n in place."""
        self._data *= n

    def scalar_multiply_copy(self, n: float) -> VectorN:
        """Return a new vector with every entry multiplied by n."""
        return VectorN(self._data * n)

    def add(self, other: VectorN) -> VectorN:
        """Return the element-wise sum of this vector and other."""
        self._require_same_dimensions(other)
        return VectorN(self._data + other._data)

    def add_in_place(self, other: VectorN) -> None:
        """Replace this vector's entries with the element-wise sum."""
        self._require_same_dimensions(other)
        self._data = self._data + other._data

    def is_close(self, other: VectorN, params: LinalgParams | None = None) -> bool:
        """Return True if both vectors agree within the configured tolerance."""
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

    def _require_same_dimensions(self, other: VectorN) -> None:
        if self.dimensions() != other.dimensions():
            _LOG.debug(
                "Vector dimension mismatch: %d vs %d",
                self.dimensions(),
                other.dimensions(),
            )
            raise VectorInvalidDimensionsError()

    def __add__(self, other: Any) -> VectorN:
        if not isinstance(other, VectorN):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Any) -> VectorN:
        if not isinstance(other, VectorN):
            return NotImplemented
        self.add_in_place(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorN):
            return NotImplemented
        return self.dimensions() == other.dimensions() and bool(
            np.all(self._data == other._data)
        )

    # Entries are mutable
    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self.dimensions()

    def __repr__(self) -> str:
        return f"VectorN({self._data.tolist()!r})"
