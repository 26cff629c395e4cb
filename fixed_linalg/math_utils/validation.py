################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for matrix and vector inputs."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def as_flat_array(
    values: Sequence[float] | NDArray[np.float64],
    name: str,
) -> NDArray[np.float64]:
    """Return an owned one-dimensional float64 copy of the input.

    Non-finite values are kept as-is so NaN and infinities propagate with
    IEEE-754 semantics.
    """
    try:
        array: NDArray[np.float64] = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a sequence of numbers") from exc

    if array.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional")

    return array


def index_in_range(index: int, size: int) -> bool:
    """Return True if index addresses one of size entries."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        return False
    return 0 <= int(index) < size
