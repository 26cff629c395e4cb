################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension dense matrices and vectors."""

from __future__ import annotations

from fixed_linalg.config.linalg_params import InverseParams
from fixed_linalg.config.linalg_params import LinalgParams
from fixed_linalg.config.linalg_params import LinalgParamsError
from fixed_linalg.config.linalg_params import ToleranceParams
from fixed_linalg.errors import LinalgError
from fixed_linalg.errors import MatrixError
from fixed_linalg.errors import MatrixInvalidDimensionsError
from fixed_linalg.errors import MatrixUndefinedIndexError
from fixed_linalg.errors import SingularMatrixError
from fixed_linalg.errors import VectorError
from fixed_linalg.errors import VectorInvalidDimensionsError
from fixed_linalg.matrix.direction import Direction
from fixed_linalg.matrix.matrix import Matrix
from fixed_linalg.vector.vector_n import VectorN


__all__ = [
    "Direction",
    "InverseParams",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Matrix",
    "MatrixError",
    "MatrixInvalidDimensionsError",
    "MatrixUndefinedIndexError",
    "SingularMatrixError",
    "ToleranceParams",
    "VectorError",
    "VectorInvalidDimensionsError",
    "VectorN",
]
