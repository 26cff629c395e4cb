################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension dense matrices."""

from __future__ import annotations

from fixed_linalg.matrix.direction import Direction
from fixed_linalg.matrix.matrix import Matrix


__all__ = [
    "Direction",
    "Matrix",
]
