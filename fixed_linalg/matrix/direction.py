################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Direction selector for extracting matrix tuples."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Whether a matrix tuple is a row or a column."""

    ROW = "row"
    COLUMN = "column"
