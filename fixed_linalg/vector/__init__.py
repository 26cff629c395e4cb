################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension vectors."""

from __future__ import annotations

from fixed_linalg.vector.vector_n import VectorN


__all__ = [
    "VectorN",
]
