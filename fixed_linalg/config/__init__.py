################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for linear algebra operations."""

from __future__ import annotations

from fixed_linalg.config.linalg_params import InverseParams
from fixed_linalg.config.linalg_params import LinalgParams
from fixed_linalg.config.linalg_params import LinalgParamsError
from fixed_linalg.config.linalg_params import ToleranceParams


__all__ = [
    "InverseParams",
    "LinalgParams",
    "LinalgParamsError",
    "ToleranceParams",
]
