################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for matrix and vector comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Absolute tolerance for approximate equality
TOLERANCE_ATOL: float = 1e-9
# Relative tolerance for approximate equality
TOLERANCE_RTOL: float = 0.0

# Largest |det| treated as singular when inverting, 0.0 means exactly zero
INVERSE_SINGULAR_EPS: float = 0.0


class LinalgParamsError(Exception):
    """Raised when linear algebra parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a finite non-negative value."""
    if not math.isfinite(value):
        raise LinalgParamsError(f"{name} must be finite")
    if value < 0.0:
        raise LinalgParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class ToleranceParams:
    """Tolerances for approximate comparisons."""

    # Absolute tolerance
    atol: float = TOLERANCE_ATOL
    # Relative tolerance
    rtol: float = TOLERANCE_RTOL


@dataclass(frozen=True)
class InverseParams:
    """Singularity threshold for 2x2 inversion."""

    # Largest |det| rejected as singular
    singular_eps: float = INVERSE_SINGULAR_EPS


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for linear algebra operations."""

    tolerance: ToleranceParams
    inverse: InverseParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            inverse=InverseParams(),
        )

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative(self.tolerance.atol, "tolerance.atol")
        _require_non_negative(self.tolerance.rtol, "tolerance.rtol")
        _require_non_negative(self.inverse.singular_eps, "inverse.singular_eps")

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def resolve_params(params: LinalgParams | None) -> LinalgParams:
    """Return validated parameters, falling back to the defaults."""
    resolved: LinalgParams = params if params is not None else LinalgParams.defaults()
    resolved.validate()
    return resolved


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
