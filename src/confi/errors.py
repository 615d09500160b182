# src/confi/errors.py
"""
Exception hierarchy for confi.

All construction failures are ``ValueError`` subclasses so that pydantic
reports them as ``ValidationError`` when raised inside a model validator,
while the classmethod constructors let them propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = ["ConfidenceError", "OutOfRangeError", "InvalidRangeError"]

# Distinguishes "raw not given" from an explicit raw=None.
_UNSET: Any = object()


class ConfidenceError(ValueError):
    """Base class for invalid probability or interval inputs."""


class OutOfRangeError(ConfidenceError):
    """A probability (after percentage normalization) is outside [0, 1]."""

    def __init__(
        self,
        value: Optional[float],
        *,
        raw: Any = _UNSET,
        representation: str = "fraction",
    ) -> None:
        self.value = value
        self.raw = value if raw is _UNSET else raw
        self.representation = representation
        if representation == "percentage":
            msg = (
                f"a percentage must sit between 0 and 100, provided: {self.raw!r}"
            )
        else:
            msg = f"a probability must sit between 0 and 1, provided: {self.raw!r}"
        super().__init__(msg)


class InvalidRangeError(ConfidenceError):
    """A confidence interval was given lower > upper (or a NaN bound)."""

    def __init__(self, lower: Any, upper: Any, reason: str = "") -> None:
        self.lower = lower
        self.upper = upper
        detail = reason or "lower bound must not exceed upper bound"
        super().__init__(f"invalid interval [{lower!r}, {upper!r}]: {detail}")
