# src/confi/probability.py
"""
Probability values: the validated numeric foundation shared by
significance and confidence levels.

Provides:
  - validate_fraction(value)    -> float in [0, 1]
  - validate_percentage(value)  -> float in [0, 1] (value / 100)
  - ProbabilityValue.fractional(value) / ProbabilityValue.percentage(value)

Notes:
  * Nothing is ever clamped: out-of-range input raises OutOfRangeError.
  * Percentages are range-checked on the percentage scale first, so every
    input outside [0, 100] is rejected even where ``value / 100`` would round
    back into [0, 1] (e.g. 100 + 1e-14, or a negative subnormal).
  * Equality compares an exact key built in two steps. First the fraction is
    mapped to the fixed point of ``f * 100 / 100``. Both constructors land on
    the same fixed point, so ``fractional(x) == percentage(x * 100)`` holds for
    every float x, with no rounding boundary in between. Then that fixed
    point is rounded to ``SIGNIFICANT_DIGITS`` significant digits, which
    absorbs the drift of complement conversions (``1 - 0.999`` against
    ``0.001``). The rounding is relative, so tiny levels such as 1e-13 stay
    distinct from 0.
    The key drives ``__eq__`` and ``__hash__``, so equality is an
    equivalence relation that agrees with hashing. The raw fraction is kept
    unrounded for numeric consumers.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Mapping

from pydantic import field_validator

from confi.errors import OutOfRangeError
from confi.models import ModelBase

__all__ = [
    "PERCENT_SCALE",
    "SIGNIFICANT_DIGITS",
    "validate_fraction",
    "validate_percentage",
    "coerce_probability",
    "ProbabilityValue",
]

LOG = logging.getLogger(__name__)

PERCENT_SCALE: float = 100.0
# Significant digits kept in the equality/hash key.
SIGNIFICANT_DIGITS: int = 12


# ---------- Validation ----------


def _as_real(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{what} must be a real number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        # Integers/Fractions too large for a double are certainly out of range.
        return math.inf if value > 0 else -math.inf


def validate_fraction(value: Any) -> float:
    """Return ``value`` as a float if it lies in [0, 1]; raise otherwise.

    Raises:
        TypeError: ``value`` is not a real number (``bool`` included).
        OutOfRangeError: ``value`` is outside [0, 1] or NaN.
    """
    f = _as_real(value, "probability")
    if not (0.0 <= f <= 1.0):
        LOG.debug("rejecting fraction %r: outside [0, 1]", value)
        raise OutOfRangeError(f, raw=value)
    return f


def validate_percentage(value: Any) -> float:
    """Normalize a percentage in [0, 100] to its fraction ``value / 100``.

    Raises:
        TypeError: ``value`` is not a real number.
        OutOfRangeError: ``value`` is outside [0, 100] or NaN.
    """
    p = _as_real(value, "percentage")
    if not (0.0 <= p <= PERCENT_SCALE):
        LOG.debug("rejecting percentage %r: outside [0, 100]", value)
        raise OutOfRangeError(p / PERCENT_SCALE, raw=value, representation="percentage")
    return validate_fraction(p / PERCENT_SCALE)


def _percent_fixed_point(f: float) -> float:
    """Iterate ``f -> f * 100 / 100`` until it stops moving.

    The step is monotone non-decreasing in ``f``, so the sequence is monotone
    over a finite set of floats and terminates. ``x`` and ``x * 100 / 100``
    share a sequence and therefore a fixed point.
    """
    while True:
        nxt = (f * PERCENT_SCALE) / PERCENT_SCALE
        if nxt == f:
            return f
        f = nxt


# ---------- Value type ----------


class ProbabilityValue(ModelBase):
    """A real number in the closed unit interval, stored in fraction form."""

    fraction: float

    @field_validator("fraction", mode="before")
    @classmethod
    def _validate_fraction(cls, v: Any) -> float:
        return validate_fraction(v)

    @classmethod
    def fractional(cls, value: Any) -> "ProbabilityValue":
        """Build from a fraction in [0, 1]."""
        return cls(fraction=validate_fraction(value))

    @classmethod
    def percentage(cls, value: Any) -> "ProbabilityValue":
        """Build from a percentage in [0, 100]."""
        return cls(fraction=validate_percentage(value))

    @property
    def percent(self) -> float:
        return self.fraction * PERCENT_SCALE

    def complement(self) -> "ProbabilityValue":
        """Return ``1 - p``; always inside [0, 1] when ``p`` is."""
        return type(self)(fraction=1.0 - self.fraction)

    def _key(self) -> float:
        return float(f"{_percent_fixed_point(self.fraction):.{SIGNIFICANT_DIGITS}g}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProbabilityValue):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __float__(self) -> float:
        return self.fraction

    def __str__(self) -> str:
        return f"{self.percent:.3f}%"


def coerce_probability(v: Any) -> ProbabilityValue:
    """
    Field-validator helper for types wrapping a ProbabilityValue.

    Accepts an existing ProbabilityValue, a mapping payload
    (``{"fraction": ...}``), or a bare real number in fraction form, which is
    what the wrappers serialize to.
    """
    if isinstance(v, ProbabilityValue):
        return v
    if isinstance(v, Mapping):
        return ProbabilityValue.model_validate(v)
    return ProbabilityValue.fractional(v)
