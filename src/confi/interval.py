# src/confi/interval.py
"""
Confidence intervals: a closed range of values expected to enclose an
estimated parameter, stated at a given ConfidenceLevel.

    >>> from confi import ConfidenceInterval, ConfidenceLevel
    >>> interval = ConfidenceInterval.new((1.0, 3.0), ConfidenceLevel.ninety_five_percent())
    >>> interval.contains(2.0), interval.contains(3.001)
    (True, False)

Notes:
  * Both bounds are inclusive.
  * The confidence level is carried for reporting only; membership depends on
    the bounds alone.
  * lower > upper is rejected with InvalidRangeError, never swapped. NaN
    bounds are rejected; infinite bounds are accepted (one-sided intervals).
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import model_validator

from confi.confidence import ConfidenceLevel
from confi.errors import InvalidRangeError
from confi.models import ModelBase

__all__ = ["ConfidenceInterval"]

LOG = logging.getLogger(__name__)


def _check_bounds(lower: float, upper: float) -> None:
    if math.isnan(lower) or math.isnan(upper):
        LOG.debug("rejecting interval [%r, %r]: NaN bound", lower, upper)
        raise InvalidRangeError(lower, upper, "bounds must not be NaN")
    if lower > upper:
        LOG.debug("rejecting interval [%r, %r]: lower > upper", lower, upper)
        raise InvalidRangeError(lower, upper)


def _unpack_bounds(bounds: Any) -> Tuple[float, float]:
    if isinstance(bounds, (str, bytes)):
        raise InvalidRangeError(bounds, None, "bounds must be a (lower, upper) pair")
    try:
        lower, upper = bounds
    except (TypeError, ValueError) as exc:
        raise InvalidRangeError(bounds, None, "bounds must be a (lower, upper) pair") from exc
    for bound in (lower, upper):
        if isinstance(bound, bool) or not isinstance(bound, numbers.Real):
            LOG.debug("rejecting interval [%r, %r]: non-real bound", lower, upper)
            raise InvalidRangeError(lower, upper, "bounds must be real numbers")
    return float(lower), float(upper)


class ConfidenceInterval(ModelBase):
    """An inclusive [lower, upper] range paired with its ConfidenceLevel."""

    lower: float
    upper: float
    confidence_level: ConfidenceLevel

    @model_validator(mode="after")
    def _validate_bounds(self) -> "ConfidenceInterval":
        _check_bounds(self.lower, self.upper)
        return self

    @classmethod
    def new(
        cls, bounds: Sequence[float], confidence_level: ConfidenceLevel
    ) -> "ConfidenceInterval":
        """
        Build an interval from an inclusive ``(lower, upper)`` pair.

        Raises:
            TypeError: ``confidence_level`` is not a ConfidenceLevel.
            InvalidRangeError: ``bounds`` is not a pair, has a NaN bound, or
                has lower > upper.
        """
        if not isinstance(confidence_level, ConfidenceLevel):
            raise TypeError(
                f"confidence_level must be a ConfidenceLevel, got {type(confidence_level).__name__}"
            )
        lower, upper = _unpack_bounds(bounds)
        _check_bounds(lower, upper)
        return cls(lower=lower, upper=upper, confidence_level=confidence_level)

    def contains(self, value: float) -> bool:
        """True iff ``lower <= value <= upper``. NaN is never contained."""
        return bool(self.lower <= value <= self.upper)

    def contains_each(self, values: ArrayLike) -> NDArray[np.bool_]:
        """Element-wise ``contains`` over an array of values."""
        arr = np.asarray(values, dtype=float)
        return (arr >= self.lower) & (arr <= self.upper)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lower, self.upper)

    def width(self) -> float:
        return self.upper - self.lower

    def half_width(self) -> float:
        return self.width() / 2.0

    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2.0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return (
            f"Confidence Interval: {self.lower:.3e} -> {self.upper:.3e} "
            f"({self.confidence_level})"
        )
