# src/confi/confidence.py
"""
Confidence levels: the probability that a procedure yields a result
enclosing the true value across repeated trials.

    >>> from confi import ConfidenceLevel
    >>> ConfidenceLevel.fractional(0.1) == ConfidenceLevel.percentage(10.0)
    True
"""

from __future__ import annotations

from typing import Any

from pydantic import field_serializer, field_validator

from confi.models import ModelBase
from confi.probability import ProbabilityValue, coerce_probability
from confi.significance import SignificanceLevel

__all__ = ["ConfidenceLevel"]


class ConfidenceLevel(ModelBase):
    """The degree of confidence associated with a value to be computed."""

    value: ProbabilityValue

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> ProbabilityValue:
        return coerce_probability(v)

    @field_serializer("value")
    def _serialize_value(self, v: ProbabilityValue) -> float:
        return v.fraction

    @classmethod
    def fractional(cls, level: Any) -> "ConfidenceLevel":
        """Create a confidence level from a fraction in [0, 1].

        Raises OutOfRangeError outside [0, 1] or for NaN.
        """
        return cls(value=ProbabilityValue.fractional(level))

    @classmethod
    def percentage(cls, level: Any) -> "ConfidenceLevel":
        """Create a confidence level from a percentage in [0, 100].

        Raises OutOfRangeError outside [0, 100] or for NaN.
        """
        return cls(value=ProbabilityValue.percentage(level))

    @classmethod
    def ninety_nine_point_nine_percent(cls) -> "ConfidenceLevel":
        return cls.fractional(0.999)

    @classmethod
    def ninety_nine_point_five_percent(cls) -> "ConfidenceLevel":
        return cls.fractional(0.995)

    @classmethod
    def ninety_nine_percent(cls) -> "ConfidenceLevel":
        return cls.fractional(0.99)

    @classmethod
    def ninety_seven_point_five_percent(cls) -> "ConfidenceLevel":
        return cls.fractional(0.975)

    @classmethod
    def ninety_five_percent(cls) -> "ConfidenceLevel":
        return cls.fractional(0.95)

    @classmethod
    def ninety_percent(cls) -> "ConfidenceLevel":
        return cls.fractional(0.9)

    @classmethod
    def from_significance_level(cls, level: SignificanceLevel) -> "ConfidenceLevel":
        """confidence = 1 - alpha."""
        if not isinstance(level, SignificanceLevel):
            raise TypeError(f"expected SignificanceLevel, got {type(level).__name__}")
        return cls(value=level.value.complement())

    def to_significance_level(self) -> SignificanceLevel:
        return SignificanceLevel.from_confidence_level(self)

    @property
    def probability(self) -> float:
        """The confidence level as a fraction."""
        return self.value.fraction

    @property
    def percent(self) -> float:
        return self.value.percent

    def __float__(self) -> float:
        return self.probability

    def __str__(self) -> str:
        return f"Confidence Level: {self.percent:.3f}%"
