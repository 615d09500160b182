# src/confi/significance.py
"""
The significance level (alpha) describes the evidence a sample must carry
before the null hypothesis (no difference between two outcomes) is rejected.

In a measurement model the null hypothesis under test is typically whether a
reading is indistinguishable from another, or from the system response at zero
stimulus (the minimum detectable value).

    >>> from confi import SignificanceLevel
    >>> SignificanceLevel.fractional(0.1) == SignificanceLevel.percentage(10.0)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import field_serializer, field_validator
from scipy.stats import norm

from confi.models import ModelBase
from confi.probability import ProbabilityValue, coerce_probability

if TYPE_CHECKING:  # pragma: no cover
    from confi.confidence import ConfidenceLevel

__all__ = ["SignificanceLevel"]


class SignificanceLevel(ModelBase):
    """
    Probability of a type I error: rejecting a null hypothesis which is in
    fact true. Not interchangeable with ConfidenceLevel.
    """

    value: ProbabilityValue

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> ProbabilityValue:
        return coerce_probability(v)

    @field_serializer("value")
    def _serialize_value(self, v: ProbabilityValue) -> float:
        return v.fraction

    @classmethod
    def fractional(cls, level: Any) -> "SignificanceLevel":
        """Create a significance level from a fraction in [0, 1].

        Raises OutOfRangeError outside [0, 1] or for NaN.
        """
        return cls(value=ProbabilityValue.fractional(level))

    @classmethod
    def percentage(cls, level: Any) -> "SignificanceLevel":
        """Create a significance level from a percentage in [0, 100].

        Raises OutOfRangeError outside [0, 100] or for NaN.
        """
        return cls(value=ProbabilityValue.percentage(level))

    @classmethod
    def zero_point_one_percent(cls) -> "SignificanceLevel":
        return cls.fractional(0.001)

    @classmethod
    def zero_point_five_percent(cls) -> "SignificanceLevel":
        return cls.fractional(0.005)

    @classmethod
    def one_percent(cls) -> "SignificanceLevel":
        return cls.fractional(0.01)

    @classmethod
    def two_point_five_percent(cls) -> "SignificanceLevel":
        return cls.fractional(0.025)

    @classmethod
    def five_percent(cls) -> "SignificanceLevel":
        return cls.fractional(0.05)

    @classmethod
    def ten_percent(cls) -> "SignificanceLevel":
        return cls.fractional(0.1)

    @classmethod
    def from_confidence_level(cls, level: "ConfidenceLevel") -> "SignificanceLevel":
        """alpha = 1 - confidence."""
        from confi.confidence import ConfidenceLevel

        if not isinstance(level, ConfidenceLevel):
            raise TypeError(f"expected ConfidenceLevel, got {type(level).__name__}")
        return cls(value=level.value.complement())

    def to_confidence_level(self) -> "ConfidenceLevel":
        from confi.confidence import ConfidenceLevel

        return ConfidenceLevel.from_significance_level(self)

    @property
    def probability(self) -> float:
        """The significance level as a fraction."""
        return self.value.fraction

    @property
    def percent(self) -> float:
        return self.value.percent

    def num_standard_deviations(self, two_sided: bool = False) -> float:
        """
        Number of standard deviations from the center of a standard normal
        distribution represented by this significance level.

        This is the inverse survival function at alpha, i.e. the inverse CDF
        at ``1 - alpha`` (``1 - alpha / 2`` when ``two_sided``). alpha = 0
        maps to +inf.
        """
        tail = self.probability / 2.0 if two_sided else self.probability
        return float(norm.isf(tail))

    def __float__(self) -> float:
        return self.probability

    def __str__(self) -> str:
        return f"Significance Level: {self.percent:.3f}%"
