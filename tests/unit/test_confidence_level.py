# tests/unit/test_confidence_level.py

"""
ConfidenceLevel semantics.

Scope:
- fractional / percentage constructors and OutOfRangeError
- presets, display, conversion to SignificanceLevel
"""

import pytest

from confi import ConfidenceLevel, OutOfRangeError, SignificanceLevel


def test_fraction_and_percentage_construct_equal_levels():
    assert ConfidenceLevel.fractional(0.1) == ConfidenceLevel.percentage(10.0)
    assert ConfidenceLevel.percentage(95.0).probability == 0.95
    assert ConfidenceLevel.fractional(0.95).percent == pytest.approx(95.0)


def test_fraction_above_one_rejected():
    with pytest.raises(OutOfRangeError) as exc_info:
        ConfidenceLevel.fractional(1.5)
    assert exc_info.value.value == 1.5


def test_negative_percentage_rejected():
    with pytest.raises(OutOfRangeError) as exc_info:
        ConfidenceLevel.percentage(-5.0)
    err = exc_info.value
    assert err.raw == -5.0
    assert err.value == pytest.approx(-0.05)
    assert err.representation == "percentage"


@pytest.mark.parametrize(
    "factory, expected",
    [
        (ConfidenceLevel.ninety_nine_point_nine_percent, 0.999),
        (ConfidenceLevel.ninety_nine_point_five_percent, 0.995),
        (ConfidenceLevel.ninety_nine_percent, 0.99),
        (ConfidenceLevel.ninety_seven_point_five_percent, 0.975),
        (ConfidenceLevel.ninety_five_percent, 0.95),
        (ConfidenceLevel.ninety_percent, 0.9),
    ],
)
def test_presets(factory, expected):
    assert factory().probability == expected


def test_presets_complement_significance_presets():
    pairs = [
        (ConfidenceLevel.ninety_nine_point_nine_percent(), SignificanceLevel.zero_point_one_percent()),
        (ConfidenceLevel.ninety_nine_point_five_percent(), SignificanceLevel.zero_point_five_percent()),
        (ConfidenceLevel.ninety_nine_percent(), SignificanceLevel.one_percent()),
        (ConfidenceLevel.ninety_seven_point_five_percent(), SignificanceLevel.two_point_five_percent()),
        (ConfidenceLevel.ninety_five_percent(), SignificanceLevel.five_percent()),
        (ConfidenceLevel.ninety_percent(), SignificanceLevel.ten_percent()),
    ]
    for conf, alpha in pairs:
        assert conf.to_significance_level() == alpha
        assert ConfidenceLevel.from_significance_level(alpha) == conf


def test_from_significance_level_rejects_wrong_type():
    with pytest.raises(TypeError):
        ConfidenceLevel.from_significance_level(ConfidenceLevel.ninety_percent())  # type: ignore[arg-type]


def test_display():
    assert str(ConfidenceLevel.ninety_five_percent()) == "Confidence Level: 95.000%"


def test_usable_as_dict_key():
    table = {ConfidenceLevel.percentage(95.0): "z=1.96"}
    assert table[ConfidenceLevel.fractional(0.95)] == "z=1.96"
