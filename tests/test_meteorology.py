"""Test our meteorology helpers."""

import pytest

from pyaerodrome import meteorology
from pyaerodrome.exceptions import UnitsError


def test_convert_value():
    """Test the metpy unit conversion helper."""
    val = meteorology.convert_value(10, "knot", "meter / second")
    assert abs(val - 5.144) < 0.001
    assert meteorology.convert_value(None, "knot", "meter / second") is None


def test_convert_value_bad_units():
    """Test that we raise our own error for unknown units."""
    with pytest.raises(UnitsError):
        meteorology.convert_value(1, "furlongs_per_blah", "meter")


def test_c2f():
    """Test temperature conversion."""
    assert abs(meteorology.c2f(0) - 32) < 0.001
    assert abs(meteorology.c2f(-40) - -40) < 0.001


def test_relative_humidity():
    """Test the relative humidity computation."""
    assert abs(meteorology.relative_humidity(10, 10) - 100) < 0.001
    assert abs(meteorology.relative_humidity(10, 5) - 71.08) < 0.1
    assert meteorology.relative_humidity(10, None) is None
