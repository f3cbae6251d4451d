"""Is our reference data usable."""

# Local
from pyaerodrome import reference


def test_conversion_factors():
    """Test the unit factors computed at import."""
    assert abs(reference.KT_TO_MPS - 0.514444) < 1e-6
    assert abs(reference.FEET_TO_METER - 0.3048) < 1e-9
    assert abs(reference.SM_TO_METER - 1609.344) < 1e-6
    assert abs(reference.INHG_TO_PA - 3386.39) < 0.01


def test_compass_suffixes():
    """Test that two letter suffixes are tried first."""
    lengths = [len(suffix) for suffix, _ in reference.COMPASS_SUFFIXES]
    assert lengths == sorted(lengths, reverse=True)
    assert all(drct % 45 == 0 for _, drct in reference.COMPASS_SUFFIXES)


def test_tables():
    """Test the code tables."""
    assert len(reference.RUNWAY_DEPOSIT) == 10
    assert sorted(reference.RUNWAY_DEPOSIT_EXTENT) == [1, 2, 5, 9]
    for table in [reference.WX_DESCRIPTIONS, reference.WX_PHENOMENA]:
        assert all(len(code) in (2, 4) for code in table)
