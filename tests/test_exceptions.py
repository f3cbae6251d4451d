"""Test our custom exceptions."""

from pyaerodrome.exceptions import MetarDecodeError


def test_metar_decode_error():
    """Test that the offending text is kept."""
    exp = MetarDecodeError("metar date bogus", "EHAM 2011Z ")
    assert exp.text == "EHAM 2011Z "
    assert str(exp) == "metar date bogus: 'EHAM 2011Z'"
    assert str(MetarDecodeError("oops")) == "oops"
