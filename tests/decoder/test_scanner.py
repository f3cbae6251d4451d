"""Test the primitive scanners."""

from pyaerodrome.decoder._scanner import (
    SENTINEL,
    at_end,
    normalize,
    peek,
    scan_boundary,
    scan_number,
    scan_token,
)
from pyaerodrome.reference import WX_DESCRIPTIONS, WX_PHENOMENA


def test_normalize():
    """Test that whitespace is collapsed and the sentinel appended."""
    assert normalize("  EHAM\n201125Z \t 27012KT ") == (
        f"EHAM 201125Z 27012KT {SENTINEL}"
    )
    assert normalize("") == f" {SENTINEL}"


def test_peek_pads():
    """Test that we never run off the end of the buffer."""
    assert peek("AB", 1, 3) == f"B{SENTINEL}{SENTINEL}"
    assert at_end(normalize("A"), 2)
    assert not at_end(normalize("A"), 0)


def test_scan_number():
    """Test the digit scanner."""
    assert scan_number("12345 ", 0, 2) == (12, 2)
    assert scan_number("12345 ", 0, 2, 3) == (123, 3)
    assert scan_number("1 ", 0, 1, 3) == (1, 1)
    assert scan_number("1A", 0, 2) is None
    assert scan_number("Q1025", 1, 4) == (1025, 5)


def test_scan_boundary():
    """Test the token boundary check."""
    assert scan_boundary("AB CD", 2) == 3
    assert scan_boundary("ABCD", 2) is None
    buf = normalize("A")
    assert scan_boundary(buf, 1) == 2


def test_scan_token_longest():
    """Test that the longest table code wins."""
    assert scan_token("SHRA", 0, WX_DESCRIPTIONS) == ("SH", "showers of", 2)
    assert scan_token("FGBR ", 0, WX_PHENOMENA) == ("FGBR", "fog bank", 4)
    assert scan_token("FG ", 0, WX_PHENOMENA) == ("FG", "fog", 2)
    assert scan_token("XX", 0, WX_PHENOMENA) is None
