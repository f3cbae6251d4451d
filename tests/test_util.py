"""Testing of util."""

import logging
from datetime import timezone

from pyaerodrome import util


def test_utc():
    """Does the utc() function work as expected."""
    answer = util.utc(2017, 2, 1, 2, 20).replace(tzinfo=None)
    assert answer.isoformat() == "2017-02-01T02:20:00"
    assert util.utc().tzinfo == timezone.utc


def test_get_test_file():
    """Test that we can read our data files."""
    data = util.get_test_file("METAR/EHAM.txt")
    assert data.startswith("2011/10/20")
    assert util.get_test_filepath("METAR/EHAM.txt").endswith(
        "data/product_examples/METAR/EHAM.txt"
    )


def test_logger():
    """Test the logger."""
    log = util.logger(level=logging.DEBUG)
    assert log.level == logging.DEBUG
    log.setLevel(logging.WARNING)


def test_formatter():
    """Test our custom formatter."""
    record = logging.LogRecord(
        "pyaerodrome", logging.INFO, "metar.py", 1, "hi %s", ("there",), None
    )
    assert util.CustomFormatter().format(record).endswith("hi there")
