"""Centralized Testing Stuff."""

# third party
import pytest

# This repo
from pyaerodrome.util import utc


@pytest.fixture()
def utcnow():
    """A fixed reference time for reports lacking the archive preamble."""
    return utc(2011, 10, 20, 12)
