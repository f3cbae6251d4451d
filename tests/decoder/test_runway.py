"""Test the runway groups."""

import pytest

from pyaerodrome.decoder import _runway
from pyaerodrome.decoder._scanner import normalize
from pyaerodrome.models.metar import Modifier, Tendency


@pytest.mark.parametrize(
    "num,name",
    [(88, "ALL"), (99, "REP"), (77, "27R"), (27, "27"), (5, "05")],
)
def test_runway_name(num, name):
    """Test the two digit designators of runway state groups."""
    assert _runway.runway_name(num) == name


def test_rvr():
    """Test runway visual range with variation and tendency."""
    _pos, (name, values) = _runway.scan_rvr(normalize("R27L/0600V1000U"), 0)
    assert name == "27L"
    assert values["min_visibility"].distance == 600
    assert values["min_visibility"].tendency == Tendency.INCREASING
    assert values["max_visibility"].distance == 1000
    assert values["max_visibility"].modifier == Modifier.EQUALS


def test_rvr_modifiers():
    """Test the P and M prefixes and feet."""
    _pos, (name, values) = _runway.scan_rvr(normalize("R09/P1500N"), 0)
    assert name == "09"
    assert values["min_visibility"].modifier == Modifier.GREATER_THAN
    assert values["min_visibility"].tendency == Tendency.STABLE
    _pos, (name, values) = _runway.scan_rvr(normalize("R27/1200FT/D"), 0)
    assert values["min_visibility"].distance == 365
    assert values["min_visibility"].tendency == Tendency.DECREASING


def test_rvr_failures():
    """Test a sensor failure and weather that starts with R."""
    assert _runway.scan_rvr(normalize("R27/////"), 0) == (9, None)
    assert _runway.scan_rvr(normalize("RA"), 0) is None
    assert _runway.scan_rvr(normalize("R27/12"), 0) is None


def test_runway_report():
    """Test the state of the runway group."""
    _pos, (name, state) = _runway.scan_runway_report(
        normalize("88290195"), 0
    )
    assert name == "ALL"
    assert state["deposit"] == 2
    assert state["deposit_string"] == "wet or puddles"
    assert state["extent"] == 9
    assert state["extent_string"] == "51-100%"
    assert abs(state["depth"] - 0.001) < 1e-9
    assert state["friction"] is None
    assert state["friction_string"] == "good braking action"


def test_runway_report_variants():
    """Test cleared runways, missing values and the depth codes."""
    _pos, (name, state) = _runway.scan_runway_report(
        normalize("27CLRD93"), 0
    )
    assert name == "27"
    assert state["deposit_string"] == "cleared"
    assert state["friction_string"] == "medium braking action"
    _pos, (name, state) = _runway.scan_runway_report(
        normalize("15//////"), 0
    )
    assert all(value is None for value in state.values())
    _pos, (name, state) = _runway.scan_runway_report(
        normalize("15259245"), 0
    )
    assert abs(state["depth"] - 0.1) < 1e-9
    assert abs(state["friction"] - 0.45) < 1e-9
    _pos, (name, state) = _runway.scan_runway_report(
        normalize("15259999"), 0
    )
    assert state["depth"] is None
    assert state["comment"] == "runway not in use"
    assert state["friction_string"] == "friction: unreliable measurement"


@pytest.mark.parametrize("text", ["15259145", "53012", "10133", "RMK"])
def test_runway_report_rejected(text):
    """Test that depth code 91 and remark groups are rejected."""
    assert _runway.scan_runway_report(normalize(text), 0) is None


def test_wind_shear():
    """Test the wind shear group."""
    assert _runway.scan_wind_shear(normalize("WS RWY27"), 0)[1] == ["27"]
    res = _runway.scan_wind_shear(normalize("WS RWY 27L RWY09"), 0)
    assert res[1] == ["27L", "09"]
    assert _runway.scan_wind_shear(normalize("WS ALL RWYS"), 0)[1] == ["ALL"]
    assert _runway.scan_wind_shear(normalize("WS ALL"), 0) is None
