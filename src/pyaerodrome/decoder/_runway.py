"""Runway related groups: visual range, state of the runway, wind shear.

These all contribute to a per runway record, so the values returned here are
dictionaries of the fields a group sets.  The decode session merges them
field by field into what earlier groups said about the same runway.
"""

# Local
from pyaerodrome import reference
from pyaerodrome.decoder._scanner import (
    peek,
    scan_boundary,
    scan_number,
)
from pyaerodrome.models.metar import Modifier, Tendency, Visibility
from pyaerodrome.util import LOG

RVR_MODIFIERS = {"P": Modifier.GREATER_THAN, "M": Modifier.LESS_THAN}
RVR_TENDENCIES = {
    "D": Tendency.DECREASING,
    "N": Tendency.STABLE,
    "U": Tendency.INCREASING,
}


def runway_name(num: int) -> str:
    """Convert the two digit designator of a runway state group."""
    if num == 88:
        return reference.RUNWAY_ALL
    if num == 99:
        return reference.RUNWAY_REPEAT
    if num >= 50:
        return f"{num - 50:02d}R"
    return f"{num:02d}"


def _scan_designator(buf, pos):
    """Helper for ``dd[LCR]``."""
    res = scan_number(buf, pos, 2)
    if res is None:
        return None
    m = res[1]
    if peek(buf, m) in "LCR":
        m += 1
    return buf[pos:m], m


def _scan_rvr_value(buf, pos):
    """Helper for ``[PM]?dddd``."""
    modifier = RVR_MODIFIERS.get(peek(buf, pos), Modifier.EQUALS)
    if modifier != Modifier.EQUALS:
        pos += 1
    res = scan_number(buf, pos, 4)
    if res is None:
        return None
    return res[0], modifier, res[1]


def scan_rvr(buf, pos):
    """Runway visual range ``Rdd[LCR]/([PM]ddddV)?[PM]dddd(FT)?/?[DNU]?``."""
    if peek(buf, pos) != "R":
        return None
    res = _scan_designator(buf, pos + 1)
    if res is None or peek(buf, res[1]) != "/":
        return None
    name, m = res
    m += 1
    if buf.startswith("////", m):
        # sensor failure... ignore
        m = scan_boundary(buf, m + 4)
        if m is None:
            return None
        LOG.debug("RVR sensor failure for runway %s", name)
        return m, None

    res = _scan_rvr_value(buf, m)
    if res is None:
        return None
    low, low_modifier, m = res
    high, high_modifier = low, Modifier.EQUALS
    if peek(buf, m) == "V":
        res = _scan_rvr_value(buf, m + 1)
        if res is None:
            return None
        high, high_modifier, m = res
    if buf.startswith("FT", m):
        low = int(low * reference.FEET_TO_METER)
        high = int(high * reference.FEET_TO_METER)
        m += 2
    # slash before the tendency, not WMO-49
    if peek(buf, m) == "/":
        m += 1
    tendency = RVR_TENDENCIES.get(peek(buf, m), Tendency.NONE)
    if tendency != Tendency.NONE:
        m += 1
    m = scan_boundary(buf, m)
    if m is None:
        return None
    return m, (
        name,
        {
            "min_visibility": Visibility(
                distance=low, modifier=low_modifier, tendency=tendency
            ),
            "max_visibility": Visibility(
                distance=high, modifier=high_modifier
            ),
        },
    )


def _depth(code):
    """Convert the deposit depth code, returns (depth, comment)."""
    if code == 0:
        # less than 1 mm, call it half
        return 0.0005, None
    if 0 < code <= 90:
        return code / 1000.0, None
    if 92 <= code <= 98:
        return (code - 90) / 20.0, None
    if code == 99:
        return None, "runway not in use"
    raise ValueError(f"invalid deposit depth code {code}")


def scan_runway_report(buf, pos):
    """State of the runway ``dd(CLRD|[\\d/][1259/](\\d\\d|//))(\\d\\d|//)``."""
    res = scan_number(buf, pos, 2)
    if res is None:
        return None
    num, m = res
    state = {
        "deposit": None,
        "deposit_string": None,
        "extent": None,
        "extent_string": None,
        "depth": None,
        "friction": None,
        "friction_string": None,
        "comment": None,
    }
    if buf.startswith("CLRD", m):
        m += 4
        state["deposit_string"] = "cleared"
    else:
        res = scan_number(buf, m, 1)
        if res is not None:
            state["deposit"], m = res
            state["deposit_string"] = reference.RUNWAY_DEPOSIT[res[0]]
        elif peek(buf, m) == "/":
            m += 1
        else:
            return None

        char = peek(buf, m)
        if char in "1259":
            state["extent"] = int(char)
            state["extent_string"] = reference.RUNWAY_DEPOSIT_EXTENT[
                int(char)
            ]
        elif char != "/":
            return None
        m += 1

        if buf.startswith("//", m):
            m += 2
        else:
            res = scan_number(buf, m, 2)
            if res is None or res[0] == 91:
                return None
            state["depth"], state["comment"] = _depth(res[0])
            m = res[1]

    if buf.startswith("//", m):
        m += 2
    else:
        res = scan_number(buf, m, 2)
        if res is None:
            return None
        code, m = res
        if 1 <= code < 90:
            state["friction"] = code / 100.0
        else:
            state["friction_string"] = reference.RUNWAY_FRICTION.get(code)
    m = scan_boundary(buf, m)
    if m is None:
        return None
    return m, (runway_name(num), state)


def scan_wind_shear(buf, pos):
    """Wind shear ``WS (ALL RWYS?|(RWY ?dd[LCR]?)*)``, returns runway names."""
    if not buf.startswith("WS", pos):
        return None
    m = scan_boundary(buf, pos + 2)
    if m is None:
        return None

    if buf.startswith("ALL", m):
        m = scan_boundary(buf, m + 3)
        if m is None or not buf.startswith("RWY", m):
            return None
        m += 3
        if peek(buf, m) == "S":
            m += 1
        m = scan_boundary(buf, m)
        if m is None:
            return None
        return m, [reference.RUNWAY_ALL]

    names = []
    while buf.startswith("RWY", m):
        m += 3
        end = scan_boundary(buf, m)
        if end is not None:
            m = end
        res = _scan_designator(buf, m)
        if res is None:
            return None
        name, m = res
        m = scan_boundary(buf, m)
        if m is None:
            return None
        names.append(name)
    if not names:
        names.append(reference.RUNWAY_ALL)
    return m, names
