"""METAR group recognizers.

Every recognizer is called with the normalized buffer and an offset.  It
either returns ``(pos, value)`` having consumed one group, or ``None`` having
consumed nothing.  A ``value`` of ``None`` means the group was recognized
but carried no data (sensor failure markers and the like).
"""

from typing import NamedTuple, Optional

# Local
from pyaerodrome import reference
from pyaerodrome.decoder._scanner import (
    at_end,
    peek,
    scan_boundary,
    scan_number,
    scan_token,
)
from pyaerodrome.models.metar import (
    Cloud,
    Coverage,
    Intensity,
    Modifier,
    ReportType,
    Visibility,
    Weather,
)
from pyaerodrome.util import LOG

COVERAGES = {
    "FEW": Coverage.FEW,
    "SCT": Coverage.SCATTERED,
    "BKN": Coverage.BROKEN,
    "OVC": Coverage.OVERCAST,
}
CLEAR_SKY = ["CLR", "SKC", "NCD", "NSC"]
WIND_UNITS = [
    ("KT", reference.KT_TO_MPS),
    ("KMH", reference.KMH_TO_MPS),
    ("KPH", reference.KMH_TO_MPS),
    ("MPS", 1.0),
]
TEMPERATURE_CHARS = "M/X0123456789"


class Wind(NamedTuple):
    """Scanned wind group."""

    drct: int
    speed: float
    gust: Optional[float]


class SkyCondition(NamedTuple):
    """Scanned sky condition group."""

    layer: Optional[Cloud] = None
    cavok: bool = False
    vertical: Optional[Visibility] = None
    coverage: Optional[Coverage] = None


def scan_preamble_date(buf, pos):
    """NOAA archive date ``YYYY/MM/DD``."""
    res = scan_number(buf, pos, 4)
    if res is None or peek(buf, res[1]) != "/":
        return None
    year, pos = res
    res = scan_number(buf, pos + 1, 2)
    if res is None or peek(buf, res[1]) != "/":
        return None
    month, pos = res
    res = scan_number(buf, pos + 1, 2)
    if res is None:
        return None
    day, pos = res
    pos = scan_boundary(buf, pos)
    if pos is None:
        return None
    return pos, (year, month, day)


def scan_preamble_time(buf, pos):
    """NOAA archive time ``HH:MM``."""
    res = scan_number(buf, pos, 2)
    if res is None or peek(buf, res[1]) != ":":
        return None
    hour, pos = res
    res = scan_number(buf, pos + 1, 2)
    if res is None:
        return None
    minute, pos = res
    pos = scan_boundary(buf, pos)
    if pos is None:
        return None
    return pos, (hour, minute)


def scan_type(buf, pos):
    """The METAR or SPECI keyword, which carries no information."""
    if buf.startswith("METAR ", pos) or buf.startswith("SPECI ", pos):
        return pos + 6, None
    return None


def scan_id(buf, pos):
    """Four character station identifier."""
    station = peek(buf, pos, 4)
    if not all(c.isascii() and c.isalnum() for c in station):
        return None
    end = scan_boundary(buf, pos + 4)
    if end is None:
        return None
    return end, station


def scan_date(buf, pos):
    """Observation time ``DDHHMMZ``, the Z is sometimes forgotten."""
    values = []
    for _ in range(3):
        res = scan_number(buf, pos, 2)
        if res is None:
            return None
        values.append(res[0])
        pos = res[1]
    if peek(buf, pos) == "Z":
        pos += 1
    pos = scan_boundary(buf, pos)
    if pos is None:
        return None
    return pos, tuple(values)


def scan_modifier(buf, pos):
    """Report modifier, a ``None`` value denotes a NIL report."""
    if buf.startswith("NIL", pos):
        return len(buf) - 1, None
    if buf.startswith("AUTO", pos):
        end, rtype = pos + 4, ReportType.AUTO
    elif buf.startswith("COR", pos):
        end, rtype = pos + 3, ReportType.COR
    elif buf.startswith("CC", pos) and peek(buf, pos + 2) in "AB":
        end, rtype = pos + 3, ReportType.COR
    elif buf.startswith("RTD", pos):
        end, rtype = pos + 3, ReportType.RTD
    else:
        return None
    end = scan_boundary(buf, end)
    if end is None:
        return None
    return end, rtype


def scan_wind(buf, pos):
    """Surface wind ``(ddd|VRB|///)ff(f)(Gff(f))(KT|KMH|KPH|MPS)``."""
    m = pos
    # not WMO-49, but seen in the wild
    if peek(buf, m) in "?E":
        m += 1
    drct = -1
    named = buf.startswith("VRB", m) or buf.startswith("///", m)
    if named:
        m += 3
    else:
        res = scan_number(buf, m, 3)
        if res is not None:
            drct, m = res
    # ignore a single slash, 060/2KT
    if peek(buf, m) == "/" and peek(buf, m + 1) != "/":
        m += 1
    speed = -1
    speed_digits = 0
    if buf.startswith("//", m):
        m += 2
    else:
        res = scan_number(buf, m, 1, 3)
        if res is not None:
            speed_digits = res[1] - m
            speed, m = res
    gust = None
    # space between speed and gust, seen in the wild
    if peek(buf, m, 2) == " G":
        m += 1
    if peek(buf, m) == "G":
        m += 1
        if buf.startswith("//", m):
            m += 2
        else:
            res = scan_number(buf, m, 2, 3)
            if res is None:
                return None
            gust, m = res
    factor = None
    for unit, _factor in WIND_UNITS:
        if buf.startswith(unit, m):
            m += len(unit)
            factor = _factor
            break
    if factor is None:
        # Missing unit is taken as knots.  A numeric direction needs a full
        # dddff group, otherwise a visibility like 9999 would match
        if peek(buf, m) != " " or speed_digits == 0:
            return None
        if not named and (not 0 <= drct <= 360 or speed_digits < 2):
            return None
        factor = reference.KT_TO_MPS
    if drct > 360:
        LOG.debug("wind direction %s out of range, ignored", drct)
        drct = -1
    m = scan_boundary(buf, m)
    if m is None:
        return None
    return m, Wind(
        0 if drct == -1 else drct,
        0.0 if speed < 0 else speed * factor,
        None if gust is None else gust * factor,
    )


def _scan_direction(buf, pos):
    """Helper for a variable wind direction, ``///`` gives -1."""
    if buf.startswith("///", pos):
        return -1, pos + 3
    return scan_number(buf, pos, 1, 3)


def scan_variability(buf, pos):
    """Variable wind direction ``dddVddd``."""
    res = _scan_direction(buf, pos)
    if res is None or peek(buf, res[1]) != "V":
        return None
    drct_from, m = res
    res = _scan_direction(buf, m + 1)
    if res is None:
        return None
    drct_to, m = res
    m = scan_boundary(buf, m)
    if m is None:
        return None
    return m, (drct_from, drct_to)


def _scan_statute(buf, pos):
    """Helper for the ``M1 1/4SM`` style visibility."""
    modifier = Modifier.EQUALS
    m = pos
    if peek(buf, m) == "M":
        m += 1
        modifier = Modifier.LESS_THAN
    res = scan_number(buf, m, 1, 3)
    if res is None:
        return None
    distance, m = res
    distance = float(distance)
    if peek(buf, m) == "/":
        res = scan_number(buf, m + 1, 1, 2)
        if res is None or res[0] == 0:
            return None
        distance /= res[0]
        m = res[1]
    elif peek(buf, m) == " ":
        res = scan_number(buf, m + 1, 1, 2)
        if res is None or peek(buf, res[1]) != "/":
            return None
        numerator, m = res
        res = scan_number(buf, m + 1, 1, 2)
        if res is None:
            return None
        denominator, m = res
        if denominator != 0:
            distance += numerator / denominator
    if buf.startswith("SM", m):
        distance *= reference.SM_TO_METER
    elif buf.startswith("KM", m):
        distance *= 1000.0
    else:
        return None
    return m + 2, Visibility(distance=distance, modifier=modifier)


def scan_visibility(buf, pos):
    """Prevailing or directional visibility."""
    # five slashes are a missing temperature group
    if buf.startswith("/////", pos):
        return None
    if buf.startswith("////", pos):
        m = pos + 4
        if buf.startswith("SM", m) or buf.startswith("KM", m):
            m += 2
        m = scan_boundary(buf, m)
        if m is None:
            return None
        LOG.debug("visibility sensor failure at %s", pos)
        return m, None

    res = scan_number(buf, pos, 4)
    if res is None:
        res = _scan_statute(buf, pos)
        if res is None:
            return None
        m, vis = res
    else:
        distance, m = res
        direction = -1
        modifier = Modifier.EQUALS
        # tolerate NDV, no directional variation
        if buf.startswith("NDV", m):
            m += 3
        else:
            for suffix, _direction in reference.COMPASS_SUFFIXES:
                if buf.startswith(suffix, m):
                    m += len(suffix)
                    direction = _direction
                    break
        if distance == 0:
            distance = reference.VISIBILITY_LESS_THAN_50M
            modifier = Modifier.LESS_THAN
        elif distance == 9999:
            distance = reference.VISIBILITY_10KM
            modifier = Modifier.GREATER_THAN
        vis = Visibility(
            distance=distance, direction=direction, modifier=modifier
        )
    m = scan_boundary(buf, m)
    if m is None:
        return None
    return m, vis


def scan_weather(buf, pos):
    """Present weather, returns the phrase and the structured form."""
    # WMO-49 4.4.2.9, temporary failure of the sensor
    if buf.startswith("// ", pos):
        LOG.debug("present weather sensor failure at %s", pos)
        return pos + 3, None
    # maintenance flag
    if buf.startswith("M ", pos):
        return scan_boundary(buf, pos + 1), None

    res = scan_token(buf, pos, reference.WX_SPECIAL)
    if res is not None:
        _code, text, m = res
        m = scan_boundary(buf, m)
        if m is None:
            return None
        return m, (text, None)

    m = pos
    pre = ""
    post = ""
    intensity = Intensity.NIL
    vicinity = False
    if peek(buf, m) == "-":
        m += 1
        pre, intensity = "light ", Intensity.LIGHT
    elif peek(buf, m) == "+":
        m += 1
        pre, intensity = "heavy ", Intensity.HEAVY
    elif buf.startswith("VC", m):
        m += 2
        post, vicinity = "in the vicinity ", True
    else:
        pre, intensity = "moderate ", Intensity.MODERATE

    words = []
    groups = []
    for table in [reference.WX_DESCRIPTIONS, reference.WX_PHENOMENA]:
        codes = []
        for _ in range(3):
            res = scan_token(buf, m, table)
            if res is None:
                break
            code, text, m = res
            codes.append(code)
            words.append(text)
        groups.append(codes)
    if not words:
        return None
    m = scan_boundary(buf, m)
    if m is None:
        return None
    phrase = f"{pre}{' '.join(words)} {post}".strip()
    wx = None
    if groups[1]:
        wx = Weather(
            intensity=intensity,
            vicinity=vicinity,
            descriptions=groups[0],
            phenomena=groups[1],
        )
    return m, (phrase, wx)


def _cloud_base_fallback(rng):
    """A plausible cloud base for a ``///`` height, hundreds of feet."""
    if rng is None:
        return None
    return reference.CLOUD_BASE_FALLBACK_MIN + int(
        rng.random() * reference.CLOUD_BASE_FALLBACK_SPAN
    )


def scan_sky_condition(buf, pos, prior_coverage=None, rng=None):
    """Sky condition or vertical visibility.

    Args:
      buf (str): normalized buffer
      pos (int): offset
      prior_coverage (Coverage): most recent explicit coverage, used for a
        bare ``ddd`` continuation group.
      rng (random.Random): source of cloud bases substituted for ``///``
        heights, ``None`` drops such layers instead.
    """
    if buf.startswith("//////", pos):
        m = scan_boundary(buf, pos + 6)
        if m is not None:
            return m, SkyCondition()

    for code in CLEAR_SKY + ["CAVOK"]:
        if buf.startswith(code, pos):
            m = scan_boundary(buf, pos + len(code))
            if m is None:
                return None
            if code == "CAVOK":
                return m, SkyCondition(cavok=True)
            return m, SkyCondition(layer=Cloud(coverage=Coverage.CLEAR))

    vertical = False
    explicit = None
    if buf.startswith("VV", pos):
        vertical = True
        coverage = Coverage.NIL
        m = pos + 2
    elif peek(buf, pos, 3) in COVERAGES:
        explicit = coverage = COVERAGES[peek(buf, pos, 3)]
        m = pos + 3
    elif buf.startswith("///", pos):
        coverage = Coverage.NIL
        m = pos + 3
    elif peek(buf, pos, 3).isdigit() and peek(buf, pos + 3) == " ":
        # implied coverage, repeat the prior one
        coverage = prior_coverage or Coverage.NIL
        m = pos
    else:
        return None

    missing = False
    height = None
    if buf.startswith("///", m):
        m += 3
        missing = True
        height = _cloud_base_fallback(rng)
        LOG.debug("cloud base missing at %s, using %s", pos, height)
    else:
        end = scan_boundary(buf, m)
        if end is not None:
            # a lone OVC/BKN/... without height
            return end, SkyCondition(coverage=explicit)
        res = scan_number(buf, m, 3)
        if res is not None:
            height, m = res

    if vertical:
        m = scan_boundary(buf, m)
        if m is None:
            return None
        if missing or height is None:
            vis = Visibility(modifier=Modifier.NOGO)
        else:
            vis = Visibility(distance=height * 100 * reference.FEET_TO_METER)
        return m, SkyCondition(vertical=vis)

    cloud_type = None
    cloud_type_long = None
    res = scan_token(buf, m, reference.CLOUD_TYPES)
    if res is not None:
        cloud_type, cloud_type_long, m = res
    # WMO-49 4.5.4.5, sensor failure as in FEW045///
    if buf.startswith("///", m):
        m += 3
    m = scan_boundary(buf, m)
    if m is None:
        return None

    layer = None
    # require known coverage and base height
    if height is not None and coverage != Coverage.NIL:
        layer = Cloud(
            coverage=coverage,
            altitude=height * 100 * reference.FEET_TO_METER,
            cloud_type=cloud_type,
            cloud_type_long=cloud_type_long,
        )
    return m, SkyCondition(layer=layer, coverage=explicit)


def scan_temperature(buf, pos):
    """Temperature and dew point ``M?dd/(M?dd)?``.

    A ``None`` return is a malformed group.  Text that does not look like
    temperature data at all is left for the pressure group, returning
    ``(pos, None)``.
    """
    # not WMO-49, but seen in the wild
    if buf.startswith("XX/XX", pos):
        m = scan_boundary(buf, pos + 5)
        return None if m is None else (m, (None, None))

    # sniff test that this is a temperature group
    for i in range(7):
        char = peek(buf, pos + i)
        if char == " ":
            break
        if char not in TEMPERATURE_CHARS:
            return pos, None

    if buf.startswith("/////", pos):
        LOG.debug("temperature sensor failure, assuming standard")
        m = scan_boundary(buf, pos + 5)
        if m is None:
            return None
        return m, (
            reference.STANDARD_TEMPERATURE_C,
            reference.STANDARD_DEWPOINT_C,
        )
    # maintenance flag
    if buf.startswith("M ", pos):
        return scan_boundary(buf, pos + 1), (None, None)

    res = _scan_signed(buf, pos)
    if res is None or peek(buf, res[1]) != "/":
        return None
    tmpc, m = res
    m += 1
    dwpc = None
    end = scan_boundary(buf, m)
    if end is None:
        if buf.startswith("XX", m) or buf.startswith("//", m):
            m += 2
            dwpc = tmpc - reference.DEWPOINT_DEPRESSION_C
        else:
            res = _scan_signed(buf, m)
            if res is None:
                return None
            dwpc, m = res
        end = scan_boundary(buf, m)
        if end is None:
            return None
    return end, (float(tmpc), None if dwpc is None else float(dwpc))


def _scan_signed(buf, pos):
    """Helper for a ``M``inus prefixed one or two digit number."""
    sign = 1
    if peek(buf, pos) == "M":
        pos += 1
        sign = -1
    res = scan_number(buf, pos, 1, 2)
    if res is None:
        return None
    return sign * res[0], res[1]


def scan_pressure(buf, pos):
    """Altimeter ``Adddd`` or QNH ``Qdddd`` setting, returns Pascals."""
    if at_end(buf, pos):
        # pressure not provided, assume standard pressure
        return pos, reference.STANDARD_PRESSURE_PA

    m = pos
    unit = peek(buf, m)
    if unit in "AQ":
        m += 1
    else:
        unit = None
    if peek(buf, m) == " ":
        m += 1
    fallback = (
        reference.STANDARD_PRESSURE_INHG100
        if unit == "A"
        else reference.STANDARD_PRESSURE_HPA
    )
    has_value = True
    if buf.startswith("////", m):
        LOG.debug("pressure sensor failure, assuming standard")
        press = fallback
        m += 4
    else:
        res = scan_number(buf, m, 2, 4)
        if res is None:
            has_value = False
            press = fallback
        else:
            press, m = res
            # two digit pressure may have further data following
            if press < 100:
                press *= 100
                if buf.startswith("//", m):
                    m += 2
                else:
                    res = scan_number(buf, m, 2)
                    if res is not None:
                        press += res[0]
                        m = res[1]
    # ignore trailing comma, equals
    if peek(buf, m) in ",=":
        m += 1
    if unit is None and not has_value:
        # nothing here resembles a pressure group
        return None
    m = scan_boundary(buf, m)
    if m is None:
        return None
    if unit is None:
        unit = "A" if press > reference.ALTIMETER_INHG_THRESHOLD else "Q"
    if unit == "A":
        return m, press * reference.INHG_TO_PA / 100.0
    return m, press * 100.0


def scan_color_state(buf, pos):
    """Military colour state."""
    res = scan_token(buf, pos, reference.COLOR_STATES)
    if res is None:
        return None
    code, _text, m = res
    m = scan_boundary(buf, m)
    if m is None:
        return None
    return m, code


def scan_trend(buf, pos):
    """The NOSIG trend."""
    if not buf.startswith("NOSIG", pos):
        return None
    m = scan_boundary(buf, pos + 5)
    if m is None:
        return None
    return m, "NOSIG"


def skip_token(buf, pos):
    """Step over the current token, returning it with the new offset."""
    end = pos
    while not at_end(buf, end) and not peek(buf, end).isspace():
        end += 1
    return scan_boundary(buf, end), buf[pos:end]


def scan_remainder(buf, pos):
    """Skip whatever is left of the report body up to the remarks."""
    res = scan_trend(buf, pos)
    if res is not None:
        pos = res[0]
    skipped = []
    while not at_end(buf, pos) and skip_token(buf, pos)[1] != "RMK":
        pos, token = skip_token(buf, pos)
        skipped.append(token)
    if skipped:
        LOG.debug("unparsed groups: %s", " ".join(skipped))
    return pos, skipped
