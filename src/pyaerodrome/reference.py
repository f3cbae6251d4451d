"""Reference values and dictionaries

No functional code found within this module, just a bunch of statics.  The
code tables follow WMO-49 (Technical Regulations, Volume II), Table A3-2 and
the WMO Manual on Codes table 4678.

.. data:: WX_DESCRIPTIONS

    Present weather descriptor codes mapped to the phrase used when building
    the human readable weather string.

.. data:: WX_PHENOMENA

    Present weather phenomenon codes (precipitation, obscuration and other).

.. data:: CLOUD_TYPES

    Significant convective and other cloud type suffixes of a sky condition
    group.

"""

from metpy.units import units

# Unit conversion factors applied while scanning
KT_TO_MPS = units.Quantity(1.0, "knot").to("meter / second").m
KMH_TO_MPS = units.Quantity(1.0, "kilometer / hour").to("meter / second").m
FEET_TO_METER = units.Quantity(1.0, "foot").to("meter").m
SM_TO_METER = units.Quantity(1.0, "mile").to("meter").m
INHG_TO_PA = units.Quantity(1.0, "inHg").to("pascal").m

# Sensor failure fallbacks, a standard atmosphere of sorts
STANDARD_TEMPERATURE_C = 15.0
STANDARD_DEWPOINT_C = 3.0
STANDARD_PRESSURE_HPA = 1013
STANDARD_PRESSURE_INHG100 = 2992
STANDARD_PRESSURE_PA = 101300.0
# Dewpoint assumed relative to the temperature when only it is missing
DEWPOINT_DEPRESSION_C = 10
# Altimeter readings above this value are hundredths of inches of mercury
ALTIMETER_INHG_THRESHOLD = 2000

# Cloud base substituted for a `///` height, in hundreds of feet.  A layer
# without a base renders as a black sky downstream.
CLOUD_BASE_FALLBACK_MIN = 50
CLOUD_BASE_FALLBACK_SPAN = 250

# Visibility values with special meaning
VISIBILITY_LESS_THAN_50M = 50
VISIBILITY_10KM = 10000

# Directional visibility compass suffixes, longest first
COMPASS_SUFFIXES = [
    ("NE", 45),
    ("NW", 315),
    ("SE", 135),
    ("SW", 225),
    ("N", 0),
    ("E", 90),
    ("S", 180),
    ("W", 270),
]

WX_SPECIAL = {
    "NSW": "no significant weather",
}

WX_DESCRIPTIONS = {
    "SH": "showers of",
    "TS": "thunderstorm with",
    "BC": "patches of",
    "BL": "blowing",
    "DR": "low drifting",
    "FZ": "freezing",
    "MI": "shallow",
    "PR": "partial",
    "RE": "recent",
}

WX_PHENOMENA = {
    "DZ": "drizzle",
    "GR": "hail",
    "GS": "small hail and/or snow pellets",
    "IC": "ice crystals",
    "PE": "ice pellets",
    "PL": "ice pellets",
    "RA": "rain",
    "SG": "snow grains",
    "SN": "snow",
    "UP": "unknown precipitation",
    "BR": "mist",
    "DU": "widespread dust",
    "FG": "fog",
    "FGBR": "fog bank",
    "FU": "smoke",
    "HZ": "haze",
    "PY": "spray",
    "SA": "sand",
    "VA": "volcanic ash",
    "DS": "dust storm",
    "FC": "funnel cloud/tornado waterspout",
    "PO": "well-developed dust/sand whirls",
    "SQ": "squalls",
    "SS": "sandstorm",
}

CLOUD_TYPES = {
    "AC": "altocumulus",
    "ACC": "altocumulus castellanus",
    "ACSL": "altocumulus standing lenticular",
    "AS": "altostratus",
    "CB": "cumulonimbus",
    "CBMAM": "cumulonimbus mammatus",
    "CC": "cirrocumulus",
    "CCSL": "cirrocumulus standing lenticular",
    "CI": "cirrus",
    "CS": "cirrostratus",
    "CU": "cumulus",
    "CUFRA": "cumulus fractus",
    "NS": "nimbostratus",
    "SAC": "stratoaltocumulus",
    "SC": "stratocumulus",
    "SCSL": "stratocumulus standing lenticular",
    "ST": "stratus",
    "STFRA": "stratus fractus",
    "TCU": "towering cumulus",
}

# Military airfield colour states, roughly ceiling / visibility bands
COLOR_STATES = {
    "BLU": "Blue",  # 2500 ft,  8.0 km
    "WHT": "White",  # 1500 ft,  5.0 km
    "GRN": "Green",  # 700 ft,  3.7 km
    "YLO": "Yellow",  # 300 ft,  1.6 km
    "AMB": "Amber",  # 200 ft,  0.8 km
    "RED": "Red",  # <200 ft, <0.8 km
}

RUNWAY_DEPOSIT = [
    "clear and dry",
    "damp",
    "wet or puddles",
    "frost",
    "dry snow",
    "wet snow",
    "slush",
    "ice",
    "compacted snow",
    "frozen ridges",
]

RUNWAY_DEPOSIT_EXTENT = {
    1: "1-10%",
    2: "11-25%",
    5: "26-50%",
    9: "51-100%",
}

RUNWAY_FRICTION = {
    91: "poor braking action",
    92: "poor/medium braking action",
    93: "medium braking action",
    94: "medium/good braking action",
    95: "good braking action",
    99: "friction: unreliable measurement",
}

# Runway designators with special meaning in a runway state group
RUNWAY_ALL = "ALL"
RUNWAY_REPEAT = "REP"
