"""Decoding of Meteorological Aerodrome Reports (METAR/SPECI)

pyAerodrome turns the WMO-49 encoded surface observations that airports
emit into a structured, read-only record.  The decoder is tolerant of the
many real-world deviations found in the international feed, sensor failure
markers included, and only gives up when a report lacks its mandatory
groups.
"""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyaerodrome")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"
