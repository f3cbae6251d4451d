"""
We do meteorological things, when necessary
"""

from typing import Optional

import numpy as np
from metpy.units import units
from pint.errors import UndefinedUnitError

from pyaerodrome.exceptions import UnitsError


def convert_value(val, units_in, units_out):
    """DRY Helper to return magnitude of a metpy unit conversion.

    Args:
      val (float): value, ``None`` passes through untouched.
      units_in (str): What units those values have.
      units_out (str): What values we want with given magnitude.

    Returns:
      float: magnitude of val with unit conversion applied
    """
    if val is None:
        return None
    try:
        return units.Quantity(val, units_in).to(units_out).m
    except UndefinedUnitError as exp:
        raise UnitsError(f"unrecognized unit: {exp}") from exp


def c2f(val):
    """Helper to return magnitude of Celcius to Fahrenheit conversion."""
    return convert_value(val, "degC", "degF")


def relative_humidity(
    tmpc: Optional[float], dwpc: Optional[float]
) -> Optional[float]:
    """Compute the relative humidity with the Magnus-form approximation.

    Args:
      tmpc (float): air temperature in Celsius
      dwpc (float): dew point temperature in Celsius

    Returns:
      float: relative humidity in percent, ``None`` when either input is
      ``None``
    """
    if tmpc is None or dwpc is None:
        return None
    dewp = np.power(10.0, 7.5 * dwpc / (237.7 + dwpc))
    temp = np.power(10.0, 7.5 * tmpc / (237.7 + tmpc))
    return float(dewp * 100.0 / temp)
