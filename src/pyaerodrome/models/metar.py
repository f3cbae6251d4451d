"""METAR Data Model."""
# pylint: disable=too-few-public-methods

from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Dict, List, Optional

# third party
from pydantic import BaseModel, ConfigDict, Field

# Local
from pyaerodrome.meteorology import c2f, convert_value, relative_humidity


class ReportType(str, Enum):
    """Report modifiers."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    NONE = "NONE"
    AUTO = "AUTO"
    COR = "COR"
    RTD = "RTD"


class Modifier(IntEnum):
    """How a visibility distance relates to the true value."""

    EQUALS = 0
    LESS_THAN = 1
    GREATER_THAN = 2
    NOGO = 3  # vertical visibility impossible to determine


class Tendency(IntEnum):
    """Runway visual range tendency."""

    NONE = 0
    STABLE = 1
    INCREASING = 2
    DECREASING = 3


class Intensity(IntEnum):
    """Present weather intensity, NIL for vicinity only phrases."""

    NIL = 0
    LIGHT = 1
    MODERATE = 2
    HEAVY = 3


class Coverage(IntEnum):
    """Cloud coverage in oktas categories."""

    NIL = -1
    CLEAR = 0
    FEW = 1
    SCATTERED = 2
    BROKEN = 3
    OVERCAST = 4

    @property
    def text(self) -> str:
        """Lower case name, e.g. ``scattered``."""
        return self.name.lower()

    @property
    def abbr(self) -> str:
        """The METAR abbreviation, e.g. ``SCT``."""
        return {
            Coverage.NIL: "",
            Coverage.CLEAR: "CLR",
            Coverage.FEW: "FEW",
            Coverage.SCATTERED: "SCT",
            Coverage.BROKEN: "BKN",
            Coverage.OVERCAST: "OVC",
        }[self]


class Visibility(BaseModel):
    """A visibility value, prevailing, directional, vertical or runway."""

    model_config = ConfigDict(frozen=True)

    distance: Optional[float] = Field(
        default=None, ge=0, description="Distance in meters."
    )
    direction: int = Field(
        default=-1, ge=-1, lt=360, description="Degrees, -1 all directions."
    )
    modifier: Modifier = Modifier.EQUALS
    tendency: Tendency = Tendency.NONE

    @property
    def distance_ft(self) -> Optional[float]:
        """Distance in feet."""
        return convert_value(self.distance, "meter", "foot")

    @property
    def distance_sm(self) -> Optional[float]:
        """Distance in statute miles."""
        return convert_value(self.distance, "meter", "mile")


class Cloud(BaseModel):
    """A cloud layer."""

    model_config = ConfigDict(frozen=True)

    coverage: Coverage = Coverage.NIL
    altitude: Optional[float] = Field(
        default=None, description="Cloud base in meters above ground."
    )
    cloud_type: Optional[str] = None
    cloud_type_long: Optional[str] = None

    @property
    def altitude_ft(self) -> Optional[float]:
        """Cloud base in feet."""
        return convert_value(self.altitude, "meter", "foot")


class Weather(BaseModel):
    """A structured present weather group."""

    model_config = ConfigDict(frozen=True)

    intensity: Intensity = Intensity.NIL
    vicinity: bool = False
    descriptions: List[str] = Field(default_factory=list, max_length=3)
    phenomena: List[str] = Field(default_factory=list, max_length=3)


class Runway(BaseModel):
    """What we know about a runway, assembled from several groups."""

    model_config = ConfigDict(frozen=True)

    deposit: Optional[int] = Field(default=None, ge=0, le=9)
    deposit_string: Optional[str] = None
    extent: Optional[int] = None
    extent_string: Optional[str] = None
    depth: Optional[float] = Field(
        default=None, description="Deposit depth in meters."
    )
    friction: Optional[float] = None
    friction_string: Optional[str] = None
    comment: Optional[str] = None
    min_visibility: Visibility = Field(default_factory=Visibility)
    max_visibility: Visibility = Field(default_factory=Visibility)
    wind_shear: bool = False


class METARReport(BaseModel):
    """A decoded METAR/SPECI, values in SI units."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The normalized report text.")
    unparsed: List[str] = Field(default_factory=list)
    station: str = Field(..., min_length=4, max_length=4)
    year: int = -1
    month: int = -1
    day: int = -1
    hour: int = -1
    minute: int = -1
    report_type: ReportType = ReportType.NONE
    nil: bool = False
    wind_dir_deg: int = Field(default=0, ge=0, le=360)
    wind_speed_mps: float = Field(default=0.0, ge=0)
    gust_speed_mps: Optional[float] = None
    wind_range_from: int = -1
    wind_range_to: int = -1
    min_visibility: Visibility = Field(default_factory=Visibility)
    max_visibility: Visibility = Field(default_factory=Visibility)
    directional_visibility: List[Visibility] = Field(
        default_factory=lambda: [Visibility() for _ in range(8)],
        min_length=8,
        max_length=8,
    )
    vertical_visibility: Visibility = Field(default_factory=Visibility)
    temperature_c: Optional[float] = None
    dewpoint_c: Optional[float] = None
    pressure_pa: Optional[float] = None
    clouds: List[Cloud] = Field(default_factory=list)
    weather: List[str] = Field(default_factory=list)
    weather_groups: List[Weather] = Field(default_factory=list)
    runways: Dict[str, Runway] = Field(default_factory=dict)
    cavok: bool = False
    rain: Intensity = Intensity.NIL
    hail: Intensity = Intensity.NIL
    snow: Intensity = Intensity.NIL
    color_state: Optional[str] = None
    trend: Optional[str] = None
    remarks: Optional[str] = None

    @property
    def valid(self) -> Optional[datetime]:
        """The observation time, if the report carried a usable one."""
        if min(self.year, self.month, self.day, self.hour, self.minute) < 0:
            return None
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                tzinfo=timezone.utc,
            )
        except ValueError:
            return None

    @property
    def relative_humidity(self) -> Optional[float]:
        """Relative humidity in percent."""
        return relative_humidity(self.temperature_c, self.dewpoint_c)

    @property
    def wind_speed_kt(self) -> float:
        return convert_value(self.wind_speed_mps, "meter / second", "knot")

    @property
    def wind_speed_kmh(self) -> float:
        return convert_value(
            self.wind_speed_mps, "meter / second", "kilometer / hour"
        )

    @property
    def wind_speed_mph(self) -> float:
        return convert_value(self.wind_speed_mps, "meter / second", "mph")

    @property
    def gust_speed_kt(self) -> Optional[float]:
        return convert_value(self.gust_speed_mps, "meter / second", "knot")

    @property
    def gust_speed_kmh(self) -> Optional[float]:
        return convert_value(
            self.gust_speed_mps, "meter / second", "kilometer / hour"
        )

    @property
    def gust_speed_mph(self) -> Optional[float]:
        return convert_value(self.gust_speed_mps, "meter / second", "mph")

    @property
    def temperature_f(self) -> Optional[float]:
        return c2f(self.temperature_c)

    @property
    def dewpoint_f(self) -> Optional[float]:
        return c2f(self.dewpoint_c)

    @property
    def pressure_hpa(self) -> Optional[float]:
        if self.pressure_pa is None:
            return None
        return self.pressure_pa / 100.0

    @property
    def pressure_inhg(self) -> Optional[float]:
        return convert_value(self.pressure_pa, "pascal", "inHg")
