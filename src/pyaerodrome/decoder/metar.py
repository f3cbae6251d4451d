"""METAR/SPECI Decoding

This module walks a single encoded aerodrome report, as found in the NOAA
archives or the international feed, and builds a :class:`METARReport`::

  2011/10/20 11:25
  EHAM 201125Z 27012KT 240V300 9999 VCSH FEW025CB SCT048 10/05 Q1025

The optional first line is the NOAA archive preamble.  The groups are
recognized in the order WMO-49 Table A3-2 lays them out.  Only the station
identifier, the observation time, the temperature and the pressure groups
are mandatory; anything else that is malformed or a sensor failure marker is
tolerated and simply contributes no data.  Whatever the decoder does not
understand ends up in :attr:`METARReport.unparsed`.

"""
# stdlib
import random

# Local
from pyaerodrome import reference
from pyaerodrome.decoder import _groups, _runway
from pyaerodrome.decoder._scanner import (
    SENTINEL,
    at_end,
    normalize,
    scan_boundary,
)
from pyaerodrome.exceptions import MetarDecodeError
from pyaerodrome.models.metar import (
    Intensity,
    METARReport,
    Modifier,
    ReportType,
    Runway,
    Visibility,
)
from pyaerodrome.util import LOG, utc


class METARDecoder:
    """A single decode pass over one report.

    All state carried from one group to the next lives on this object, so
    concurrent decodes never interfere with each other.
    """

    def __init__(self, text, utcnow=None, fill_missing_cloud_base=True):
        """constructor

        Args:
          text (str): the encoded report.
          utcnow (datetime): reference time providing the year and month
            when the report lacks the NOAA archive preamble.
          fill_missing_cloud_base (bool): substitute a plausible base for
            cloud layers reported with a ``///`` height, otherwise such
            layers are dropped.
        """
        self.text = text
        self.utcnow = utc() if utcnow is None else utcnow
        self.buf = normalize(text)
        self.pos = 0
        self.fields = {}
        self.runways = {}
        self.prior_coverage = None
        # seeded with the report so that decoding is repeatable
        self.rng = random.Random(self.buf) if fill_missing_cloud_base else None
        self.data = self.decode()

    def scan(self, func, *args):
        """Run a recognizer and advance past the group on success."""
        res = func(self.buf, self.pos, *args)
        if res is None:
            return None
        self.pos = res[0]
        return res

    def scan_all(self, func, handler):
        """Run a repeating group recognizer until it stops matching."""
        while True:
            res = self.scan(func)
            if res is None:
                return
            if res[1] is not None:
                handler(res[1])

    def fail(self, reason):
        """Give up on this report."""
        LOG.info("%s |%s|", reason, self.text)
        raise MetarDecodeError(reason, self.text)

    def update_runway(self, name, values):
        """Merge what a group said about a runway."""
        self.runways.setdefault(name, {}).update(values)

    def decode(self) -> METARReport:
        """Walk the groups in order and build the report."""
        self.scan_header()

        res = self.scan(_groups.scan_wind)
        if res is not None:
            wind = res[1]
            self.fields["wind_dir_deg"] = wind.drct
            self.fields["wind_speed_mps"] = wind.speed
            if wind.gust is not None:
                self.fields["gust_speed_mps"] = wind.gust
        res = self.scan(_groups.scan_variability)
        if res is not None:
            self.fields["wind_range_from"] = res[1][0]
            self.fields["wind_range_to"] = res[1][1]
        self.scan_all(_groups.scan_visibility, self.add_visibility)
        self.scan_all(_runway.scan_rvr, lambda val: self.update_runway(*val))
        self.scan_all(_groups.scan_weather, self.add_weather)
        self.scan_sky()

        res = self.scan(_groups.scan_temperature)
        if res is None:
            self.fail("metar temperature data malformed or missing")
        if res[1] is not None:
            self.fields["temperature_c"] = res[1][0]
            self.fields["dewpoint_c"] = res[1][1]
        res = self.scan(_groups.scan_pressure)
        if res is None:
            self.fail("metar pressure data malformed or missing")
        self.fields["pressure_pa"] = res[1]

        self.scan_sky()
        self.scan_all(
            _runway.scan_runway_report, lambda val: self.update_runway(*val)
        )
        res = self.scan(_runway.scan_wind_shear)
        if res is not None:
            for name in res[1]:
                self.update_runway(name, {"wind_shear": True})

        # appendix
        self.scan_all(
            _groups.scan_color_state,
            lambda val: self.fields.update({"color_state": val}),
        )
        res = self.scan(_groups.scan_trend)
        if res is not None:
            self.fields["trend"] = res[1]
        self.scan_all(
            _runway.scan_runway_report, lambda val: self.update_runway(*val)
        )
        self.fields["unparsed"] = self.scan(_groups.scan_remainder)[1]
        self.scan_remarks()

        return METARReport(
            text=self.buf.rstrip(SENTINEL).strip(),
            runways={
                name: Runway(**values) for name, values in self.runways.items()
            },
            **self.fields,
        )

    def scan_header(self):
        """Preamble, station identifier, time and modifiers."""
        res = self.scan(_groups.scan_preamble_date)
        if res is None:
            self.fields["year"] = self.utcnow.year
            self.fields["month"] = self.utcnow.month
        else:
            year, month, day = res[1]
            self.fields.update({"year": year, "month": month, "day": day})
        res = self.scan(_groups.scan_preamble_time)
        if res is not None:
            self.fields["hour"], self.fields["minute"] = res[1]

        self.scan(_groups.scan_type)
        res = self.scan(_groups.scan_id)
        if res is None:
            self.fail("metar station identifier bogus")
        self.fields["station"] = res[1]
        res = self.scan(_groups.scan_date)
        if res is None:
            self.fail("metar date bogus")
        day, hour, minute = res[1]
        self.fields.update({"day": day, "hour": hour, "minute": minute})

        while True:
            res = self.scan(_groups.scan_modifier)
            if res is None:
                break
            if res[1] is None:
                LOG.debug("NIL report for %s", self.fields["station"])
                self.fields["nil"] = True
                break
            self.fields["report_type"] = res[1]
        self.fields.setdefault("report_type", ReportType.NONE)

    def add_visibility(self, vis: Visibility):
        """Route a visibility to its slot."""
        if vis.direction != -1:
            slots = self.fields.setdefault(
                "directional_visibility", [Visibility() for _ in range(8)]
            )
            slots[vis.direction // 45] = vis
        elif "min_visibility" not in self.fields:
            self.fields["min_visibility"] = vis
        else:
            self.fields["max_visibility"] = vis

    def add_weather(self, value):
        """Record a present weather phrase, deriving precipitation flags."""
        phrase, wx = value
        self.fields.setdefault("weather", []).append(phrase)
        if wx is None:
            return
        self.fields.setdefault("weather_groups", []).append(wx)
        for code in wx.phenomena:
            if code == "RA":
                self.fields["rain"] = wx.intensity
            elif code == "DZ":
                self.fields["rain"] = Intensity.LIGHT
            elif code == "GR":
                self.fields["hail"] = wx.intensity
            elif code == "SN":
                self.fields["snow"] = wx.intensity

    def scan_sky(self):
        """Repeated sky condition groups."""
        while True:
            res = self.scan(
                _groups.scan_sky_condition, self.prior_coverage, self.rng
            )
            if res is None:
                return
            sky = res[1]
            if sky.coverage is not None:
                self.prior_coverage = sky.coverage
            if sky.layer is not None:
                self.fields.setdefault("clouds", []).append(sky.layer)
            if sky.vertical is not None:
                self.fields["vertical_visibility"] = sky.vertical
            if sky.cavok:
                self.fields["cavok"] = True
                # implies 9999
                self.fields.setdefault(
                    "min_visibility",
                    Visibility(
                        distance=reference.VISIBILITY_10KM,
                        modifier=Modifier.GREATER_THAN,
                    ),
                )

    def scan_remarks(self):
        """Remarks, of which only runway state groups are understood."""
        if not self.buf.startswith("RMK", self.pos):
            return
        pos = scan_boundary(self.buf, self.pos + 3)
        if pos is None:
            return
        self.fields["remarks"] = self.buf[pos:].rstrip(SENTINEL).strip()
        self.pos = pos
        while not at_end(self.buf, self.pos):
            res = self.scan(_runway.scan_runway_report)
            if res is None:
                self.pos = _groups.skip_token(self.buf, self.pos)[0]
            else:
                self.update_runway(*res[1])


def parser(text, utcnow=None, fill_missing_cloud_base=True) -> METARReport:
    """Helper function"""
    return METARDecoder(text, utcnow, fill_missing_cloud_base).data
