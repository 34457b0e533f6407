"""Reference values and dictionaries

No functional code found within this module, just a bunch of statics

.. data:: PROFILE_UNITS

    A dictionary mapping each :class:`Profile` to the units, as understood
    by metpy, that the values are stored in.

.. data:: SURFACE_TO_PROFILE

    A dictionary pairing the surface variables that have an upper air
    counterpart with that profile.  Used when the surface observation is
    spliced into the profile as a data row.

"""

from pysounding.enums import Profile, Surface, TieBreak

# Flag value used by GEMPAK/BUFKIT style files for missing data
MISSING_FLAG = -9999

# What the merge does when the surface and a profile level share a pressure
DEFAULT_TIE_BREAK = TieBreak.SURFACE

PROFILE_UNITS = {
    Profile.PRESSURE: "hPa",
    Profile.TEMPERATURE: "degC",
    Profile.WET_BULB: "degC",
    Profile.DEW_POINT: "degC",
    Profile.THETA_E: "degK",
    Profile.WIND_DIRECTION: "degree",
    Profile.WIND_SPEED: "knot",
    Profile.PRESSURE_VERTICAL_VELOCITY: "Pa/s",
    Profile.GEOPOTENTIAL_HEIGHT: "meter",
    Profile.CLOUD_FRACTION: "percent",
}

SURFACE_UNITS = {
    Surface.MSLP: "hPa",
    Surface.STATION_PRESSURE: "hPa",
    Surface.LOW_CLOUD: "percent",
    Surface.MID_CLOUD: "percent",
    Surface.HIGH_CLOUD: "percent",
    Surface.WIND_DIRECTION: "degree",
    Surface.WIND_SPEED: "knot",
    Surface.TEMPERATURE: "degC",
    Surface.DEW_POINT: "degC",
    Surface.PRECIPITATION: "inch",
}

SURFACE_TO_PROFILE = {
    Surface.STATION_PRESSURE: Profile.PRESSURE,
    Surface.TEMPERATURE: Profile.TEMPERATURE,
    Surface.DEW_POINT: Profile.DEW_POINT,
    Surface.WIND_DIRECTION: Profile.WIND_DIRECTION,
    Surface.WIND_SPEED: Profile.WIND_SPEED,
}
