"""Names of the quantities stored in a sounding."""

from enum import Enum


class Profile(str, Enum):
    """Upper air profile variables."""

    def __str__(self):
        """When we want the str repr."""
        return _PROFILE_NAMES[self]

    PRESSURE = "pressure"  # hPa
    TEMPERATURE = "temperature"  # C
    WET_BULB = "wet_bulb"  # C
    DEW_POINT = "dew_point"  # C
    THETA_E = "theta_e"  # K
    WIND_DIRECTION = "direction"  # degrees, from
    WIND_SPEED = "speed"  # knots
    PRESSURE_VERTICAL_VELOCITY = "omega"  # Pa/s
    GEOPOTENTIAL_HEIGHT = "height"  # m
    CLOUD_FRACTION = "cloud_fraction"  # percent


class Surface(str, Enum):
    """Surface observed variables."""

    def __str__(self):
        """When we want the str repr."""
        return _SURFACE_NAMES[self]

    MSLP = "mslp"  # hPa, reduced to mean sea level
    STATION_PRESSURE = "station_pressure"  # hPa
    LOW_CLOUD = "low_cloud"  # percent
    MID_CLOUD = "mid_cloud"  # percent
    HIGH_CLOUD = "high_cloud"  # percent
    WIND_DIRECTION = "wind_direction"  # degrees, from
    WIND_SPEED = "wind_speed"  # knots
    TEMPERATURE = "temperature"  # 2 meter, C
    DEW_POINT = "dew_point"  # 2 meter, C
    PRECIPITATION = "precipitation"  # liquid equivalent, in


class Index(str, Enum):
    """Sounding indexes that may be stored alongside the data.

    These are only stored, typically after being read from a file that
    carries them.  Nothing here computes them.
    """

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    SHOWALTER = "showalter"
    LI = "li"
    SWET = "swet"
    K = "k"
    LCL = "lcl"  # hPa
    PWAT = "pwat"  # mm
    TOTAL_TOTALS = "total_totals"
    CAPE = "cape"  # J/kg
    LCL_TEMPERATURE = "lcl_temperature"  # K
    CIN = "cin"  # J/kg
    EQUILIBRIUM_LEVEL = "equilibrium_level"  # hPa
    LFC = "lfc"  # hPa
    BULK_RICHARDSON_NUMBER = "bulk_richardson_number"
    HAINES = "haines"


class TieBreak(str, Enum):
    """What to emit when a profile level sits at the surface pressure."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    SURFACE = "surface"  # surface row wins, profile level is dropped
    PROFILE = "profile"  # profile level wins, surface row is dropped
    BOTH = "both"  # emit both rows


_PROFILE_NAMES = {
    Profile.PRESSURE: "pressure",
    Profile.TEMPERATURE: "temperature",
    Profile.WET_BULB: "wet bulb temperature",
    Profile.DEW_POINT: "dew point temperature",
    Profile.THETA_E: "equivalent potential temperature",
    Profile.WIND_DIRECTION: "wind direction",
    Profile.WIND_SPEED: "wind speed",
    Profile.PRESSURE_VERTICAL_VELOCITY: "vertical velocity",
    Profile.GEOPOTENTIAL_HEIGHT: "height",
    Profile.CLOUD_FRACTION: "cloud fraction",
}

_SURFACE_NAMES = {
    Surface.MSLP: "sea level pressure",
    Surface.STATION_PRESSURE: "station pressure",
    Surface.LOW_CLOUD: "low cloud fraction",
    Surface.MID_CLOUD: "mid cloud fraction",
    Surface.HIGH_CLOUD: "high cloud fraction",
    Surface.WIND_DIRECTION: "wind direction",
    Surface.WIND_SPEED: "wind speed",
    Surface.TEMPERATURE: "2-meter temperature",
    Surface.DEW_POINT: "2-meter dew point",
    Surface.PRECIPITATION: "precipitation (liquid equivalent)",
}
