"""Python representation of an atmospheric sounding.

A sounding is a vertical profile of meteorological measurements with pressure
as the vertical coordinate, plus a surface observation and some station
metadata.  This package is meant to be a common base for tools that store,
display, or read and write sounding data.
"""

import os
from importlib.metadata import PackageNotFoundError, version

from pysounding.enums import Index, Profile, Surface, TieBreak
from pysounding.models.datarow import DataRow
from pysounding.models.station import StationInfo
from pysounding.optional import MISSING, OptionalValue, optional, present
from pysounding.sounding import Sounding

try:
    __version__ = version("pysounding")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"

__all__ = [
    "MISSING",
    "DataRow",
    "Index",
    "OptionalValue",
    "Profile",
    "Sounding",
    "StationInfo",
    "Surface",
    "TieBreak",
    "optional",
    "present",
]
