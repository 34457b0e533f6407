"""Data type and methods to store an atmospheric sounding.

The upper air profile variables are stored as parallel lists of
:class:`OptionalValue`, one entry per vertical level, so index ``i`` of
every profile refers to the same level.  Surface values, station details,
valid time and lead time are kept alongside.

Soundings are built with chained setters::

    snd = (
        Sounding()
        .set_station_info(StationInfo(station_num=727730))
        .set_valid_time(utc(2017, 4, 1, 12))
        .set_profile(Profile.PRESSURE, [1000, 925, 850])
        .set_profile(Profile.TEMPERATURE, [13, 7, 5])
        .set_surface_value(Surface.STATION_PRESSURE, 1013.25)
    )
    for row in snd.top_down():
        ...
"""

import copy
from datetime import datetime
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from metpy.units import masked_array, units

from pysounding.enums import Index, Profile, Surface, TieBreak
from pysounding.exceptions import LengthMismatch, ValidationError
from pysounding.iterator import (
    SURFACE_SLOT,
    ProfileIterator,
    merge_plan,
    storage_is_top_down,
)
from pysounding.models.datarow import DataRow
from pysounding.models.station import StationInfo
from pysounding.optional import MISSING, OptionalValue, optional
from pysounding.reference import (
    DEFAULT_TIE_BREAK,
    PROFILE_UNITS,
    SURFACE_TO_PROFILE,
)
from pysounding.util import LOG, ensure_utc


class Sounding:
    """All the variables stored in the sounding."""

    def __init__(self, source: Optional[str] = None):
        """Create an empty sounding.

        Args:
          source (str): optional description of where the data came from
        """
        self.source = source
        self._station = StationInfo()
        self._valid_time: Optional[datetime] = None
        self._lead_time = 0
        self._profiles: Dict[Profile, List[OptionalValue]] = {}
        self._level_count = 0
        self._surface: Dict[Surface, OptionalValue] = {}
        self._indexes: Dict[Index, OptionalValue] = {}

    def __repr__(self):
        return (
            f"Sounding(station={self._station.station_num}, "
            f"valid={self._valid_time}, lead={self._lead_time}, "
            f"levels={self._level_count})"
        )

    def __eq__(self, other):
        if not isinstance(other, Sounding):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None

    def _state(self):
        """Everything that makes up the value of this sounding."""
        return (
            self.source,
            self._station,
            self._valid_time,
            self._lead_time,
            self._profiles,
            self._level_count,
            self._surface,
            self._indexes,
        )

    def __len__(self):
        return self._level_count

    def __iter__(self):
        """Iterate bottom up."""
        return self.bottom_up()

    @property
    def level_count(self) -> int:
        """Number of vertical levels in the profiles."""
        return self._level_count

    # Profiles

    def set_profile(self, kind: Profile, values) -> "Sounding":
        """Set a profile variable.

        The first profile set fixes the number of levels, after that every
        profile must have the same length.

        Args:
          kind (Profile): which variable
          values (iterable): numbers, None or OptionalValue, one per level

        Returns:
          this sounding

        Raises:
          LengthMismatch: when the length differs from the level count
        """
        kind = Profile(kind)
        values = [optional(v) for v in values]
        if self._profiles and len(values) != self._level_count:
            raise LengthMismatch(kind, self._level_count, len(values))
        if not self._profiles:
            LOG.debug("Level count set to %s by %s", len(values), kind)
        self._profiles[kind] = values
        self._level_count = len(values)
        return self

    def get_profile(self, kind: Profile) -> List[OptionalValue]:
        """Get a copy of a profile variable.

        A profile that was never set comes back as all missing values.
        """
        kind = Profile(kind)
        if kind not in self._profiles:
            return [MISSING] * self._level_count
        return list(self._profiles[kind])

    def has_profile(self, kind: Profile) -> bool:
        """Has this profile been set."""
        return Profile(kind) in self._profiles

    def clear_profiles(self) -> "Sounding":
        """Remove all profiles, so a new level count may be used."""
        self._profiles = {}
        self._level_count = 0
        return self

    def profile_quantity(self, kind: Profile):
        """Get a profile as a unit aware masked array.

        Returns:
          pint.Quantity wrapping a numpy masked array
        """
        kind = Profile(kind)
        vals = self.get_profile(kind)
        return masked_array(
            np.array([float(v) for v in vals], dtype=float),
            units(PROFILE_UNITS[kind]),
            mask=[v.is_missing for v in vals],
        )

    # Surface

    def set_surface_value(self, kind: Surface, value) -> "Sounding":
        """Set a surface variable."""
        self._surface[Surface(kind)] = optional(value)
        return self

    def get_surface_value(self, kind: Surface) -> OptionalValue:
        """Get a surface variable."""
        return self._surface.get(Surface(kind), MISSING)

    # Indexes

    def set_index(self, kind: Index, value) -> "Sounding":
        """Store an index value."""
        self._indexes[Index(kind)] = optional(value)
        return self

    def get_index(self, kind: Index) -> OptionalValue:
        """Get an index value."""
        return self._indexes.get(Index(kind), MISSING)

    # Metadata

    def set_station_info(self, info: StationInfo) -> "Sounding":
        """Set the station information."""
        if not isinstance(info, StationInfo):
            raise TypeError("info must be a StationInfo")
        self._station = info
        return self

    @property
    def station_info(self) -> StationInfo:
        """Station information."""
        return self._station

    def set_valid_time(self, valid: Optional[datetime]) -> "Sounding":
        """Valid time of sounding, naive datetimes are assumed UTC."""
        self._valid_time = ensure_utc(valid)
        return self

    @property
    def valid_time(self) -> Optional[datetime]:
        """Valid time of sounding."""
        return self._valid_time

    def set_lead_time(self, hours: int) -> "Sounding":
        """Difference in model initialization time and valid time in hours."""
        self._lead_time = int(hours)
        return self

    @property
    def lead_time(self) -> int:
        """Difference in model initialization time and valid time in hours."""
        return self._lead_time

    # Rows

    def get_data_row(self, idx: int) -> Optional[DataRow]:
        """Get a row of data values from this sounding.

        Returns:
          DataRow or None when ``idx`` is out of range
        """
        if idx < 0 or idx >= self._level_count:
            return None
        return DataRow(
            **{
                kind.value: values[idx]
                for kind, values in self._profiles.items()
            }
        )

    def surface_as_data_row(self) -> Optional[DataRow]:
        """The surface observation as a row, None without station pressure."""
        if self.get_surface_value(Surface.STATION_PRESSURE).is_missing:
            return None
        row = {
            profile.value: self.get_surface_value(surface)
            for surface, profile in SURFACE_TO_PROFILE.items()
        }
        row["height"] = optional(self._station.elevation)
        return DataRow(**row)

    def fetch_nearest_pnt(self, target_p: float) -> Optional[DataRow]:
        """Return the profile row with pressure closest to ``target_p``."""
        best = None
        best_diff = None
        for idx, pres in enumerate(self.get_profile(Profile.PRESSURE)):
            if pres.is_missing:
                continue
            diff = abs(pres.value - target_p)
            if best_diff is None or diff < best_diff:
                best = idx
                best_diff = diff
        if best is None:
            return None
        return self.get_data_row(best)

    def _plan(self, tie_break):
        """Bottom up merge plan."""
        return merge_plan(
            self.get_profile(Profile.PRESSURE),
            self.get_surface_value(Surface.STATION_PRESSURE),
            tie_break,
        )

    def bottom_up(self, tie_break: TieBreak = DEFAULT_TIE_BREAK):
        """Get a bottom up iterator over the data rows.

        Rows start at the ground and climb, the surface observation is
        spliced in at its pressure.
        """
        return ProfileIterator(self, self._plan(tie_break))

    def top_down(self, tie_break: TieBreak = DEFAULT_TIE_BREAK):
        """Get a top down iterator over the data rows.

        Exactly the reverse of :meth:`bottom_up`.
        """
        return ProfileIterator(self, self._plan(tie_break), reverse=True)

    # Whole sounding helpers

    def copy(self) -> "Sounding":
        """Return an independent copy."""
        return copy.deepcopy(self)

    def to_dataframe(
        self, top_down: bool = False, tie_break: TieBreak = DEFAULT_TIE_BREAK
    ) -> pd.DataFrame:
        """Return the merged rows as a pandas DataFrame.

        Missing values are NaN and the ``surface`` column flags the row that
        came from the surface observation.
        """
        plan = self._plan(tie_break)
        if top_down:
            plan = plan[::-1]
        rows = []
        for slot in plan:
            if slot is SURFACE_SLOT:
                row = self.surface_as_data_row()
            else:
                row = self.get_data_row(slot)
            rows.append(
                {
                    **{k: float(v) for k, v in row},
                    "surface": slot is SURFACE_SLOT,
                }
            )
        columns = [*DataRow.model_fields, "surface"]
        return pd.DataFrame(rows, columns=columns)

    def validate(self):
        """Check the sounding for physical consistency.

        Raises:
          ValidationError: listing every problem found
        """
        problems = []
        for kind, values in self._profiles.items():
            if len(values) != self._level_count:
                problems.append(f"{kind} has {len(values)} levels")
        pres = self.get_profile(Profile.PRESSURE)
        walk = list(range(self._level_count))
        if storage_is_top_down(pres):
            walk.reverse()
        _check_monotonic(
            problems, pres, walk, lambda a, b: a < b, "pressure"
        )
        _check_monotonic(
            problems,
            self.get_profile(Profile.GEOPOTENTIAL_HEIGHT),
            walk,
            lambda a, b: a > b,
            "height",
        )
        tmpc = self.get_profile(Profile.TEMPERATURE)
        dwpc = self.get_profile(Profile.DEW_POINT)
        wetb = self.get_profile(Profile.WET_BULB)
        for i in range(self._level_count):
            if dwpc[i] > tmpc[i]:
                problems.append(f"dew point above temperature at level {i}")
            if wetb[i] > tmpc[i] or wetb[i] < dwpc[i]:
                problems.append(f"wet bulb out of range at level {i}")
        if self.get_surface_value(Surface.DEW_POINT) > self.get_surface_value(
            Surface.TEMPERATURE
        ):
            problems.append("surface dew point above surface temperature")
        if self._lead_time < 0:
            problems.append(f"negative lead time {self._lead_time}")
        if problems:
            LOG.info("Sounding failed validation: %s", problems)
            raise ValidationError(problems)


def _check_monotonic(problems, values, walk, ok, label):
    """Make sure present values change in one direction along the walk."""
    last = MISSING
    for idx in walk:
        val = values[idx]
        if val.is_missing:
            continue
        if last.is_present and not ok(val, last):
            problems.append(f"{label} not monotonic at level {idx}")
        last = val
