"""Test the Sounding data type."""

import math
from datetime import datetime

import numpy as np
import pytest
from metpy.units import units

from pysounding import (
    MISSING,
    Index,
    Profile,
    Sounding,
    StationInfo,
    Surface,
    present,
)
from pysounding.exceptions import LengthMismatch, ValidationError
from pysounding.util import utc


def test_first_profile_sets_level_count():
    """Any length is fine the first time."""
    snd = Sounding()
    assert snd.level_count == 0
    assert len(snd) == 0
    assert snd.set_profile(Profile.TEMPERATURE, [1, 2, 3]) is snd
    assert snd.level_count == 3


def test_length_mismatch(snd):
    """Profiles must all be the same length."""
    with pytest.raises(LengthMismatch) as exp:
        snd.set_profile(Profile.DEW_POINT, [1, 2, 3])
    assert exp.value.expected == 8
    assert exp.value.got == 3
    assert exp.value.kind == Profile.DEW_POINT
    assert isinstance(exp.value, ValueError)
    # nothing changed
    assert not snd.has_profile(Profile.DEW_POINT)
    assert snd.level_count == 8


def test_length_mismatch_replacing_only_profile():
    """The level count is established by the first profile."""
    snd = Sounding().set_profile(Profile.PRESSURE, [1000, 850])
    with pytest.raises(LengthMismatch):
        snd.set_profile(Profile.PRESSURE, [1000, 850, 700])
    snd.clear_profiles()
    assert snd.level_count == 0
    snd.set_profile(Profile.PRESSURE, [1000, 850, 700])
    assert snd.level_count == 3


def test_replace_profile(snd):
    """Same length replacement is fine."""
    snd.set_profile(Profile.TEMPERATURE, [0] * 8)
    assert snd.get_profile(Profile.TEMPERATURE) == [present(0)] * 8


def test_get_profile_unset(snd):
    """Unset profiles come back sized and missing."""
    assert not snd.has_profile(Profile.CLOUD_FRACTION)
    assert snd.get_profile(Profile.CLOUD_FRACTION) == [MISSING] * 8
    assert Sounding().get_profile(Profile.PRESSURE) == []


def test_get_profile_is_a_copy(snd):
    """The sounding owns its data."""
    vals = snd.get_profile(Profile.TEMPERATURE)
    vals[0] = present(99.0)
    assert snd.get_profile(Profile.TEMPERATURE)[0] == 13
    source = [1.0, 2.0]
    other = Sounding().set_profile(Profile.PRESSURE, source)
    source[0] = 5.0
    assert other.get_profile(Profile.PRESSURE)[0] == 1.0


def test_profile_input_flavors():
    """numpy arrays, masked arrays and strings for kinds."""
    snd = Sounding().set_profile(
        "pressure", np.ma.array([1000.0, 850.0], mask=[False, True])
    )
    assert snd.get_profile(Profile.PRESSURE) == [present(1000.0), MISSING]
    snd.set_profile(Profile.TEMPERATURE, np.array([10.0, np.nan]))
    assert snd.get_profile(Profile.TEMPERATURE)[1] is MISSING
    snd.set_profile(Profile.DEW_POINT, [-9999, 2])
    assert snd.get_profile(Profile.DEW_POINT)[0] is MISSING
    with pytest.raises(ValueError):
        snd.set_profile("vorticity", [1, 2])


def test_surface_values(snd):
    """Surface values have no length constraint."""
    assert snd.get_surface_value(Surface.STATION_PRESSURE) == 1013.25
    assert snd.get_surface_value(Surface.MSLP) is MISSING
    assert snd.set_surface_value(Surface.MSLP, 1020.0) is snd
    assert snd.get_surface_value("mslp") == 1020.0
    snd.set_surface_value(Surface.MSLP, None)
    assert snd.get_surface_value(Surface.MSLP) is MISSING


def test_indexes():
    """Stored indexes."""
    snd = Sounding()
    assert snd.get_index(Index.CAPE) is MISSING
    snd.set_index(Index.CAPE, 852.0).set_index(Index.CIN, -200.0)
    assert snd.get_index(Index.CAPE) == 852.0
    assert snd.get_index(Index.CIN) == -200.0


def test_metadata(snd):
    """Whole value replacement of the metadata."""
    assert snd.station_info.station_num == 727730
    assert snd.valid_time == utc(2017, 4, 1, 12)
    assert snd.lead_time == 0
    snd.set_station_info(StationInfo(station_num=1)).set_lead_time(6)
    assert snd.station_info.station_num == 1
    assert snd.station_info.elevation is None
    assert snd.lead_time == 6
    with pytest.raises(TypeError):
        snd.set_station_info({"station_num": 1})
    assert snd.set_valid_time(None).valid_time is None
    assert "levels=8" in repr(snd)


def test_naive_valid_time():
    """Naive datetimes are assumed UTC."""
    with pytest.warns(UserWarning):
        snd = Sounding().set_valid_time(datetime(2020, 5, 1, 0))
    assert snd.valid_time == utc(2020, 5, 1)


def test_get_data_row(snd):
    """Rows by storage index."""
    row = snd.get_data_row(2)
    assert row.pressure == 850
    assert row.temperature == 5
    assert row.dew_point is MISSING
    assert snd.get_data_row(8) is None
    assert snd.get_data_row(-1) is None


def test_surface_as_data_row(snd):
    """The surface row picks up the station elevation."""
    row = snd.surface_as_data_row()
    assert row.pressure == 1013.25
    assert row.temperature == 15.0
    assert row.height == 972.0
    assert row.cloud_fraction is MISSING
    snd.set_surface_value(Surface.STATION_PRESSURE, None)
    assert snd.surface_as_data_row() is None


def test_fetch_nearest_pnt(snd):
    """Closest level by pressure."""
    assert snd.fetch_nearest_pnt(860.0).pressure == 850
    assert snd.fetch_nearest_pnt(5.0).pressure == 100
    assert Sounding().fetch_nearest_pnt(500.0) is None
    nopres = Sounding().set_profile(Profile.TEMPERATURE, [1, 2])
    assert nopres.fetch_nearest_pnt(500.0) is None


def test_copy(snd):
    """Copies are independent."""
    other = snd.copy()
    assert other == snd
    other.set_surface_value(Surface.TEMPERATURE, 0.0)
    assert other != snd
    assert snd.get_surface_value(Surface.TEMPERATURE) == 15.0
    assert snd != "sounding"


def test_to_dataframe(snd):
    """Export the merged rows."""
    df = snd.to_dataframe()
    assert len(df.index) == 9
    assert df["surface"].sum() == 1
    assert df.iloc[0]["pressure"] == 1013.25
    assert df["dew_point"].isna().all()
    df = snd.to_dataframe(top_down=True)
    assert df.iloc[0]["pressure"] == 100
    assert df.iloc[-1]["surface"]
    assert Sounding().to_dataframe().empty


def test_profile_quantity(snd):
    """Unit aware profiles."""
    snd.set_profile(Profile.DEW_POINT, [10, None, 0, 0, 0, 0, 0, 0])
    tmpc = snd.profile_quantity(Profile.TEMPERATURE)
    assert tmpc.units == units("degC")
    assert tmpc.m[0] == 13
    dwpc = snd.profile_quantity(Profile.DEW_POINT)
    assert dwpc.m.mask[1]
    assert not dwpc.m.mask[0]
    pres = snd.profile_quantity(Profile.PRESSURE)
    assert math.isclose(pres.to(units("Pa")).m[0], 100000.0)


def test_validate_ok(snd):
    """The test sounding is fine."""
    snd.validate()


def test_validate_problems(snd):
    """Collect all the problems."""
    snd.set_profile(Profile.DEW_POINT, [14, 0, 0, -10, -30, -50, -60, -70])
    snd.set_profile(
        Profile.GEOPOTENTIAL_HEIGHT,
        [100, 800, 1500, 3000, 2000, 9000, 10000, 16000],
    )
    snd.set_profile(Profile.WET_BULB, [None, 8, 2, -5, -25, -45, -55, -60])
    snd.set_surface_value(Surface.DEW_POINT, 20.0)
    snd.set_lead_time(-1)
    with pytest.raises(ValidationError) as exp:
        snd.validate()
    problems = exp.value.problems
    assert "dew point above temperature at level 0" in problems
    assert "height not monotonic at level 4" in problems
    assert "wet bulb out of range at level 1" in problems
    assert "surface dew point above surface temperature" in problems
    assert "negative lead time -1" in problems
    assert len(problems) == 5


def test_validate_pressure_order():
    """Pressure must fall with height."""
    snd = Sounding().set_profile(Profile.PRESSURE, [1000, 700, 850, 500])
    with pytest.raises(ValidationError) as exp:
        snd.validate()
    assert exp.value.problems == ["pressure not monotonic at level 2"]
