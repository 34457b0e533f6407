"""Centralized Testing Stuff."""

# third party
import pytest

# This repo
from pysounding import Profile, Sounding, StationInfo, Surface
from pysounding.util import utc


@pytest.fixture()
def snd() -> Sounding:
    """A standard atmosphere-ish sounding stored ground up."""
    return (
        Sounding(source="testing")
        .set_station_info(
            StationInfo(
                station_num=727730,
                station_id="KMSO",
                location=(46.92, -114.09),
                elevation=972.0,
            )
        )
        .set_valid_time(utc(2017, 4, 1, 12))
        .set_lead_time(0)
        .set_profile(
            Profile.PRESSURE, [1000, 925, 850, 700, 500, 300, 250, 100]
        )
        .set_profile(
            Profile.TEMPERATURE,
            [13, 7, 5, -4.5, -20.6, -44, -52, -56.5],
        )
        .set_surface_value(Surface.STATION_PRESSURE, 1013.25)
        .set_surface_value(Surface.TEMPERATURE, 15.0)
    )
