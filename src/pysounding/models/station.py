"""Station Information Data Model."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shapely.geometry import Point


class StationInfo(BaseModel):
    """Station identification and location.

    Instances are immutable, the ``with_*`` methods return a new copy.
    """

    model_config = ConfigDict(frozen=True)

    station_num: Optional[int] = Field(
        None, description="Station number, USAF number, eg 727730"
    )
    station_id: Optional[str] = Field(
        None, description="Station identifier, eg KDSM"
    )
    location: Optional[Tuple[float, float]] = Field(
        None, description="Latitude and longitude in degrees"
    )
    elevation: Optional[float] = Field(
        None,
        description=(
            "Elevation in meters, this may be in model terrain, not "
            "necessarily the same as the real world."
        ),
    )

    @field_validator("location")
    @classmethod
    def check_location(cls, value):
        """Make sure the coordinates are sane."""
        if value is None:
            return value
        lat, lon = value
        if not -90 <= lat <= 90:
            raise ValueError(f"latitude {lat} out of range")
        if not -180 <= lon <= 360:
            raise ValueError(f"longitude {lon} out of range")
        return value

    def _replace(self, **kwargs) -> "StationInfo":
        """Return a validated copy with some fields replaced."""
        return StationInfo(**{**self.model_dump(), **kwargs})

    def with_station(self, number: Optional[int]) -> "StationInfo":
        """Builder method to add a station number."""
        return self._replace(station_num=number)

    def with_station_id(self, sid: Optional[str]) -> "StationInfo":
        """Builder method to add a station identifier."""
        return self._replace(station_id=sid)

    def with_lat_lon(self, coords) -> "StationInfo":
        """Builder method to add a location."""
        return self._replace(location=coords)

    def with_elevation(self, elev: Optional[float]) -> "StationInfo":
        """Builder method to add elevation."""
        return self._replace(elevation=elev)

    @property
    def latitude(self) -> Optional[float]:
        """Latitude or None."""
        return None if self.location is None else self.location[0]

    @property
    def longitude(self) -> Optional[float]:
        """Longitude or None."""
        return None if self.location is None else self.location[1]

    @property
    def geom(self) -> Optional[Point]:
        """The location as a shapely Point(lon, lat)."""
        if self.location is None:
            return None
        return Point(self.location[1], self.location[0])
