"""Data Model for a single row of sounding data."""

from pydantic import BaseModel, ConfigDict, field_validator

from pysounding.enums import Profile
from pysounding.optional import MISSING, OptionalValue, optional


class DataRow(BaseModel):
    """A copy of one level of the sounding.

    Produced by iteration or the row accessors on
    :class:`pysounding.Sounding`, never stored by it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    pressure: OptionalValue = MISSING  # hPa
    temperature: OptionalValue = MISSING  # C
    wet_bulb: OptionalValue = MISSING  # C
    dew_point: OptionalValue = MISSING  # C
    theta_e: OptionalValue = MISSING  # K
    direction: OptionalValue = MISSING  # degrees, from
    speed: OptionalValue = MISSING  # knots
    omega: OptionalValue = MISSING  # Pa/s
    height: OptionalValue = MISSING  # m
    cloud_fraction: OptionalValue = MISSING  # percent

    @field_validator("*", mode="before")
    @classmethod
    def coerce_optional(cls, value):
        """Allow plain numbers and None to be provided."""
        try:
            return optional(value)
        except TypeError as exp:
            raise ValueError(str(exp)) from exp

    def get(self, profile: Profile) -> OptionalValue:
        """Return the value for the given profile variable."""
        return getattr(self, Profile(profile).value)

    def as_dict(self) -> dict:
        """Return a dict of plain floats, missing values are None."""
        return {
            name: getattr(self, name).as_option()
            for name in type(self).model_fields
        }
