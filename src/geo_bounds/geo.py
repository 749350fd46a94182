"""Shared geographic constants and coordinate validation. Pure Python, no external deps."""

from __future__ import annotations

from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0

LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0


class OutOfRangeError(ValueError):
    """Raised when a latitude or longitude falls outside its valid range."""

    def __init__(self, field: str, value: float, low: float, high: float):
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{field} {value} out of range [{low:g}, {high:g}]")


@dataclass(frozen=True)
class Coordinate:
    """A point on the sphere, in decimal degrees."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


def check_coordinate(lat: float, lon: float) -> None:
    """Raise OutOfRangeError unless lat is in [-90, 90] and lon in [-180, 180].

    Boundaries are inclusive. NaN fails both comparisons and is rejected.
    """
    if not LAT_MIN <= lat <= LAT_MAX:
        raise OutOfRangeError("latitude", lat, LAT_MIN, LAT_MAX)
    if not LON_MIN <= lon <= LON_MAX:
        raise OutOfRangeError("longitude", lon, LON_MIN, LON_MAX)
