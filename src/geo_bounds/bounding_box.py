"""Bounding box around a center point via the Inverse Haversine formula.

The box is the one inscribing a circle of ``radius_km`` around the center:
its southwest corner is the destination point at bearing 225 deg and its
northeast corner the destination at bearing 45 deg. Both corners are derived
from the single bearing cosine ``cos(225 deg)``, the northeast one by flipping
its sign.

Spherical Earth (mean radius 6371 km). Poles are not crossed and longitude is
wrapped at most once, so radii near or above half the Earth's circumference
give undefined output.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass

from geo_bounds.geo import EARTH_RADIUS_KM, check_coordinate

logger = logging.getLogger(__name__)

BEARING_SW_COS = math.cos(math.radians(225.0))  # -0.7071067811865476

ROUND_SCALE = 1e7  # 7 decimal places


@dataclass(frozen=True)
class BoundingBox:
    """Southwest / northeast corners, in decimal degrees.

    ``south <= north`` always holds. ``west > east`` means the box spans the
    180th meridian and callers must split their range query in two.
    """

    south: float
    west: float
    north: float
    east: float

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    @property
    def southwest(self) -> tuple[float, float]:
        return (self.south, self.west)

    @property
    def northeast(self) -> tuple[float, float]:
        return (self.north, self.east)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.south, self.west, self.north, self.east)

    def to_geojson(self) -> dict:
        """Render as a GeoJSON Feature with a ``bbox`` and a closed polygon ring."""
        ring = [
            [self.west, self.south],
            [self.west, self.north],
            [self.east, self.north],
            [self.east, self.south],
            [self.west, self.south],
        ]
        return {
            "type": "Feature",
            "bbox": [self.west, self.south, self.east, self.north],
            "geometry": {"type": "Polygon", "coordinates": [ring]},
        }

    def to_json(self) -> str:
        return json.dumps(self.to_geojson())


def _round7(value: float) -> float:
    # Round half up, independent of float formatting.
    return math.floor(value * ROUND_SCALE + 0.5) / ROUND_SCALE


def _wrap_longitude(lon_deg: float) -> float:
    # Single correction only; multiple wraps are not handled.
    if lon_deg > 180.0:
        return lon_deg - 360.0
    if lon_deg < -180.0:
        return lon_deg + 360.0
    return lon_deg


def _clamp_unit(value: float) -> float:
    # asin domain; float noise can push |coef| past 1 at the poles
    return max(-1.0, min(1.0, value))


def compute_bounding_box(center_lat: float, center_lon: float, radius_km: float) -> BoundingBox:
    """Return the box guaranteed to contain every point within ``radius_km`` of the center.

    Args:
        center_lat: Center latitude in degrees, [-90, 90].
        center_lon: Center longitude in degrees, [-180, 180].
        radius_km: Radius in kilometers. Must be finite; otherwise not range-checked.

    Returns:
        BoundingBox with every component rounded half-up to 7 decimals.

    Raises:
        OutOfRangeError: If the center coordinate is out of range.
        ValueError: If radius_km is infinite or NaN.
    """
    check_coordinate(center_lat, center_lon)
    if not math.isfinite(radius_km):
        raise ValueError(f"radius_km must be finite, got {radius_km}")

    lat_rad = math.radians(center_lat)
    lon_rad = math.radians(center_lon)
    angular = radius_km / EARTH_RADIUS_KM

    lat_sin = math.sin(lat_rad)
    ang_cos = math.cos(angular)

    lat_sin_x_ang_cos = lat_sin * ang_cos
    bearing_term = math.cos(lat_rad) * math.sin(angular) * BEARING_SW_COS

    coef_1 = _clamp_unit(lat_sin_x_ang_cos + bearing_term)
    coef_2 = _clamp_unit(lat_sin_x_ang_cos - bearing_term)

    south = math.degrees(math.asin(coef_1))
    north = math.degrees(math.asin(coef_2))
    west = math.degrees(lon_rad + math.atan2(bearing_term, ang_cos - lat_sin * coef_1))
    east = math.degrees(lon_rad + math.atan2(-bearing_term, ang_cos - lat_sin * coef_2))

    box = BoundingBox(
        south=_round7(south),
        west=_round7(_wrap_longitude(west)),
        north=_round7(north),
        east=_round7(_wrap_longitude(east)),
    )
    logger.debug(
        "bbox center=(%s, %s) radius_km=%s -> %s",
        center_lat, center_lon, radius_km, box.as_tuple(),
    )
    return box
