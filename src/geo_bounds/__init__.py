"""Bounding boxes around a point and Morton (Z-order) codes for lat/lon pairs."""

from geo_bounds.bounding_box import BoundingBox, compute_bounding_box
from geo_bounds.geo import EARTH_RADIUS_KM, Coordinate, OutOfRangeError
from geo_bounds.morton import decode_morton, encode_morton, morton_distance

__all__ = [
    "EARTH_RADIUS_KM",
    "BoundingBox",
    "Coordinate",
    "OutOfRangeError",
    "compute_bounding_box",
    "decode_morton",
    "encode_morton",
    "morton_distance",
]
