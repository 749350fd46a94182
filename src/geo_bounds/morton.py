"""Morton (Z-order curve) codes for latitude/longitude pairs.

A coordinate is shifted to non-negative ranges (latitude + 90, longitude + 180),
scaled to fixed point with 1e7 steps per degree and truncated to two 32-bit
unsigned integers. Latitude bit ``i`` lands on code bit ``2i`` and longitude
bit ``i`` on code bit ``2i + 1``.
"""

from __future__ import annotations

from geo_bounds.geo import LAT_MIN, LON_MIN, Coordinate, check_coordinate

FIXED_POINT_SCALE = 10_000_000

UINT32_MASK = 0xFFFFFFFF
UINT64_MASK = 0xFFFFFFFFFFFFFFFF

EVEN_BITS = 0x5555555555555555  # latitude plane
ODD_BITS = 0xAAAAAAAAAAAAAAAA   # longitude plane


def _spread(value: int) -> int:
    """Spread the low 32 bits of ``value`` onto the even bits of a 64-bit int."""
    value &= UINT32_MASK
    value = (value | (value << 16)) & 0x0000FFFF0000FFFF
    value = (value | (value << 8)) & 0x00FF00FF00FF00FF
    value = (value | (value << 4)) & 0x0F0F0F0F0F0F0F0F
    value = (value | (value << 2)) & 0x3333333333333333
    value = (value | (value << 1)) & 0x5555555555555555
    return value


def _compact(value: int) -> int:
    """Inverse of _spread: gather the even bits of ``value`` into 32 bits."""
    value &= EVEN_BITS
    value = (value | (value >> 1)) & 0x3333333333333333
    value = (value | (value >> 2)) & 0x0F0F0F0F0F0F0F0F
    value = (value | (value >> 4)) & 0x00FF00FF00FF00FF
    value = (value | (value >> 8)) & 0x0000FFFF0000FFFF
    value = (value | (value >> 16)) & 0x00000000FFFFFFFF
    return value


def encode(lat: float, lon: float) -> int:
    """Encode a coordinate as a 64-bit Morton code.

    Fixed-point conversion truncates, so ``decode(encode(lat, lon))`` can be
    up to 1e-7 degrees below the input on each axis.

    Raises:
        OutOfRangeError: If lat is outside [-90, 90] or lon outside [-180, 180].
    """
    check_coordinate(lat, lon)

    lat_fixed = int((lat - LAT_MIN) * FIXED_POINT_SCALE) & UINT32_MASK
    lon_fixed = int((lon - LON_MIN) * FIXED_POINT_SCALE) & UINT32_MASK

    return _spread(lat_fixed) | (_spread(lon_fixed) << 1)


def decode(code: int) -> Coordinate:
    """Decode a Morton code back to a coordinate. Never raises for a 64-bit input."""
    code &= UINT64_MASK
    lat_fixed = _compact(code)
    lon_fixed = _compact(code >> 1)
    return Coordinate(
        latitude=lat_fixed / FIXED_POINT_SCALE + LAT_MIN,
        longitude=lon_fixed / FIXED_POINT_SCALE + LON_MIN,
    )


def distance(code_a: int, code_b: int) -> int:
    """Bit-plane distance between two Morton codes.

    Each code is split into its even-bit plane and odd-bit plane. The absolute
    difference of the two codes' planes is masked back onto that plane, and the
    two masked results are OR-ed together.

    This is a coarse locality proxy, NOT a geometric distance. It does not
    shrink monotonically with physical distance across bit-plane boundaries and
    knows nothing about the antimeridian or the poles. Use it to rank or bucket
    candidates, never to compare against a radius.

    ``distance(a, a) == 0`` and ``distance(a, b) == distance(b, a)``.
    """
    code_a &= UINT64_MASK
    code_b &= UINT64_MASK
    x = abs((code_a & EVEN_BITS) - (code_b & EVEN_BITS)) & EVEN_BITS
    y = abs((code_a & ODD_BITS) - (code_b & ODD_BITS)) & ODD_BITS
    return x | y


encode_morton = encode
decode_morton = decode
morton_distance = distance
