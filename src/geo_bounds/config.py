"""Runtime settings and the sample inputs used by the demo harness."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_LEVEL = os.getenv("GEO_BOUNDS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

PORT = int(os.getenv("PORT", "8080"))


@dataclass(frozen=True)
class SampleCenter:
    """A named center point for the demo table."""

    name: str
    latitude: float
    longitude: float


SAMPLE_CENTERS: list[SampleCenter] = [
    SampleCenter("san-francisco", 37.7749295, -122.4194155),
    SampleCenter("south-pole-west", -90.0, -180.0),
    SampleCenter("equator-west", 0.0, -180.0),
    SampleCenter("south-pole", -90.0, 0.0),
    SampleCenter("origin", 0.0, 0.0),
    SampleCenter("north-pole", 90.0, 0.0),
    SampleCenter("equator-east", 0.0, 180.0),
    SampleCenter("north-pole-east", 90.0, 180.0),
]

# 0.01 km up to 1000 km, x10 per step
DEMO_RADII_KM: list[float] = [0.01, 0.1, 1.0, 10.0, 100.0, 1000.0]


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
