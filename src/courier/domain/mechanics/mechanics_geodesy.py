from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from courier.domain.entities.geography import Coordinate, Segment

EARTH_RADIUS_KM = 6371.0
MILES_PER_KM = 1.0 / 1.609344

# (lower bound inclusive, upper bound exclusive, name); anything else is "east"
_COMPASS = (
    (0.0, 22.5, "east"),
    (22.5, 67.5, "northeast"),
    (67.5, 112.5, "north"),
    (112.5, 157.5, "northwest"),
    (157.5, 202.5, "west"),
    (202.5, 247.5, "southwest"),
    (247.5, 292.5, "south"),
    (292.5, 337.5, "southeast"),
)


def _wrap(deg: float) -> float:
    if deg < 0.0:
        deg += 360.0
    # -1e-300 + 360.0 rounds to 360.0
    return 0.0 if deg >= 360.0 else deg


def distance_earth_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine great-circle distance in kilometers."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)
    u = math.sin((lat2 - lat1) / 2.0)
    v = math.sin((lon2 - lon1) / 2.0)
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(u * u + math.cos(lat1) * math.cos(lat2) * v * v))


def distance_earth_miles(a: Coordinate, b: Coordinate) -> float:
    return distance_earth_km(a, b) * MILES_PER_KM


def angle_of_line(seg: Segment) -> float:
    """
    Direction of a segment in degrees, [0, 360).
    Measured counter-clockwise from east on the raw lat/lon plane: 0 = east, 90 = north.
    """
    deg = math.degrees(
        math.atan2(seg.end.latitude - seg.start.latitude, seg.end.longitude - seg.start.longitude)
    )
    return _wrap(deg)


def angle_between_2_lines(first: Segment, second: Segment) -> float:
    """Signed change of direction going from `first` onto `second`, normalized to [0, 360)."""
    return _wrap(angle_of_line(second) - angle_of_line(first))


def proceed_dir(angle: float) -> str:
    for lo, hi, name in _COMPASS:
        if lo <= angle < hi:
            return name
    return "east"


def is_colinear(angle: float, tolerance_deg: float = 1.0) -> bool:
    return angle <= tolerance_deg or angle >= 360.0 - tolerance_deg


def turn_dir(angle: float) -> str:
    # valid only for (1, 180) and (180, 359); straight-ahead and exact reversal are not turns
    if 1.0 < angle < 180.0:
        return "left"
    if 180.0 < angle < 359.0:
        return "right"
    raise ValueError(f"not a turn angle: {angle!r}")
