from __future__ import annotations

from dataclasses import dataclass, field

from courier.domain.mechanics.mechanics_geodesy import distance_earth_miles


# Core geometry types used by mechanics
@dataclass(frozen=True, order=True)
class Coordinate:
    """
    A lat/lon point that remembers the text it was read from.
    Equality, hashing and ordering use the text only, so "34.0" and "34.00"
    are different nodes even though they parse to the same number.
    """

    lat_text: str
    lon_text: str
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)

    @classmethod
    def parse(cls, lat: str, lon: str) -> Coordinate:
        return cls(lat, lon, float(lat.strip()), float(lon.strip()))

    @classmethod
    def of(cls, lat: float, lon: float) -> Coordinate:
        return cls(repr(float(lat)), repr(float(lon)), float(lat), float(lon))

    def __str__(self) -> str:
        return f"{self.lat_text} {self.lon_text}"


@dataclass(frozen=True)
class Segment:
    start: Coordinate
    end: Coordinate
    name: str  # street name

    @property
    def length_mi(self) -> float:
        return distance_earth_miles(self.start, self.end)

    def reversed(self) -> Segment:
        return Segment(self.end, self.start, self.name)


@dataclass(frozen=True)
class Route:
    segments: tuple[Segment, ...]
    total_length_mi: float

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)
