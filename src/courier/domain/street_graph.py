from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from courier.domain.entities.geography import Coordinate, Segment


class StreetGraph:
    """
    Directed adjacency over coordinates, symmetric by construction.

    Every street added contributes its forward segment under the start
    coordinate and the reverse segment under the end coordinate, so each
    (A -> B, name) has a matching (B -> A, name). Coordinates that were never
    part of a street have no entry at all; `outgoing` reports them as None,
    which is how callers tell an unknown coordinate from a dead end.
    """

    def __init__(self):
        self._out: dict[Coordinate, list[Segment]] = {}
        self._segments = 0

    @classmethod
    def from_streets(cls, streets: Iterable[tuple[Coordinate, Coordinate, str]]) -> StreetGraph:
        g = cls()
        for start, end, name in streets:
            g.add_street(start, end, name)
        return g

    def add_street(self, start: Coordinate, end: Coordinate, name: str) -> Segment:
        seg = Segment(start, end, name)
        self._out.setdefault(start, []).append(seg)
        self._out.setdefault(end, []).append(seg.reversed())
        self._segments += 2
        return seg

    def outgoing(self, coord: Coordinate) -> Sequence[Segment] | None:
        segs = self._out.get(coord)
        return None if segs is None else tuple(segs)

    def coordinates(self) -> Iterator[Coordinate]:
        return iter(self._out)

    def segments(self) -> Iterator[Segment]:
        for segs in self._out.values():
            yield from segs

    @property
    def segment_count(self) -> int:
        return self._segments

    def __contains__(self, coord: object) -> bool:
        return coord in self._out

    def __len__(self) -> int:
        return len(self._out)
