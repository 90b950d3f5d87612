"""
Readers for the two plain-text inputs.

Street map: blocks of

    <street name>
    <segment count>
    <lat1> <lon1> <lat2> <lon2>      (count lines)

Deliveries: the depot as ``<lat> <lon>`` on the first line, then one
``<lat> <lon>:<item>`` per stop.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate
from courier.domain.street_graph import StreetGraph

logger = logging.getLogger(__name__)


class MapFormatError(ValueError):
    def __init__(self, lineno: int, reason: str):
        self.lineno = lineno
        super().__init__(f"line {lineno}: {reason}")


def _coord(lat: str, lon: str, lineno: int) -> Coordinate:
    try:
        return Coordinate.parse(lat, lon)
    except ValueError:
        raise MapFormatError(lineno, f"bad coordinate {lat!r} {lon!r}") from None


def parse_street_map(lines: Iterable[str]) -> StreetGraph:
    g = StreetGraph()
    it = enumerate((ln.rstrip("\r\n") for ln in lines), start=1)
    for lineno, name in it:
        if not name.strip():
            continue  # tolerate blank lines between blocks
        try:
            count_no, count_text = next(it)
        except StopIteration:
            raise MapFormatError(lineno + 1, f"missing segment count for {name!r}") from None
        try:
            count = int(count_text.strip())
        except ValueError:
            raise MapFormatError(count_no, f"bad segment count {count_text!r}") from None
        for _ in range(count):
            try:
                seg_no, seg_text = next(it)
            except StopIteration:
                raise MapFormatError(count_no, f"{name!r} ends before {count} segments") from None
            parts = seg_text.split()
            if len(parts) != 4:
                raise MapFormatError(seg_no, f"expected 4 fields, got {len(parts)}")
            g.add_street(_coord(parts[0], parts[1], seg_no), _coord(parts[2], parts[3], seg_no), name)
    return g


def load_street_map(path: str | os.PathLike) -> StreetGraph:
    with open(path, encoding="utf-8") as f:
        g = parse_street_map(f)
    logger.info("loaded %d coordinates, %d segments from %s", len(g), g.segment_count, path)
    return g


def parse_deliveries(lines: Iterable[str]) -> tuple[Coordinate, list[DeliveryStop]]:
    it = iter(lines)
    first = next(it, "").split()
    if len(first) != 2:
        raise ValueError(f"depot line must be '<lat> <lon>', got {' '.join(first)!r}")
    try:
        depot = Coordinate.parse(first[0], first[1])
    except ValueError:
        raise ValueError(f"bad depot coordinate {' '.join(first)!r}") from None

    stops: list[DeliveryStop] = []
    for lineno, raw in enumerate(it, start=2):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if ":" not in line:
            logger.warning("deliveries line %d: missing colon: %r", lineno, line)
            continue
        where, item = line.split(":", 1)
        if not item:
            logger.warning("deliveries line %d: missing item: %r", lineno, line)
            continue
        parts = where.split()
        if len(parts) != 2:
            logger.warning("deliveries line %d: bad formatting: %r", lineno, line)
            continue
        try:
            loc = Coordinate.parse(parts[0], parts[1])
        except ValueError:
            logger.warning("deliveries line %d: bad coordinate: %r", lineno, line)
            continue
        stops.append(DeliveryStop(item=item, location=loc))
    return depot, stops


def load_deliveries(path: str | os.PathLike) -> tuple[Coordinate, list[DeliveryStop]]:
    with open(path, encoding="utf-8") as f:
        return parse_deliveries(f)
