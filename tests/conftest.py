# tests/conftest.py
import pytest

from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate
from courier.domain.street_graph import StreetGraph

# 3x3 grid, ~0.07 mi between neighbours; rows run east-west, columns north-south
GRID_LATS = (34.0, 34.001, 34.002)
GRID_LONS = (-118.002, -118.001, -118.0)


@pytest.fixture
def main_st():
    """One street, depot at the south end, a single "Book" stop at the north end."""
    depot = Coordinate.parse("34.0", "-118.0")
    house = Coordinate.parse("34.001", "-118.0")
    g = StreetGraph()
    g.add_street(depot, house, "Main St")
    return g, depot, DeliveryStop(item="Book", location=house)


@pytest.fixture
def grid():
    pts = {
        (r, c): Coordinate.of(lat, lon)
        for r, lat in enumerate(GRID_LATS)
        for c, lon in enumerate(GRID_LONS)
    }
    g = StreetGraph()
    for r in range(3):
        for c in range(2):
            g.add_street(pts[r, c], pts[r, c + 1], f"Row {r}")
    for c in range(3):
        for r in range(2):
            g.add_street(pts[r, c], pts[r + 1, c], f"Col {c}")
    return g, pts


@pytest.fixture
def islands():
    """Two streets that never meet."""
    a1, a2 = Coordinate.of(34.0, -118.0), Coordinate.of(34.001, -118.0)
    b1, b2 = Coordinate.of(35.0, -118.0), Coordinate.of(35.001, -118.0)
    g = StreetGraph.from_streets([(a1, a2, "West Island Rd"), (b1, b2, "East Island Rd")])
    return g, (a1, a2), (b1, b2)
