from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate, Route, Segment


# ------------- Mechanics --------------------
@runtime_checkable
class StreetQuery(Protocol):
    """
    Read-only view of the street network.
    `outgoing` returns None for a coordinate the network has never seen;
    an empty sequence would mean "known, but nowhere to go".
    """

    def outgoing(self, coord: Coordinate) -> Sequence[Segment] | None: ...


@runtime_checkable
class Router(Protocol):
    """
    Responsibilities:
      • Compute the shortest road route between two coordinates.
      • Raise InvalidCoordinate / NoRouteFound instead of returning partial routes.
    Units: miles.
    """

    def route(self, start: Coordinate, end: Coordinate) -> Route: ...
    def distance_mi(self, start: Coordinate, end: Coordinate) -> float: ...


@runtime_checkable
class TourOptimizer(Protocol):
    """
    Reorder delivery stops to shorten the closed tour depot -> stops -> depot.
    Returns the new order and its straight-line cost in miles.
    All randomness comes from `rng`.
    """

    def optimize(
        self,
        depot: Coordinate,
        stops: Sequence[DeliveryStop],
        rng: np.random.Generator,
    ) -> tuple[list[DeliveryStop], float]: ...
