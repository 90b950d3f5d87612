from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from courier.app.protocols import TourOptimizer
from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate
from courier.domain.mechanics.mechanics_geodesy import distance_earth_miles


def crow_matrix(depot: Coordinate, stops: Sequence[DeliveryStop]) -> np.ndarray:
    """Symmetric great-circle matrix; row/col 0 is the depot, i+1 is stops[i]."""
    pts = [depot, *(s.location for s in stops)]
    n = len(pts)
    d = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i + 1, n):
            d[i, j] = d[j, i] = distance_earth_miles(pts[i], pts[j])
    return d


def tour_cost(d: np.ndarray, perm: np.ndarray) -> float:
    """Closed-tour cost depot -> perm... -> depot, perm holding 0-based stop indices."""
    if len(perm) == 0:
        return 0.0
    nodes = perm + 1
    return float(d[0, nodes[0]] + d[nodes[:-1], nodes[1:]].sum() + d[nodes[-1], 0])


def crow_cost(depot: Coordinate, stops: Sequence[DeliveryStop]) -> float:
    return tour_cost(crow_matrix(depot, stops), np.arange(len(stops)))


@dataclass(frozen=True)
class StagnationLimits:
    small_max: int = 10  # tours up to this many stops...
    small: int = 50  # ...stop after this many non-improving moves
    medium_max: int = 100
    medium: int = 1000
    large: int = 2000

    def for_size(self, n: int) -> int:
        if n <= self.small_max:
            return self.small
        if n <= self.medium_max:
            return self.medium
        return self.large


class AnnealingTourOptimizer(TourOptimizer):
    """
    Swap-neighbourhood simulated annealing over stop indices.

    A worse neighbour is accepted when a uniform draw falls under the current
    temperature itself (no exp(-delta/T) term). The temperature decays
    geometrically every iteration, and a run ends after `limits.for_size(n)`
    non-improving moves. `optimize` repeats the run `restarts` times from the
    best tour found so far.
    """

    def __init__(
        self,
        *,
        initial_temperature: float = 0.9,
        cooling_factor: float = 0.99,
        restarts: int = 100,
        limits: StagnationLimits | None = None,
    ):
        self.t0 = initial_temperature
        self.cooling = cooling_factor
        self.restarts = restarts
        self.limits = limits or StagnationLimits()

    def optimize(self, depot, stops, rng):
        stops = list(stops)
        if len(stops) < 2:
            return stops, crow_cost(depot, stops)

        d = crow_matrix(depot, stops)
        best, best_cost = self.iterate(d, np.arange(len(stops)), rng)
        for _ in range(self.restarts):
            perm, cost = self.iterate(d, best, rng)
            if cost < best_cost:
                best, best_cost = perm, cost
        return [stops[int(i)] for i in best], best_cost

    def iterate(
        self, d: np.ndarray, start: np.ndarray, rng: np.random.Generator
    ) -> tuple[np.ndarray, float]:
        n = len(start)
        limit = self.limits.for_size(n)
        cur = start.copy()
        cur_cost = tour_cost(d, cur)
        best, best_cost = cur.copy(), cur_cost
        temperature = self.t0
        stale = 0

        while stale < limit:
            i, j = rng.choice(n, size=2, replace=False)
            nxt = cur.copy()
            nxt[i], nxt[j] = nxt[j], nxt[i]
            nxt_cost = tour_cost(d, nxt)
            if nxt_cost < cur_cost:
                cur, cur_cost = nxt, nxt_cost
                if cur_cost < best_cost:
                    best, best_cost = cur.copy(), cur_cost
                    stale = 0
            else:
                if rng.random() < temperature:
                    cur, cur_cost = nxt, nxt_cost
                stale += 1
            temperature *= self.cooling
        return best, best_cost


class IdentityTourOptimizer(TourOptimizer):
    """Keeps the caller's order; useful when stops are pre-sequenced."""

    def optimize(self, depot, stops, rng):
        stops = list(stops)
        return stops, crow_cost(depot, stops)
