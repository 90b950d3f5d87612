# planning/planner.py
import math
import time
from collections.abc import Sequence

from courier.app.protocols import Router, TourOptimizer
from courier.domain.entities.commands import PlanResult
from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate, Route
from courier.domain.errors import DeliveryFailure
from courier.domain.mechanics.mechanics_optimizers import crow_cost
from courier.planning.compiler import CommandCompiler
from courier.planning.hooks import NoopHooks, PlannerHooks
from courier.runtime.rng import PlanSeeds


class DeliveryPlanner:
    """
    Order the stops, route every leg of the closed tour, compile commands.
    All-or-nothing: the first leg that cannot be routed fails the whole plan.
    Each request orders its stops with its own generator from `seeds`, so the
    same request gives the same plan however often it is made.
    """

    def __init__(
        self,
        router: Router,
        optimizer: TourOptimizer,
        seeds: PlanSeeds,
        *,
        colinear_tolerance_deg: float = 1.0,
        hooks: PlannerHooks | None = None,
    ):
        self.router = router
        self.optimizer = optimizer
        self.seeds = seeds
        self.tolerance = colinear_tolerance_deg
        self._hooks = hooks or NoopHooks()

    def generate_plan(self, depot: Coordinate, stops: Sequence[DeliveryStop]) -> PlanResult:
        t0 = time.perf_counter()
        self._hooks.plan_start(depot=str(depot), stops=len(stops))
        try:
            ordered = self._order(depot, stops)
            legs = self._route_legs(depot, ordered)
            compiler = CommandCompiler(
                colinear_tolerance_deg=self.tolerance, expected_deliveries=len(ordered)
            )
            commands = compiler.compile_legs([leg.segments for leg in legs], ordered)
        except DeliveryFailure as exc:
            self._hooks.error(kind=exc.kind.value, reason=str(exc))
            raise

        total = math.fsum(leg.total_length_mi for leg in legs)
        self._hooks.plan_end(
            commands=len(commands),
            distance_mi=total,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return PlanResult(
            commands=tuple(commands),
            total_distance_mi=total,
            stops=tuple(ordered),
            legs=tuple(legs),
        )

    def _order(self, depot: Coordinate, stops: Sequence[DeliveryStop]) -> list[DeliveryStop]:
        # the optimizer's crow estimate is for reporting only
        ordered, crow_after = self.optimizer.optimize(
            depot, stops, self.seeds.for_request(depot, stops)
        )
        self._hooks.tour_optimized(
            crow_before_mi=crow_cost(depot, stops),
            crow_after_mi=crow_after,
            order=[s.item for s in ordered],
        )
        return list(ordered)

    def _route_legs(self, depot: Coordinate, ordered: list[DeliveryStop]) -> list[Route]:
        waypoints = [depot, *(s.location for s in ordered), depot]
        legs: list[Route] = []
        for i, (a, b) in enumerate(zip(waypoints, waypoints[1:])):
            leg = self.router.route(a, b)
            self._hooks.leg_routed(
                leg=i, start=str(a), end=str(b), segments=len(leg), distance_mi=leg.total_length_mi
            )
            legs.append(leg)
        return legs
