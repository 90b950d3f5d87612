# planning/hooks.py
from typing import Protocol


class PlannerHooks(Protocol):
    def plan_start(self, *, depot, stops: int): ...
    def tour_optimized(self, *, crow_before_mi: float, crow_after_mi: float, order: list[str]): ...
    def leg_routed(self, *, leg: int, start, end, segments: int, distance_mi: float): ...
    def plan_end(self, *, commands: int, distance_mi: float, wall_ms: float): ...
    def error(self, *, kind: str, reason: str, **kw): ...


class NoopHooks:
    def plan_start(self, **_):
        pass

    def tour_optimized(self, **_):
        pass

    def leg_routed(self, **_):
        pass

    def plan_end(self, **_):
        pass

    def error(self, **_):
        pass
