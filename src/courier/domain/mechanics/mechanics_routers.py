import heapq
import math

from courier.app.protocols import Router, StreetQuery
from courier.domain.entities.geography import Coordinate, Route, Segment
from courier.domain.errors import InvalidCoordinate, NoRouteFound
from courier.domain.mechanics.mechanics_geodesy import distance_earth_miles


class AStarRouter(Router):
    """A* over the street graph; g = road miles so far, h = great-circle miles to the goal."""

    def __init__(self, graph: StreetQuery):
        self.G = graph

    def route(self, start: Coordinate, end: Coordinate) -> Route:
        if self.G.outgoing(start) is None:
            raise InvalidCoordinate(f"start {start} is not on the map")
        if self.G.outgoing(end) is None:
            raise InvalidCoordinate(f"end {end} is not on the map")

        g: dict[Coordinate, float] = {start: 0.0}
        came_from: dict[Coordinate, Segment] = {}
        # (f, seq, g, node); seq keeps equal-f pops in push order
        frontier: list[tuple[float, int, float, Coordinate]] = [(self._h(start, end), 0, 0.0, start)]
        seq = 0

        while frontier:
            _, _, g_cur, cur = heapq.heappop(frontier)
            if g_cur > g[cur]:
                continue  # stale entry, a cheaper push was already expanded
            if cur == end:
                return self._reconstruct(start, end, came_from)
            for seg in self.G.outgoing(cur) or ():
                cand = g_cur + seg.length_mi
                if seg.end not in g or cand < g[seg.end]:
                    g[seg.end] = cand
                    came_from[seg.end] = seg
                    seq += 1
                    heapq.heappush(frontier, (cand + self._h(seg.end, end), seq, cand, seg.end))

        raise NoRouteFound(f"{start} -> {end}")

    def distance_mi(self, start: Coordinate, end: Coordinate) -> float:
        return self.route(start, end).total_length_mi

    def _h(self, node: Coordinate, goal: Coordinate) -> float:
        return distance_earth_miles(node, goal)

    @staticmethod
    def _reconstruct(start: Coordinate, end: Coordinate, came_from: dict[Coordinate, Segment]) -> Route:
        segs: list[Segment] = []
        cur = end
        while cur != start:
            seg = came_from[cur]
            segs.append(seg)
            cur = seg.start
        segs.reverse()
        return Route(tuple(segs), math.fsum(s.length_mi for s in segs))
