"""
Turn a stream of route segments into navigation commands.

Input is a flat sequence of `Segment`s with a `LegEnd` marker after every leg.
A leg that ends at a stop carries that stop on its marker; the final leg back
to the depot carries none.

    AwaitingFirstSegment --segment--> Proceeding
    Proceeding --same street--> Proceeding (distance grows)
    Proceeding --other street--> [Proceed] [Turn]? Proceeding
    any --LegEnd(stop)--> [Proceed]? [Deliver] AwaitingFirstSegment
    any --LegEnd(None)--> [Proceed]? Finished
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from courier.domain.entities.commands import Command, Deliver, Proceed, Turn
from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Segment
from courier.domain.errors import UnspecifiedFailure
from courier.domain.mechanics.mechanics_geodesy import (
    angle_between_2_lines,
    angle_of_line,
    is_colinear,
    proceed_dir,
    turn_dir,
)


@dataclass(frozen=True)
class LegEnd:
    stop: DeliveryStop | None = None  # None marks the return to the depot


@dataclass(frozen=True)
class AwaitingFirstSegment:
    pass


@dataclass
class Proceeding:
    street: str
    direction: str
    distance_mi: float
    last: Segment

    def freeze(self) -> Proceed:
        return Proceed(direction=self.direction, street=self.street, distance_mi=self.distance_mi)


@dataclass(frozen=True)
class Finished:
    pass


State = AwaitingFirstSegment | Proceeding | Finished


class CommandCompiler:
    def __init__(self, *, colinear_tolerance_deg: float = 1.0, expected_deliveries: int | None = None):
        self.tolerance = colinear_tolerance_deg
        self.expected = expected_deliveries
        self.state: State = AwaitingFirstSegment()
        self.delivered = 0
        self._out: list[Command] = []

    @property
    def commands(self) -> list[Command]:
        return list(self._out)

    @property
    def finished(self) -> bool:
        return isinstance(self.state, Finished)

    def run(self, stream: Iterable[Segment | LegEnd]) -> list[Command]:
        for item in stream:
            if isinstance(item, LegEnd):
                self.end_leg(item.stop)
            else:
                self.feed(item)
        if not self.finished:
            raise UnspecifiedFailure("route stream ended before returning to the depot")
        return self.commands

    def compile_legs(self, legs: Sequence[Iterable[Segment]], stops: Sequence[DeliveryStop]) -> list[Command]:
        """Convenience for the planner: legs[i] ends at stops[i], the last leg ends at the depot."""
        if len(legs) != len(stops) + 1:
            raise UnspecifiedFailure(f"{len(legs)} legs for {len(stops)} stops")
        return self.run(_markers(legs, stops))

    def feed(self, seg: Segment) -> None:
        st = self.state
        if isinstance(st, Finished):
            raise UnspecifiedFailure("segment after the final leg")
        if isinstance(st, AwaitingFirstSegment):
            self.state = self._start(seg)
            return
        if seg.name == st.street:
            st.distance_mi += seg.length_mi
            st.last = seg
            return

        self._out.append(st.freeze())
        angle = angle_between_2_lines(st.last, seg)
        if not is_colinear(angle, self.tolerance):
            self._out.append(Turn(direction=self._turn(angle), street=seg.name))
        self.state = self._start(seg)

    def end_leg(self, stop: DeliveryStop | None) -> None:
        st = self.state
        if isinstance(st, Finished):
            raise UnspecifiedFailure("leg after the final leg")
        if isinstance(st, Proceeding):
            self._out.append(st.freeze())

        if stop is None:
            if self.expected is not None and self.delivered != self.expected:
                raise UnspecifiedFailure(
                    f"returned to depot after {self.delivered} of {self.expected} deliveries"
                )
            self.state = Finished()
            return

        if self.expected is not None and self.delivered >= self.expected:
            raise UnspecifiedFailure(f"more than {self.expected} deliveries")
        self._out.append(Deliver(item=stop.item))
        self.delivered += 1
        self.state = AwaitingFirstSegment()

    @staticmethod
    def _start(seg: Segment) -> Proceeding:
        return Proceeding(
            street=seg.name,
            direction=proceed_dir(angle_of_line(seg)),
            distance_mi=seg.length_mi,
            last=seg,
        )

    @staticmethod
    def _turn(angle: float) -> str:
        # an exact reversal onto another street counts as a right turn
        return "right" if angle == 180.0 else turn_dir(angle)


def _markers(legs, stops):
    for i, leg in enumerate(legs):
        yield from leg
        yield LegEnd(stops[i] if i < len(stops) else None)
