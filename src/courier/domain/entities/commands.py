from dataclasses import dataclass, field
from typing import Literal

from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Route


@dataclass(frozen=True)
class Proceed:
    direction: str  # compass name, e.g. "northeast"
    street: str
    distance_mi: float
    kind: Literal["proceed"] = field(default="proceed", init=False)

    def __str__(self) -> str:
        return f"Proceed {self.direction} on {self.street} for {self.distance_mi:.2f} miles"


@dataclass(frozen=True)
class Turn:
    direction: Literal["left", "right"]
    street: str
    kind: Literal["turn"] = field(default="turn", init=False)

    def __str__(self) -> str:
        return f"Turn {self.direction} on {self.street}"


@dataclass(frozen=True)
class Deliver:
    item: str
    kind: Literal["deliver"] = field(default="deliver", init=False)

    def __str__(self) -> str:
        return f"Deliver {self.item}"


Command = Proceed | Turn | Deliver


@dataclass(frozen=True)
class PlanResult:
    commands: tuple[Command, ...]
    total_distance_mi: float
    stops: tuple[DeliveryStop, ...] = ()  # optimized visiting order
    legs: tuple[Route, ...] = ()  # depot -> stops[0] -> ... -> depot

    def lines(self) -> list[str]:
        return [str(c) for c in self.commands]
