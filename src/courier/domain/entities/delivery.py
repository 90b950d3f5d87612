from dataclasses import dataclass

from courier.domain.entities.geography import Coordinate


@dataclass(frozen=True)
class DeliveryStop:
    item: str
    location: Coordinate
