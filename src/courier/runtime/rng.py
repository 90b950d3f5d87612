# runtime/rng.py
from collections.abc import Sequence
from zlib import crc32

import numpy as np

from courier.domain.entities.delivery import DeliveryStop
from courier.domain.entities.geography import Coordinate


def _word(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


def request_words(depot: Coordinate, stops: Sequence[DeliveryStop]) -> list[int]:
    """Depot, then one word per stop (location and item); order-sensitive."""
    return [_word(str(depot)), *(_word(f"{s.location}:{s.item}") for s in stops)]


class PlanSeeds:
    """
    One fresh numpy Generator per plan request.

    Entropy is [master_seed, scenario, *request_words], so a request draws the
    same numbers no matter how many plans the same planner made before it.
    """

    def __init__(self, master_seed: int, *, scenario: str = "default"):
        self.master_seed = master_seed & 0xFFFFFFFF
        self.scenario_tag = _word(scenario)

    def for_request(self, depot: Coordinate, stops: Sequence[DeliveryStop]) -> np.random.Generator:
        ss = np.random.SeedSequence(
            entropy=[self.master_seed, self.scenario_tag, *request_words(depot, stops)]
        )
        return np.random.Generator(np.random.PCG64(ss))
