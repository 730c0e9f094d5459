# tests/conftest.py
from typing import Iterable, List

import numpy as np
import pytest
from loguru import logger

from SushiGame_V1.core.belt import Belt
from SushiGame_V1.core.chef import Chef
from SushiGame_V1.core.events import BeltEvent


@pytest.fixture(autouse=True)
def disable_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class ScriptedCustomer:
    """Client déterministe : rejoue une liste de décisions, puis `default`."""

    def __init__(self, decisions: Iterable[bool] = (), default: bool = False):
        self.decisions = list(decisions)
        self.default = default
        self.offered = []

    def consumes_plate(self, plate) -> bool:
        self.offered.append(plate)
        if self.decisions:
            return self.decisions.pop(0)
        return self.default


class RecordingObserver:
    def __init__(self):
        self.events: List[BeltEvent] = []

    def handle_belt_event(self, event: BeltEvent) -> None:
        self.events.append(event)

    @property
    def types(self):
        return [e.type for e in self.events]


class SequenceRng:
    """Remplace un `numpy.random.Generator` : `random()` rejoue une séquence
    (la dernière valeur est répétée), `integers(n)` renvoie toujours n - 1."""

    def __init__(self, randoms: Iterable[float]):
        self.randoms = list(randoms)

    def random(self) -> float:
        if len(self.randoms) > 1:
            return self.randoms.pop(0)
        return self.randoms[0]

    def integers(self, high: int) -> int:
        return high - 1


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def belt():
    return Belt(6)


@pytest.fixture
def recorder(belt):
    observer = RecordingObserver()
    belt.register_belt_observer(observer)
    return observer


@pytest.fixture
def chef(belt):
    return Chef("Hana", 10.0, belt)
