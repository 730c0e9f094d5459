"""Clients assis devant un emplacement du tapis."""

from typing import TYPE_CHECKING, Optional, Protocol

import numpy as np

from SushiGame_V1.domain.errors import InvalidConstruction

if TYPE_CHECKING:
    from SushiGame_V1.domain.plate import Plate


class Customer(Protocol):
    def consumes_plate(self, plate: "Plate") -> bool: ...


class RandomCustomer:
    """Client aléatoire : mange l'assiette avec une probabilité `pickiness`.

    Le tirage passe par un `numpy.random.Generator` injecté ; c'est la seule
    source d'aléa du moteur.
    """

    def __init__(self, pickiness: float, rng: Optional[np.random.Generator] = None):
        if pickiness is None or not 0.0 <= float(pickiness) <= 1.0:
            raise InvalidConstruction(f"pickiness doit être dans [0, 1] (reçu {pickiness})")
        self.pickiness = float(pickiness)
        self.rng = rng if rng is not None else np.random.default_rng()

    def consumes_plate(self, plate: "Plate") -> bool:
        return bool(self.rng.random() < self.pickiness)

    def __repr__(self) -> str:
        return f"RandomCustomer(pickiness={self.pickiness:.2f})"
