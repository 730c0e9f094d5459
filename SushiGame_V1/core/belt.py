"""
Tapis roulant : tableau circulaire de taille fixe.

Chaque emplacement porte au plus une assiette datée (`TimedPlate`) et,
indépendamment, un client éventuel fixé à la création de la partie.

Une rotation enchaîne, sans interruption possible :
1. décalage de toutes les assiettes d'un cran (dernier emplacement → 0),
2. incrément du compteur de rotations,
3. notification ROTATE,
4. passe de péremption sur tout le tapis (PLATE_SPOILED),
5. passe de consommation sur tout le tapis (PLATE_CONSUMED).

Les abonnés qui posent une assiette en réaction à ROTATE voient donc le
tapis décalé mais pas encore nettoyé des assiettes périmées.
"""

from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from SushiGame_V1.core.customer import Customer
from SushiGame_V1.core.events import BeltEvent, BeltObserver
from SushiGame_V1.domain.errors import BeltFull, InvalidConstruction, SlotOccupied
from SushiGame_V1.domain.plate import Plate
from SushiGame_V1.rules.spoilage import is_spoiled


@dataclass(frozen=True)
class TimedPlate:
    """Assiette posée sur le tapis et date de pose (en rotations)."""

    original: Plate
    incept_date: int

    @property
    def contents(self):
        return self.original.contents


class Belt:
    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidConstruction(f"La taille du tapis doit être >= 1 (reçu {size})")

        self._slots: List[Optional[TimedPlate]] = [None] * size
        self._customers: List[Optional[Customer]] = [None] * size
        self._rotation_count = 0
        self._observers: List[BeltObserver] = []

    # -------- Requêtes --------

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def rotation_count(self) -> int:
        return self._rotation_count

    def normalize_position(self, position: int) -> int:
        """Ramène n'importe quel entier (négatif compris) dans [0, size)."""
        return int(position) % self.size

    def get_plate_at_position(self, position: int) -> Optional[Plate]:
        timed = self._slots[self.normalize_position(position)]
        return timed.original if timed is not None else None

    def get_age_of_plate_at_position(self, position: int) -> int:
        """Âge en rotations de l'assiette à `position`, -1 si l'emplacement est vide."""
        timed = self._slots[self.normalize_position(position)]
        if timed is None:
            return -1
        return self._rotation_count - timed.incept_date

    def find_plate(self, plate: Optional[Plate]) -> int:
        """Premier emplacement contenant exactement cet objet assiette, -1 sinon."""
        if plate is None:
            return -1
        for i, timed in enumerate(self._slots):
            if timed is not None and timed.original is plate:
                return i
        return -1

    def get_customer_at_position(self, position: int) -> Optional[Customer]:
        return self._customers[self.normalize_position(position)]

    def occupied_positions(self) -> List[int]:
        return [i for i, timed in enumerate(self._slots) if timed is not None]

    # -------- Mutations --------

    def set_customer_at_position(self, customer: Optional[Customer], position: int) -> None:
        """Réservé au câblage de la partie : les clients ne bougent plus ensuite."""
        self._customers[self.normalize_position(position)] = customer

    def set_plate_nearest_to_position(self, plate: Plate, position: int) -> int:
        """Pose `plate` à `position` ou au premier emplacement libre après elle.

        Sondage linéaire vers l'avant uniquement (`position`, `position + 1`, …
        modulo la taille), sur au plus un tour complet.

        Returns:
            L'emplacement normalisé effectivement utilisé.

        Raises:
            InvalidConstruction: si `plate` est None.
            BeltFull: si aucun emplacement n'est libre.
        """
        if plate is None:
            raise InvalidConstruction("Impossible de poser une assiette nulle")

        for _ in range(self.size):
            try:
                return self._set_plate_at_position(plate, position)
            except SlotOccupied:
                position += 1
        raise BeltFull(self)

    def rotate(self) -> None:
        last_plate = self._slots[-1]
        self._slots[1:] = self._slots[:-1]
        self._slots[0] = last_plate
        self._rotation_count += 1

        self._notify(BeltEvent.rotate(self._rotation_count))

        for i in range(self.size):
            timed = self._slots[i]
            if timed is None:
                continue
            if is_spoiled(timed.contents, self.get_age_of_plate_at_position(i), self.size):
                self._slots[i] = None
                logger.debug(
                    "Assiette périmée en {} : {} ({})",
                    i,
                    timed.contents.name,
                    getattr(timed.original.chef, "name", "?"),
                )
                self._notify(BeltEvent.spoiled(self._rotation_count, timed.original, i))

        for i in range(self.size):
            customer = self._customers[i]
            timed = self._slots[i]
            if customer is None or timed is None:
                continue
            if customer.consumes_plate(timed.original):
                self._slots[i] = None
                logger.debug("Assiette mangée en {} : {}", i, timed.contents.name)
                self._notify(
                    BeltEvent.consumed(self._rotation_count, timed.original, i, customer)
                )

    # -------- Abonnés --------

    def register_belt_observer(self, observer: BeltObserver) -> None:
        self._observers.append(observer)

    def unregister_belt_observer(self, observer: BeltObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, event: BeltEvent) -> None:
        # Copie : un abonné peut (dés)inscrire quelqu'un pendant la diffusion
        for observer in list(self._observers):
            observer.handle_belt_event(event)

    # -------- Interne --------

    def _set_plate_at_position(self, plate: Plate, position: int) -> int:
        position = self.normalize_position(position)
        if self._slots[position] is not None:
            raise SlotOccupied(position, plate)

        self._slots[position] = TimedPlate(plate, self._rotation_count)
        logger.debug(
            "Assiette posée en {} : {} à {:.2f}", position, plate.contents.name, plate.price
        )
        self._notify(BeltEvent.placed(self._rotation_count, plate, position))
        return position
