"""
Chef : acteur économique du tapis.

Le chef paie le coût du plat au moment de la pose et n'encaisse le prix de
vente que si un client mange l'assiette. Une assiette périmée est donc une
perte sèche égale à son coût.
"""

from typing import List, Optional

from loguru import logger

from SushiGame_V1.core.belt import Belt
from SushiGame_V1.core.events import BeltEvent, BeltEventType
from SushiGame_V1.domain.errors import (
    AlreadyPlacedThisRotation,
    InsufficientBalance,
    InvalidConstruction,
)
from SushiGame_V1.domain.plate import HistoricalPlate, Plate
from SushiGame_V1.utils import round_half_up


class Chef:
    def __init__(self, name: str, starting_balance: float, belt: Belt):
        if belt is None:
            raise InvalidConstruction("Un chef doit être rattaché à un tapis")
        if starting_balance is None or float(starting_balance) < 0:
            raise InvalidConstruction(f"Solde initial invalide : {starting_balance}")

        self._name = name
        self._balance = round_half_up(starting_balance, 2)
        self._belt = belt
        self._plate_history: List[HistoricalPlate] = []
        self._already_placed_this_rotation = False
        self._placing = False
        belt.register_belt_observer(self)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def already_placed_this_rotation(self) -> bool:
        return self._already_placed_this_rotation

    def make_and_place_plate(self, plate: Plate, position: int) -> int:
        """Pose une assiette du chef sur le tapis, au plus près de `position`.

        Contrôles, dans cet ordre et sans effet de bord en cas d'échec :
        1. l'assiette appartient bien à ce chef,
        2. aucune pose depuis la dernière rotation (ni pose en cours),
        3. solde >= coût du plat (et non son prix de vente),
        4. place disponible sur le tapis.

        Returns:
            L'emplacement effectivement occupé.

        Raises:
            InvalidConstruction, AlreadyPlacedThisRotation, InsufficientBalance, BeltFull
        """
        if plate is None or plate.chef is not self:
            raise InvalidConstruction(f"{self._name} ne peut poser que ses propres assiettes")
        # un abonné à PLATE_PLACED peut rappeler cette méthode avant le débit
        if self._already_placed_this_rotation or self._placing:
            raise AlreadyPlacedThisRotation()

        cost = plate.contents.cost
        if cost > self._balance:
            raise InsufficientBalance(self._balance, cost)

        self._placing = True
        try:
            position = self._belt.set_plate_nearest_to_position(plate, position)
        finally:
            self._placing = False
        self._balance = round_half_up(self._balance - cost, 2)
        self._already_placed_this_rotation = True
        logger.debug("{} a posé {} en {} (solde {:.2f})", self._name, plate.contents.name, position, self._balance)
        return position

    def handle_belt_event(self, event: BeltEvent) -> None:
        if event.type == BeltEventType.ROTATE:
            self._already_placed_this_rotation = False
            return

        if event.plate is None or event.plate.chef is not self:
            return

        if event.type == BeltEventType.PLATE_CONSUMED:
            self._balance = round_half_up(self._balance + event.plate.price, 2)
            self._plate_history.append(
                HistoricalPlate(event.plate, event.consumer, event.position, event.rotation)
            )
        elif event.type == BeltEventType.PLATE_SPOILED:
            self._plate_history.append(
                HistoricalPlate(event.plate, None, event.position, event.rotation)
            )

    def get_plate_history(self, max_history_length: Optional[int] = None) -> List[HistoricalPlate]:
        """Les `max_history_length` dernières traces, dans l'ordre chronologique.

        Sans argument : tout l'historique. Une longueur < 1 donne une liste vide.
        """
        if max_history_length is None:
            return list(self._plate_history)
        if max_history_length < 1:
            return []
        return self._plate_history[-max_history_length:]

    def __repr__(self) -> str:
        return f"Chef(name={self._name!r}, balance={self._balance:.2f})"
