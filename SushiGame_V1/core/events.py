"""Événements émis par le tapis et interface des abonnés."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from SushiGame_V1.core.customer import Customer
    from SushiGame_V1.domain.plate import Plate


class BeltEventType(Enum):
    PLATE_PLACED = "PLATE_PLACED"
    PLATE_CONSUMED = "PLATE_CONSUMED"
    PLATE_SPOILED = "PLATE_SPOILED"
    ROTATE = "ROTATE"


@dataclass(frozen=True)
class BeltEvent:
    """Événement du tapis.

    Attributes:
        type: Nature de l'événement.
        rotation: Compteur de rotations au moment de l'émission.
        plate: Assiette concernée (None pour ROTATE).
        position: Emplacement concerné (None pour ROTATE).
        consumer: Client ayant mangé l'assiette (PLATE_CONSUMED uniquement).
    """

    type: BeltEventType
    rotation: int
    plate: Optional["Plate"] = None
    position: Optional[int] = None
    consumer: Optional["Customer"] = None

    @classmethod
    def rotate(cls, rotation: int) -> "BeltEvent":
        return cls(BeltEventType.ROTATE, rotation)

    @classmethod
    def placed(cls, rotation: int, plate: "Plate", position: int) -> "BeltEvent":
        return cls(BeltEventType.PLATE_PLACED, rotation, plate, position)

    @classmethod
    def spoiled(cls, rotation: int, plate: "Plate", position: int) -> "BeltEvent":
        return cls(BeltEventType.PLATE_SPOILED, rotation, plate, position)

    @classmethod
    def consumed(
        cls, rotation: int, plate: "Plate", position: int, consumer: "Customer"
    ) -> "BeltEvent":
        return cls(BeltEventType.PLATE_CONSUMED, rotation, plate, position, consumer)


class BeltObserver(Protocol):
    def handle_belt_event(self, event: BeltEvent) -> None: ...
