# sushigame/domain/plate.py
"""
Assiettes : un plat, un prix de vente, une couleur et le chef qui l'a faite.

Une assiette est figée après construction. Elle est comparée par identité
(deux assiettes identiques restent deux objets distincts sur le tapis) et
référence son chef par identité, puisque le chef est un acteur mutable.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from SushiGame_V1.domain.errors import InvalidConstruction
from SushiGame_V1.domain.sushi import Sushi
from SushiGame_V1.domain.types import PlateColor
from SushiGame_V1.rules.pricing import check_price_covers_cost, price_for_color

if TYPE_CHECKING:
    from SushiGame_V1.core.chef import Chef
    from SushiGame_V1.core.customer import Customer


@dataclass(frozen=True, eq=False)
class Plate:
    chef: "Chef"
    contents: Sushi
    color: PlateColor
    price: Optional[float] = None  # obligatoire pour GOLD, déduit pour les autres

    def __post_init__(self):
        if self.chef is None:
            raise InvalidConstruction("Une assiette doit appartenir à un chef")
        if self.contents is None:
            raise InvalidConstruction("Une assiette doit contenir un plat")
        color = PlateColor(self.color)
        # plancher Gold d'abord, puis couverture du coût
        price = price_for_color(color, self.price, self.contents)
        check_price_covers_cost(self.contents, price)
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "price", price)

    # --------- CONSTRUCTEURS PAR COULEUR ---------
    @classmethod
    def red(cls, chef: "Chef", contents: Sushi) -> "Plate":
        return cls(chef, contents, PlateColor.RED)

    @classmethod
    def green(cls, chef: "Chef", contents: Sushi) -> "Plate":
        return cls(chef, contents, PlateColor.GREEN)

    @classmethod
    def blue(cls, chef: "Chef", contents: Sushi) -> "Plate":
        return cls(chef, contents, PlateColor.BLUE)

    @classmethod
    def gold(cls, chef: "Chef", contents: Sushi, price: float) -> "Plate":
        return cls(chef, contents, PlateColor.GOLD, price)

    @property
    def profit(self) -> float:
        return self.price - self.contents.cost


@dataclass(frozen=True, eq=False)
class HistoricalPlate:
    """Trace d'une assiette sortie du tapis : consommée (`consumer`) ou périmée (None)."""

    plate: Plate
    consumer: Optional["Customer"] = None
    position: int = -1
    rotation: int = -1

    @property
    def contents(self) -> Sushi:
        return self.plate.contents

    @property
    def price(self) -> float:
        return self.plate.price

    @property
    def color(self) -> PlateColor:
        return self.plate.color

    @property
    def profit(self) -> float:
        return self.plate.profit

    @property
    def chef(self) -> "Chef":
        return self.plate.chef

    @property
    def was_spoiled(self) -> bool:
        return self.consumer is None
