"""
Politiques des chefs automatiques.

À chaque ROTATE, le chef tente (avec la probabilité `make_frequency`) de
préparer un plat au hasard et de le poser à un emplacement tiré au hasard.
Les refus attendus du moteur (prix, solde, tapis plein, déjà posé) sont
ignorés : le chef retentera à la rotation suivante.

Fréquence : make_frequency = make_frequency_min + make_frequency_span x U(0, 1)
"""

from enum import Enum
from typing import ClassVar, Dict, Optional, Type

import numpy as np
from loguru import logger

from SushiGame_V1.core.chef import Chef
from SushiGame_V1.core.events import BeltEvent, BeltEventType
from SushiGame_V1.data.game_params import GAME_PARAMS
from SushiGame_V1.domain.errors import (
    AlreadyPlacedThisRotation,
    BeltFull,
    InsufficientBalance,
    PriceTooLow,
)
from SushiGame_V1.domain.ingredients import IngredientPortion
from SushiGame_V1.domain.plate import Plate
from SushiGame_V1.domain.sushi import Nigiri, Roll, Sashimi
from SushiGame_V1.domain.types import IngredientKind, PlateColor, Seafood


class PolicyKind(str, Enum):
    SASHIMI = "Sashimi"
    NIGIRI = "Nigiri"
    ROLLMAKER = "Rollmaker"


FIXED_PRICE_COLORS = (PlateColor.RED, PlateColor.GREEN, PlateColor.BLUE)


class ChefPolicy:
    """Base des politiques : tirage de fréquence, de plat et d'emplacement."""

    KIND: ClassVar[PolicyKind]

    def __init__(self, chef: Chef, belt_size: int, rng: Optional[np.random.Generator] = None):
        self.chef = chef
        self.belt_size = belt_size
        self.rng = rng if rng is not None else np.random.default_rng()
        params = GAME_PARAMS.opponents
        self.make_frequency = params.make_frequency_min + params.make_frequency_span * float(
            self.rng.random()
        )

    def handle_belt_event(self, event: BeltEvent) -> None:
        if event.type != BeltEventType.ROTATE:
            return
        if self.rng.random() >= self.make_frequency:
            return

        try:
            plate = self.make_plate()
        except PriceTooLow as exc:
            # plat trop cher pour l'assiette choisie
            logger.debug("{} renonce : {}", self.chef.name, exc)
            return

        position = int(self.rng.integers(self.belt_size))
        try:
            self.chef.make_and_place_plate(plate, position)
        except (InsufficientBalance, BeltFull, AlreadyPlacedThisRotation) as exc:
            logger.debug("{} n'a pas pu poser : {}", self.chef.name, exc)

    def make_plate(self) -> Plate:
        raise NotImplementedError

    def _pick_seafood(self) -> Seafood:
        seafoods = list(Seafood)
        return seafoods[int(self.rng.integers(len(seafoods)))]

    def _pick_color(self) -> PlateColor:
        return FIXED_PRICE_COLORS[int(self.rng.integers(len(FIXED_PRICE_COLORS)))]


class SashimiChefPolicy(ChefPolicy):
    KIND = PolicyKind.SASHIMI

    def make_plate(self) -> Plate:
        sushi = Sashimi(self._pick_seafood())
        return Plate(self.chef, sushi, self._pick_color())


class NigiriChefPolicy(ChefPolicy):
    KIND = PolicyKind.NIGIRI

    def make_plate(self) -> Plate:
        sushi = Nigiri(self._pick_seafood())
        return Plate(self.chef, sushi, self._pick_color())


class RollMakerChefPolicy(ChefPolicy):
    """Maki des 8 ingrédients en quantités aléatoires, sur assiette Gold (5 à 8)."""

    KIND = PolicyKind.ROLLMAKER

    def make_plate(self) -> Plate:
        params = GAME_PARAMS.opponents
        # 1 - U est dans (0, 1] : jamais de portion nulle
        portions = [
            IngredientPortion.of(kind, params.roll_portion_max * (1.0 - float(self.rng.random())))
            for kind in IngredientKind
        ]
        price = params.gold_price_min + params.gold_price_span * float(self.rng.random())
        return Plate.gold(self.chef, Roll("Random Roll", portions), price)


POLICY_BY_KIND: Dict[PolicyKind, Type[ChefPolicy]] = {
    PolicyKind.SASHIMI: SashimiChefPolicy,
    PolicyKind.NIGIRI: NigiriChefPolicy,
    PolicyKind.ROLLMAKER: RollMakerChefPolicy,
}
