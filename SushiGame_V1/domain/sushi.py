# sushigame/domain/sushi.py
"""
Plats : nigiri, sashimi et makis (rolls).

Un plat agrège des portions d'ingrédients et en dérive coût, calories et
indicateurs (riz, crustacés, végétarien). Les valeurs sont figées à la
construction ; coût et calories sont arrondis au demi supérieur (centime /
calorie entière) partout où ils sont exposés.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable, Tuple

from SushiGame_V1.data.game_params import GAME_PARAMS
from SushiGame_V1.domain.errors import InvalidConstruction
from SushiGame_V1.domain.ingredients import IngredientPortion
from SushiGame_V1.domain.types import IngredientKind, Seafood, SushiKind
from SushiGame_V1.utils import round_half_up


@dataclass(frozen=True)
class Sushi:
    """Base commune des plats. Préférer `Nigiri`, `Sashimi` ou `Roll`."""

    KIND: ClassVar[SushiKind]

    name: str
    ingredients: Tuple[IngredientPortion, ...]

    def __post_init__(self):
        if not self.name:
            raise InvalidConstruction("Un plat doit avoir un nom")
        if self.ingredients is None:
            raise InvalidConstruction(f"{self.name} : liste d'ingrédients absente")
        portions = tuple(self.ingredients)
        if not portions:
            raise InvalidConstruction(f"{self.name} : au moins une portion est requise")
        if any(p is None for p in portions):
            raise InvalidConstruction(f"{self.name} : portion nulle")
        object.__setattr__(self, "ingredients", portions)

    @property
    def kind(self) -> SushiKind:
        return self.KIND

    # --------- VALEURS DÉRIVÉES ---------
    @property
    def cost(self) -> float:
        return round_half_up(sum(p.cost for p in self.ingredients), 2)

    @property
    def calories(self) -> int:
        return int(round_half_up(sum(p.calories for p in self.ingredients)))

    @property
    def has_rice(self) -> bool:
        return any(p.is_rice for p in self.ingredients)

    @property
    def has_shellfish(self) -> bool:
        return any(p.is_shellfish for p in self.ingredients)

    @property
    def is_vegetarian(self) -> bool:
        return all(p.is_vegetarian for p in self.ingredients)


class Nigiri(Sushi):
    """Une portion de poisson posée sur une portion de riz fixe."""

    KIND = SushiKind.NIGIRI

    def __init__(self, seafood: Seafood):
        seafood = Seafood(seafood)
        fish = IngredientPortion.of(seafood.ingredient, GAME_PARAMS.portions.nigiri_seafood)
        rice = IngredientPortion.of(IngredientKind.RICE, GAME_PARAMS.portions.nigiri_rice)
        super().__init__(name=f"{fish.name} nigiri", ingredients=(fish, rice))
        object.__setattr__(self, "seafood", seafood)

    @property
    def is_vegetarian(self) -> bool:
        return False


class Sashimi(Sushi):
    KIND = SushiKind.SASHIMI

    def __init__(self, seafood: Seafood):
        seafood = Seafood(seafood)
        fish = IngredientPortion.of(seafood.ingredient, GAME_PARAMS.portions.sashimi_seafood)
        super().__init__(name=f"{fish.name} sashimi", ingredients=(fish,))
        object.__setattr__(self, "seafood", seafood)

    @property
    def is_vegetarian(self) -> bool:
        return False


class Roll(Sushi):
    """Maki libre : le nom et les portions sont fournis par l'appelant."""

    KIND = SushiKind.ROLL

    def __init__(self, name: str, ingredients: Iterable[IngredientPortion]):
        if ingredients is None:
            raise InvalidConstruction(f"{name} : liste d'ingrédients absente")
        super().__init__(name=name, ingredients=tuple(ingredients))

    @classmethod
    def custom(cls, name: str, portions: Iterable[IngredientPortion]) -> "Roll":
        """Construit un maki en fusionnant (`combine`) les portions d'un même ingrédient.

        L'ordre de première apparition des ingrédients est conservé.
        """
        merged: Dict[str, IngredientPortion] = {}
        for portion in portions:
            if portion is None:
                raise InvalidConstruction(f"{name} : portion nulle")
            merged[portion.name] = portion.combine(merged.get(portion.name))
        return cls(name, merged.values())
