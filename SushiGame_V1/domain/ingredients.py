# sushigame/domain/ingredients.py
"""
Ingrédients (faits nutritionnels et prix par once) et portions pesées.

Le catalogue des 8 ingrédients est chargé depuis `data/ingredients.json`
et validé par Pydantic ; les objets exposés au reste du jeu sont des
dataclasses figées, comparées par valeur.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, RootModel

from SushiGame_V1.domain.errors import InvalidConstruction, TypeMismatch
from SushiGame_V1.domain.types import IngredientKind
from SushiGame_V1.utils import load_and_validate


class IngredientDataModel(BaseModel):
    name: str = Field(min_length=1)
    price_per_ounce: float = Field(gt=0)
    calories_per_ounce: int = Field(ge=0)
    is_vegetarian: bool
    is_rice: bool
    is_shellfish: bool


class IngredientCatalogModel(RootModel[Dict[IngredientKind, IngredientDataModel]]):
    pass


@dataclass(frozen=True)
class Ingredient:
    """Ingrédient partagé par référence entre les portions ; égalité structurelle."""

    name: str
    price_per_ounce: float
    calories_per_ounce: int
    is_vegetarian: bool = False
    is_rice: bool = False
    is_shellfish: bool = False

    def __post_init__(self):
        if not self.name:
            raise InvalidConstruction("Un ingrédient doit avoir un nom")
        if self.price_per_ounce <= 0:
            raise InvalidConstruction(f"Prix/once invalide pour {self.name}")

    @property
    def calories_per_dollar(self) -> float:
        return self.calories_per_ounce / self.price_per_ounce


def load_ingredient_catalog(json_path: Path) -> Dict[IngredientKind, Ingredient]:
    """Charge le catalogue d'ingrédients et le convertit en `Ingredient` figés.

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    pydantic.ValidationError
        Si une entrée est invalide ou si une clé n'est pas un `IngredientKind`.
    """
    catalog = load_and_validate(json_path, IngredientCatalogModel)
    return {
        kind: Ingredient(**data.model_dump()) for kind, data in catalog.root.items()
    }


INGREDIENTS: Dict[IngredientKind, Ingredient] = load_ingredient_catalog(
    Path(__file__).parent.parent / "data" / "ingredients.json"
)


@dataclass(frozen=True)
class IngredientPortion:
    """Quantité (oz, > 0) d'un ingrédient ; coût et calories proportionnels."""

    ingredient: Ingredient
    amount: float

    def __post_init__(self):
        if self.ingredient is None:
            raise InvalidConstruction("Une portion doit référencer un ingrédient")
        if self.amount is None or self.amount <= 0.0:
            raise InvalidConstruction(
                f"La quantité d'une portion doit être > 0 (reçu {self.amount})"
            )

    @classmethod
    def of(cls, kind: IngredientKind, amount: float) -> "IngredientPortion":
        return cls(INGREDIENTS[IngredientKind(kind)], float(amount))

    @property
    def name(self) -> str:
        return self.ingredient.name

    @property
    def cost(self) -> float:
        return self.amount * self.ingredient.price_per_ounce

    @property
    def calories(self) -> float:
        return self.amount * self.ingredient.calories_per_ounce

    @property
    def is_vegetarian(self) -> bool:
        return self.ingredient.is_vegetarian

    @property
    def is_rice(self) -> bool:
        return self.ingredient.is_rice

    @property
    def is_shellfish(self) -> bool:
        return self.ingredient.is_shellfish

    def combine(self, other: Optional["IngredientPortion"]) -> "IngredientPortion":
        """Nouvelle portion dont la quantité est la somme des deux.

        Lève `TypeMismatch` si `other` porte sur un autre ingrédient.
        """
        if other is None:
            return self
        if not isinstance(other, IngredientPortion) or other.ingredient != self.ingredient:
            raise TypeMismatch(
                f"Impossible de combiner {self.name} avec {getattr(other, 'name', other)}"
            )
        return IngredientPortion(self.ingredient, self.amount + other.amount)
