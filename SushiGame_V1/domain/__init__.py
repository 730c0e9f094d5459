"""
Objets du domaine.

Valeurs figées du jeu : ingrédients et portions, plats et assiettes qui les
portent. Seuls les enums et la taxonomie d'erreurs sont ré-exportés ici ; les
modules de valeurs lisent les paramètres du jeu à l'import et s'importent
directement (`from SushiGame_V1.domain.sushi import Nigiri`).
"""

from .errors import (
    AlreadyPlacedThisRotation,
    BeltFull,
    InsufficientBalance,
    InvalidConstruction,
    PriceTooLow,
    SushiGameError,
    TypeMismatch,
)
from .types import IngredientKind, PlateColor, Seafood, SushiKind

__all__ = [
    "IngredientKind",
    "PlateColor",
    "Seafood",
    "SushiKind",
    "SushiGameError",
    "InvalidConstruction",
    "TypeMismatch",
    "PriceTooLow",
    "InsufficientBalance",
    "BeltFull",
    "AlreadyPlacedThisRotation",
]
