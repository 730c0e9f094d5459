# sushigame/domain/types.py
from enum import Enum


class IngredientKind(Enum):
    # Values aligned with the JSON keys of data/ingredients.json
    AVOCADO = "AVOCADO"
    CRAB = "CRAB"
    EEL = "EEL"
    RICE = "RICE"
    SALMON = "SALMON"
    SEAWEED = "SEAWEED"
    SHRIMP = "SHRIMP"
    TUNA = "TUNA"


class Seafood(Enum):
    """Poissons/fruits de mer utilisables en nigiri et sashimi."""

    TUNA = "TUNA"
    SALMON = "SALMON"
    EEL = "EEL"
    CRAB = "CRAB"
    SHRIMP = "SHRIMP"

    @property
    def ingredient(self) -> IngredientKind:
        return IngredientKind[self.value]


class SushiKind(Enum):
    NIGIRI = "NIGIRI"
    SASHIMI = "SASHIMI"
    ROLL = "ROLL"


class PlateColor(Enum):
    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"
    GOLD = "GOLD"  # prix libre, plancher dans game_params.json
