# Paramètres du jeu (admin/scénario), chargés depuis game_params.json

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from SushiGame_V1.domain.types import PlateColor
from SushiGame_V1.utils import load_and_validate


class PortionParams(BaseModel):
    """Quantités (oz) des portions standard."""

    nigiri_seafood: float = Field(gt=0)
    nigiri_rice: float = Field(gt=0)
    sashimi_seafood: float = Field(gt=0)


class SpoilageLaps(BaseModel):
    """Durée de vie d'une assiette, en nombre de tours complets du tapis."""

    vegetarian: int = Field(ge=1)
    standard: int = Field(ge=1)
    shellfish: int = Field(ge=1)


class OpponentParams(BaseModel):
    make_frequency_min: float = Field(ge=0, le=1)
    make_frequency_span: float = Field(ge=0, le=1)
    gold_price_min: float = Field(ge=0)
    gold_price_span: float = Field(ge=0)
    roll_portion_max: float = Field(gt=0)
    names: List[str] = Field(min_length=1)


class SessionParams(BaseModel):
    belt_size: int = Field(ge=1)
    num_customers: int = Field(ge=0)
    num_opponents: int = Field(ge=0)


class GameParams(BaseModel):
    starting_balance: float = Field(ge=0)
    portions: PortionParams
    plate_prices: Dict[PlateColor, float]
    gold_min_price: float = Field(gt=0)
    spoilage_laps: SpoilageLaps
    opponents: OpponentParams
    session: SessionParams


DEFAULT_PARAMS_PATH = Path(__file__).parent / "game_params.json"


def load_game_params(json_path: Optional[Path | str] = None) -> GameParams:
    """Charge et valide les paramètres du jeu (fichier par défaut si `json_path` est None).

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    pydantic.ValidationError
        Si le contenu ne respecte pas le modèle `GameParams`.
    """
    path = Path(json_path) if json_path is not None else DEFAULT_PARAMS_PATH
    return load_and_validate(path, GameParams)


GAME_PARAMS: GameParams = load_game_params()
