import json
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Union

from pydantic import BaseModel, RootModel


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Fichier de données introuvable : {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Arrondi "commercial" (0.5 → supérieur) à `ndigits` décimales.

    On passe par `Decimal(repr(value))` pour arrondir la valeur affichée du
    float et non sa représentation binaire (1.3275 → 1.33, pas 1.32).

    Exemple
    -------
    >>> round_half_up(1.3275, 2)
    1.33
    >>> round_half_up(62.5)
    63.0
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
