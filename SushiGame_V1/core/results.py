from typing import List

from pydantic import BaseModel, Field


class ChefStanding(BaseModel):
    """Ligne du tableau des scores pour un chef."""

    name: str
    balance: float
    plates_consumed: int = Field(ge=0)
    plates_spoiled: int = Field(ge=0)
    is_player: bool = False


class RotationResult(BaseModel):
    """Snapshot d'une rotation : mouvements sur le tapis et classement après coup."""

    rotation: int = Field(ge=0)
    plates_placed: int = Field(ge=0)
    plates_consumed: int = Field(ge=0)
    plates_spoiled: int = Field(ge=0)
    plates_on_belt: int = Field(ge=0)
    standings: List[ChefStanding]
