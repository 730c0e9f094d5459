"""
Contrôleur de partie : demandes de rotation, chefs automatiques et
demandes du joueur.

Les couches de présentation (affichage, saisie) ne parlent qu'à ce module ;
il traduit les erreurs attendues du moteur en messages lisibles.
"""

from typing import List, Optional

import numpy as np
from loguru import logger

from SushiGame_V1.core.events import BeltEvent, BeltEventType
from SushiGame_V1.core.game import SushiGameModel
from SushiGame_V1.core.results import RotationResult
from SushiGame_V1.data.game_params import GAME_PARAMS
from SushiGame_V1.domain.errors import (
    AlreadyPlacedThisRotation,
    BeltFull,
    InsufficientBalance,
    InvalidConstruction,
    PriceTooLow,
)
from SushiGame_V1.domain.plate import Plate
from SushiGame_V1.domain.sushi import Sushi
from SushiGame_V1.domain.types import PlateColor
from SushiGame_V1.rules.chef_policies import POLICY_BY_KIND, ChefPolicy, PolicyKind


class EventTally:
    """Compte les événements du tapis depuis le dernier `reset()`."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.placed = 0
        self.consumed = 0
        self.spoiled = 0

    def handle_belt_event(self, event: BeltEvent) -> None:
        if event.type == BeltEventType.PLATE_PLACED:
            self.placed += 1
        elif event.type == BeltEventType.PLATE_CONSUMED:
            self.consumed += 1
        elif event.type == BeltEventType.PLATE_SPOILED:
            self.spoiled += 1


def pick_policy_kind(draw: float) -> PolicyKind:
    """Un tiers de chance pour chaque type de chef automatique."""
    if draw < 1 / 3:
        return PolicyKind.SASHIMI
    if draw < 2 / 3:
        return PolicyKind.NIGIRI
    return PolicyKind.ROLLMAKER


class SushiGameController:
    def __init__(self, model: SushiGameModel, rng: Optional[np.random.Generator] = None):
        self.model = model
        self.rng = rng if rng is not None else model.rng
        belt = model.belt

        names = GAME_PARAMS.opponents.names
        self.policies: List[ChefPolicy] = []
        for chef in model.opponent_chefs:
            kind = pick_policy_kind(float(self.rng.random()))
            chef.name = f"{kind.value} {names[int(self.rng.integers(len(names)))]}"
            policy = POLICY_BY_KIND[kind](chef, belt.size, self.rng)
            belt.register_belt_observer(policy)
            self.policies.append(policy)

        self.tally = EventTally()
        belt.register_belt_observer(self.tally)

    def handle_rotation_request(self) -> RotationResult:
        belt = self.model.belt
        belt.rotate()
        result = RotationResult(
            rotation=belt.rotation_count,
            plates_placed=self.tally.placed,
            plates_consumed=self.tally.consumed,
            plates_spoiled=self.tally.spoiled,
            plates_on_belt=len(belt.occupied_positions()),
            standings=self.model.scoreboard(),
        )
        self.tally.reset()
        logger.info(
            "Rotation {} : {} posées, {} mangées, {} périmées, {} sur le tapis",
            result.rotation,
            result.plates_placed,
            result.plates_consumed,
            result.plates_spoiled,
            result.plates_on_belt,
        )
        return result

    def play(self, nb_rotations: int) -> List[RotationResult]:
        assert nb_rotations >= 0, "nb_rotations doit être >= 0"
        return [self.handle_rotation_request() for _ in range(nb_rotations)]

    def place_player_plate(
        self,
        color: PlateColor,
        sushi: Sushi,
        position: int,
        price: Optional[float] = None,
    ) -> Optional[str]:
        """Construit et pose l'assiette du joueur.

        Returns:
            None si l'assiette est posée, sinon le message à afficher au joueur.
        """
        chef = self.model.player_chef
        color = PlateColor(color)
        try:
            plate = Plate(chef, sushi, color, price)
            chef.make_and_place_plate(plate, position)
        except PriceTooLow:
            message = f"Plat trop cher pour une assiette {color.value.lower()}."
        except InsufficientBalance:
            message = "Solde insuffisant."
        except BeltFull:
            message = "Le tapis est plein."
        except AlreadyPlacedThisRotation:
            message = "Une assiette a déjà été posée pendant cette rotation."
        except InvalidConstruction as exc:
            message = str(exc)
        else:
            return None

        logger.warning("Demande du joueur refusée : {}", message)
        return message
