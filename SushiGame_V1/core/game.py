"""
Partie : un tapis, N clients répartis régulièrement, M chefs adverses et le joueur.

La partie ne fait que du câblage ; toute la logique vit dans `Belt` et `Chef`.
"""

from typing import List, Optional, Tuple

import numpy as np
from loguru import logger

from SushiGame_V1.core.belt import Belt
from SushiGame_V1.core.chef import Chef
from SushiGame_V1.core.customer import RandomCustomer
from SushiGame_V1.core.results import ChefStanding
from SushiGame_V1.data.game_params import GAME_PARAMS
from SushiGame_V1.domain.errors import InvalidConstruction
from SushiGame_V1.utils import round_half_up


def _check_count(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidConstruction(f"{label} doit être un entier >= 0 (reçu {value})")
    return value


class SushiGameModel:
    def __init__(
        self,
        belt_size: int,
        num_customers: int,
        num_chef_opponents: int,
        starting_balance: Optional[float] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """Crée une partie prête à jouer.

        Args:
            belt_size: Nombre d'emplacements du tapis (>= 1).
            num_customers: Nombre de clients (<= belt_size), espacés de
                `belt_size // num_customers` emplacements à partir de 0.
            num_chef_opponents: Nombre de chefs adverses.
            starting_balance: Solde initial de chaque chef (défaut : game_params.json).
            rng: Générateur numpy partagé par les clients ; la gourmandise de
                chaque client y est tirée uniformément dans [0, 1).

        Raises:
            InvalidConstruction: tailles incohérentes.
        """
        if isinstance(belt_size, bool) or not isinstance(belt_size, int) or belt_size < 1:
            raise InvalidConstruction(f"Le tapis doit avoir une taille >= 1 (reçu {belt_size})")
        num_customers = _check_count(num_customers, "num_customers")
        num_chef_opponents = _check_count(num_chef_opponents, "num_chef_opponents")
        if belt_size < num_customers:
            raise InvalidConstruction(
                f"Le tapis ({belt_size}) doit être au moins aussi grand que le nombre de clients ({num_customers})"
            )

        if starting_balance is None:
            starting_balance = GAME_PARAMS.starting_balance
        self.rng = rng if rng is not None else np.random.default_rng()

        self._belt = Belt(belt_size)

        self._customers: List[RandomCustomer] = []
        if num_customers:
            spacing = belt_size // num_customers
            for i in range(num_customers):
                customer = RandomCustomer(float(self.rng.random()), self.rng)
                self._belt.set_customer_at_position(customer, i * spacing)
                self._customers.append(customer)

        self._opponent_chefs: List[Chef] = [
            Chef(f"Opponent Chef {i}", starting_balance, self._belt)
            for i in range(num_chef_opponents)
        ]
        self._player_chef = Chef("Player", starting_balance, self._belt)

        logger.info(
            "Partie créée : tapis={} clients={} adversaires={}",
            belt_size,
            num_customers,
            num_chef_opponents,
        )

    @classmethod
    def from_defaults(cls, rng: Optional[np.random.Generator] = None) -> "SushiGameModel":
        session = GAME_PARAMS.session
        return cls(session.belt_size, session.num_customers, session.num_opponents, rng=rng)

    @property
    def belt(self) -> Belt:
        return self._belt

    @property
    def player_chef(self) -> Chef:
        return self._player_chef

    @property
    def opponent_chefs(self) -> Tuple[Chef, ...]:
        return tuple(self._opponent_chefs)

    @property
    def customers(self) -> Tuple[RandomCustomer, ...]:
        return tuple(self._customers)

    @property
    def chefs(self) -> Tuple[Chef, ...]:
        return tuple(self._opponent_chefs) + (self._player_chef,)

    def scoreboard(self) -> List[ChefStanding]:
        """Classement du plus riche au moins riche, comparé au centime près.

        Le tri est stable : à égalité, l'ordre des chefs (adversaires puis joueur)
        est conservé.
        """
        chefs = sorted(self.chefs, key=lambda c: -round_half_up(c.balance, 2))
        standings = []
        for chef in chefs:
            history = chef.get_plate_history()
            spoiled = sum(1 for h in history if h.was_spoiled)
            standings.append(
                ChefStanding(
                    name=chef.name,
                    balance=round_half_up(chef.balance, 2),
                    plates_consumed=len(history) - spoiled,
                    plates_spoiled=spoiled,
                    is_player=chef is self._player_chef,
                )
            )
        return standings
