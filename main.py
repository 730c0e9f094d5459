import argparse

import numpy as np
from loguru import logger

from SushiGame_V1.core.controller import SushiGameController
from SushiGame_V1.core.game import SushiGameModel
from SushiGame_V1.data.game_params import GAME_PARAMS
from SushiGame_V1.log import configure_logging


def run(nb_rotations: int = 30, seed: int | None = None, level: str = "INFO") -> None:
    configure_logging(level)
    rng = np.random.default_rng(seed)

    session = GAME_PARAMS.session
    model = SushiGameModel(
        belt_size=session.belt_size,
        num_customers=session.num_customers,
        num_chef_opponents=session.num_opponents,
        rng=rng,
    )
    controller = SushiGameController(model, rng)

    # TODO: brancher les demandes du joueur (saisie) sur controller.place_player_plate
    controller.play(nb_rotations)

    for rank, standing in enumerate(model.scoreboard(), start=1):
        logger.info(
            "{}. {:<20s} {:>8.2f}  (mangées {}, périmées {})",
            rank,
            standing.name,
            standing.balance,
            standing.plates_consumed,
            standing.plates_spoiled,
        )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Démo du tapis à sushis")
    parser.add_argument("--rotations", type=int, default=30)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    run(args.rotations, args.seed, args.log_level)
