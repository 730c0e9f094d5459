import numpy as np
import pytest

from SushiGame_V1.core.customer import RandomCustomer
from SushiGame_V1.core.game import SushiGameModel
from SushiGame_V1.domain.errors import InvalidConstruction
from SushiGame_V1.domain.plate import Plate
from SushiGame_V1.domain.sushi import Sashimi
from SushiGame_V1.domain.types import Seafood


@pytest.mark.parametrize(
    "belt_size, num_customers, num_opponents",
    [(0, 0, 0), (3, 4, 1), (5, -1, 1), (5, 2, -1), (2.0, 1, 1)],
)
def test_invalid_sessions(belt_size, num_customers, num_opponents):
    with pytest.raises(InvalidConstruction):
        SushiGameModel(belt_size, num_customers, num_opponents)


def test_customers_are_evenly_spaced(rng):
    model = SushiGameModel(10, 3, 0, rng=rng)
    belt = model.belt
    seated = [i for i in range(10) if belt.get_customer_at_position(i) is not None]
    assert seated == [0, 3, 6]
    assert all(isinstance(c, RandomCustomer) for c in model.customers)
    assert all(0.0 <= c.pickiness < 1.0 for c in model.customers)


def test_as_many_customers_as_slots(rng):
    model = SushiGameModel(4, 4, 1, rng=rng)
    assert all(model.belt.get_customer_at_position(i) is not None for i in range(4))


def test_chefs_share_the_belt(rng):
    model = SushiGameModel(8, 2, 3, starting_balance=25.0, rng=rng)
    assert [c.name for c in model.opponent_chefs] == [
        "Opponent Chef 0",
        "Opponent Chef 1",
        "Opponent Chef 2",
    ]
    assert model.player_chef.name == "Player"
    assert model.chefs[-1] is model.player_chef
    assert all(c.balance == 25.0 for c in model.chefs)

    model.belt.rotate()
    assert all(not c.already_placed_this_rotation for c in model.chefs)


def test_default_balance_and_session(rng):
    model = SushiGameModel.from_defaults(rng)
    assert model.belt.size == 20
    assert len(model.customers) == 5
    assert len(model.opponent_chefs) == 4
    assert model.player_chef.balance == 100.0


def test_same_seed_same_customers():
    a = SushiGameModel(6, 3, 0, rng=np.random.default_rng(42))
    b = SushiGameModel(6, 3, 0, rng=np.random.default_rng(42))
    assert [c.pickiness for c in a.customers] == [c.pickiness for c in b.customers]


def test_scoreboard_is_sorted_and_stable(rng):
    model = SushiGameModel(5, 0, 2, starting_balance=10.0, rng=rng)
    spender = model.opponent_chefs[0]
    spender.make_and_place_plate(Plate.red(spender, Sashimi(Seafood.CRAB)), 0)

    standings = model.scoreboard()
    assert [s.name for s in standings] == ["Opponent Chef 1", "Player", "Opponent Chef 0"]
    assert standings[1].is_player
    assert standings[2].balance == 9.44
    assert standings[2].plates_consumed == 0
    assert standings[2].plates_spoiled == 0
