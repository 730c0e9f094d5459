import pytest

from SushiGame_V1.domain.errors import InvalidConstruction, PriceTooLow
from SushiGame_V1.domain.ingredients import IngredientPortion
from SushiGame_V1.domain.plate import HistoricalPlate, Plate
from SushiGame_V1.domain.sushi import Roll, Sashimi
from SushiGame_V1.domain.types import IngredientKind, PlateColor, Seafood
from SushiGame_V1.rules.pricing import price_for_color


def test_fixed_prices_by_color(chef):
    sushi = Sashimi(Seafood.SHRIMP)
    assert Plate.red(chef, sushi).price == 1.0
    assert Plate.green(chef, sushi).price == 2.0
    assert Plate.blue(chef, sushi).price == 4.0
    assert Plate.blue(chef, sushi).color == PlateColor.BLUE


def test_red_plate_cannot_hold_tuna_sashimi(chef):
    with pytest.raises(PriceTooLow):
        Plate.red(chef, Sashimi(Seafood.TUNA))


def test_price_equal_to_cost_is_accepted(chef):
    roll = Roll("rice", [IngredientPortion.of(IngredientKind.RICE, 1.0 / 0.12)])
    assert roll.cost == 1.0
    assert Plate.red(chef, roll).profit == pytest.approx(0.0)


def test_gold_minimum_price(chef):
    sushi = Sashimi(Seafood.SALMON)
    with pytest.raises(PriceTooLow):
        Plate.gold(chef, sushi, 4.99)
    plate = Plate.gold(chef, sushi, 5.00)
    assert plate.price == 5.0
    assert plate.color == PlateColor.GOLD


def test_gold_price_must_still_cover_cost(chef):
    expensive = Roll("eel roll", [IngredientPortion.of(IngredientKind.EEL, 3.0)])
    with pytest.raises(PriceTooLow):
        Plate.gold(chef, expensive, 6.0)


def test_gold_requires_a_price(chef):
    with pytest.raises(InvalidConstruction):
        Plate(chef, Sashimi(Seafood.SALMON), PlateColor.GOLD)


def test_fixed_color_rejects_other_price():
    with pytest.raises(InvalidConstruction):
        price_for_color(PlateColor.RED, 3.0)


def test_plate_needs_chef_and_contents(chef):
    with pytest.raises(InvalidConstruction):
        Plate(None, Sashimi(Seafood.SALMON), PlateColor.RED)
    with pytest.raises(InvalidConstruction):
        Plate(chef, None, PlateColor.RED)


def test_profit(chef):
    plate = Plate.green(chef, Sashimi(Seafood.SALMON))
    assert plate.profit == pytest.approx(2.0 - 0.54)


def test_plate_is_immutable_and_compared_by_identity(chef):
    a = Plate.red(chef, Sashimi(Seafood.CRAB))
    b = Plate.red(chef, Sashimi(Seafood.CRAB))
    assert a != b
    assert a == a
    with pytest.raises(AttributeError):
        a.price = 10.0


def test_historical_plate_delegates(chef):
    plate = Plate.blue(chef, Sashimi(Seafood.EEL))
    spoiled = HistoricalPlate(plate)
    assert spoiled.was_spoiled
    assert spoiled.chef is chef
    assert spoiled.price == 4.0
    assert spoiled.contents is plate.contents
    eaten = HistoricalPlate(plate, consumer=object(), position=2, rotation=5)
    assert not eaten.was_spoiled
    assert eaten.profit == plate.profit
