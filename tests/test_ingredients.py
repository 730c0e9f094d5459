import pytest

from SushiGame_V1.domain.errors import InvalidConstruction, TypeMismatch
from SushiGame_V1.domain.ingredients import INGREDIENTS, Ingredient, IngredientPortion
from SushiGame_V1.domain.types import IngredientKind


def test_catalog_has_the_eight_ingredients():
    assert set(INGREDIENTS) == set(IngredientKind)
    rice = INGREDIENTS[IngredientKind.RICE]
    assert rice.name == "rice"
    assert rice.is_rice and rice.is_vegetarian and not rice.is_shellfish
    assert INGREDIENTS[IngredientKind.CRAB].is_shellfish
    assert INGREDIENTS[IngredientKind.SHRIMP].is_shellfish
    assert not INGREDIENTS[IngredientKind.TUNA].is_vegetarian


def test_ingredient_equality_is_structural():
    copy = Ingredient("tuna", 1.77, 48, False, False, False)
    assert copy == INGREDIENTS[IngredientKind.TUNA]
    assert copy is not INGREDIENTS[IngredientKind.TUNA]
    assert copy != Ingredient("tuna", 1.78, 48, False, False, False)


def test_calories_per_dollar():
    avocado = INGREDIENTS[IngredientKind.AVOCADO]
    assert avocado.calories_per_dollar == pytest.approx(45 / 0.22)


def test_portion_cost_and_calories():
    portion = IngredientPortion.of(IngredientKind.SALMON, 0.75)
    assert portion.name == "salmon"
    assert portion.cost == pytest.approx(0.54)
    assert portion.calories == pytest.approx(42.0)
    assert not portion.is_vegetarian


@pytest.mark.parametrize("amount", [0.0, -1.0])
def test_portion_amount_must_be_positive(amount):
    with pytest.raises(InvalidConstruction):
        IngredientPortion.of(IngredientKind.RICE, amount)


def test_combine_sums_amounts():
    a = IngredientPortion.of(IngredientKind.RICE, 0.5)
    b = IngredientPortion.of(IngredientKind.RICE, 0.25)
    combined = a.combine(b)
    assert combined.amount == pytest.approx(0.75)
    assert combined.ingredient == a.ingredient
    # les portions d'origine ne bougent pas
    assert a.amount == 0.5 and b.amount == 0.25


def test_combine_with_none_returns_same_portion():
    a = IngredientPortion.of(IngredientKind.EEL, 0.5)
    assert a.combine(None) is a


def test_combine_different_ingredients_fails():
    a = IngredientPortion.of(IngredientKind.RICE, 0.5)
    b = IngredientPortion.of(IngredientKind.TUNA, 0.5)
    with pytest.raises(TypeMismatch):
        a.combine(b)
