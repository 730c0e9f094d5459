"""
Tarification des assiettes.

Formules
--------
- RED / GREEN / BLUE : prix fixe lu dans `GAME_PARAMS.plate_prices`.
- GOLD : prix choisi par l'appelant, au moins `GAME_PARAMS.gold_min_price`.
- Dans tous les cas : prix >= coût du plat, sinon `PriceTooLow`.
"""

from typing import Dict, Optional

from SushiGame_V1.data.game_params import GAME_PARAMS
from SushiGame_V1.domain.errors import InvalidConstruction, PriceTooLow
from SushiGame_V1.domain.types import PlateColor

FIXED_PRICE_BY_COLOR: Dict[PlateColor, float] = {
    PlateColor(color): float(price) for color, price in GAME_PARAMS.plate_prices.items()
}
GOLD_MIN_PRICE: float = GAME_PARAMS.gold_min_price


def price_for_color(color: PlateColor, price: Optional[float] = None, sushi=None) -> float:
    """Résout le prix de vente d'une assiette de couleur `color`.

    Le prix Gold est vérifié contre son plancher avant toute comparaison au
    coût du plat.

    Exemple
    -------
    >>> price_for_color(PlateColor.GREEN)
    2.0
    >>> price_for_color(PlateColor.GOLD, 6.5)
    6.5
    """
    color = PlateColor(color)
    if color == PlateColor.GOLD:
        if price is None:
            raise InvalidConstruction("Une assiette Gold exige un prix explicite")
        price = float(price)
        if price < GOLD_MIN_PRICE:
            raise PriceTooLow(sushi, price, GOLD_MIN_PRICE)
        return price

    fixed = FIXED_PRICE_BY_COLOR[color]
    if price is not None and float(price) != fixed:
        raise InvalidConstruction(
            f"Le prix d'une assiette {color.value} est fixé à {fixed:.2f}"
        )
    return fixed


def check_price_covers_cost(sushi, price: float) -> None:
    """Lève `PriceTooLow` si le prix ne couvre pas le coût du plat (égalité acceptée)."""
    if sushi.cost > price:
        raise PriceTooLow(sushi, price, sushi.cost)
