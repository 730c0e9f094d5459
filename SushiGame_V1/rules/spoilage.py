"""
Péremption des assiettes sur le tapis.

Seuil d'âge (en rotations) pour un tapis de taille S, première règle qui
s'applique :
- plat végétarien      : spoilage_laps.vegetarian x S  (3 S)
- plat sans crustacés  : spoilage_laps.standard x S    (2 S)
- plat aux crustacés   : spoilage_laps.shellfish x S   (S)
"""

from SushiGame_V1.data.game_params import GAME_PARAMS


def spoilage_threshold(sushi, belt_size: int) -> int:
    laps = GAME_PARAMS.spoilage_laps
    if sushi.is_vegetarian:
        return laps.vegetarian * belt_size
    if not sushi.has_shellfish:
        return laps.standard * belt_size
    return laps.shellfish * belt_size


def is_spoiled(sushi, age: int, belt_size: int) -> bool:
    """Vrai dès que l'âge atteint le seuil du plat (un âge négatif = emplacement vide)."""
    if sushi is None or age < 0:
        return False
    return age >= spoilage_threshold(sushi, belt_size)
