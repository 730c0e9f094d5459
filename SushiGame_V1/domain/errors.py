"""
Erreurs métier du jeu.

Toutes sont des conditions attendues et récupérables : elles sont levées
au point d'appel fautif, avant toute mutation d'état.
"""


class SushiGameError(Exception):
    """Racine de la taxonomie d'erreurs du jeu."""


class InvalidConstruction(SushiGameError, ValueError):
    """Valeur structurellement invalide (champ manquant, quantité <= 0, tapis trop petit…)."""


class TypeMismatch(SushiGameError, TypeError):
    """Combinaison de portions d'ingrédients différents."""


class PriceTooLow(SushiGameError):
    def __init__(self, sushi, price: float, minimum: float):
        super().__init__(
            f"Prix trop bas pour '{getattr(sushi, 'name', sushi)}' : {price:.2f} < {minimum:.2f}"
        )
        self.sushi = sushi
        self.price = price
        self.minimum = minimum


class InsufficientBalance(SushiGameError):
    def __init__(self, balance: float, cost: float):
        super().__init__(f"Solde insuffisant : {balance:.2f} < {cost:.2f}")
        self.balance = balance
        self.cost = cost


class BeltFull(SushiGameError):
    def __init__(self, belt):
        super().__init__("Le tapis est plein")
        self.belt = belt


class AlreadyPlacedThisRotation(SushiGameError):
    def __init__(self):
        super().__init__("Une assiette a déjà été posée pendant cette rotation")


class SlotOccupied(SushiGameError):
    """Emplacement déjà occupé ; ne sort jamais de `Belt.set_plate_nearest_to_position`."""

    def __init__(self, position: int, plate):
        super().__init__(f"Emplacement {position} déjà occupé")
        self.position = position
        self.plate = plate
