"""
SushiGame

Simulation d'un tapis roulant de sushis partagé par plusieurs chefs.
Le paquet sépare les valeurs du domaine (ingrédients, plats, assiettes),
les règles de prix et de péremption, le moteur tapis/chefs et le câblage
de la partie en sous-paquets distincts.
"""

__all__ = ["core", "domain", "data", "rules"]
