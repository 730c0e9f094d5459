"""
Paramètres du jeu (`game_params.json`) et catalogue d'ingrédients
(`ingredients.json`), validés au chargement par `game_params.py` et
`domain/ingredients.py`.
"""
