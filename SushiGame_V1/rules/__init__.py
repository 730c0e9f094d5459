"""
Règles du jeu : prix par couleur d'assiette, péremption et politiques
des chefs automatiques. Fonctions pures pilotées par `data/game_params.json`.
"""
