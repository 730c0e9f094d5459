"""
Moteur du jeu.

Le tapis porte les emplacements, les clients et les abonnés, et pilote
chaque rotation. Les chefs réagissent aux événements du tapis et sont le
seul point d'entrée pour poser une assiette. La partie (`game`) et le
contrôleur (`controller`) assemblent le tout.
"""
