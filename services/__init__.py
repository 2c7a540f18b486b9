"""Service layer - délégation vers les repositories.

Un service par entité. Les services reçoivent leurs repositories par
injection (constructeur) et ne valident rien : seule la cascade
Bloc -> Chambres est orchestrée ici.
"""
