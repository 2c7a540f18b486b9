"""Repository layer - accès aux données du foyer.

Un repository par entité (Chambre, Universite, Bloc) exposant
find_all, find_by_id et save (upsert). Pas de requêtes personnalisées,
pas de logique métier.
"""
