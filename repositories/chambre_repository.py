"""Chambre Repository - Gestion de la persistence des chambres.

Responsabilité (SRP) : Accès aux données des chambres uniquement.
- find_all / find_by_id / save (upsert)
- Pas de logique métier, pas de validation
"""
from typing import Optional, List
from models import db, Chambre


class ChambreRepository:
    """Repository pour la gestion de la persistence des chambres.

    Pattern: Repository Pattern
    SOLID: SRP (une seule responsabilité - accès données)
    """

    @staticmethod
    def find_all() -> List[Chambre]:
        """Récupère toutes les chambres, dans l'ordre de stockage."""
        return Chambre.query.order_by(Chambre.id).all()

    @staticmethod
    def find_by_id(chambre_id: int) -> Optional[Chambre]:
        """Trouve une chambre par son ID."""
        return db.session.get(Chambre, chambre_id)

    @staticmethod
    def save(chambre: Chambre) -> Chambre:
        """Sauvegarde ou met à jour une chambre (upsert).

        Sans ID la chambre est insérée, avec un ID la ligne existante
        est remplacée (ou créée si l'ID est inconnu).
        """
        saved = db.session.merge(chambre)
        db.session.commit()
        return saved
