"""Universite Repository - Gestion de la persistence des universités."""
from typing import Optional, List
from models import db, Universite


class UniversiteRepository:
    """Repository pour la gestion de la persistence des universités.

    Pattern: Repository Pattern
    """

    @staticmethod
    def find_all() -> List[Universite]:
        """Récupère toutes les universités."""
        return Universite.query.order_by(Universite.id).all()

    @staticmethod
    def find_by_id(universite_id: int) -> Optional[Universite]:
        """Trouve une université par son ID."""
        return db.session.get(Universite, universite_id)

    @staticmethod
    def save(universite: Universite) -> Universite:
        """Sauvegarde ou met à jour une université (upsert)."""
        saved = db.session.merge(universite)
        db.session.commit()
        return saved
