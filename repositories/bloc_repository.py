"""Bloc Repository - Gestion de la persistence des blocs.

Responsabilité (SRP) : Accès aux données des blocs uniquement.
- Ne sauvegarde PAS les chambres du bloc (voir BlocService.add_or_update)
"""
from typing import Optional, List
from models import db, Bloc


class BlocRepository:
    """Repository pour la gestion de la persistence des blocs.

    Pattern: Repository Pattern
    SOLID: SRP (une seule responsabilité - accès données)
    """

    @staticmethod
    def find_all() -> List[Bloc]:
        """Récupère tous les blocs."""
        return Bloc.query.order_by(Bloc.id).all()

    @staticmethod
    def find_by_id(bloc_id: int) -> Optional[Bloc]:
        """Trouve un bloc par son ID."""
        return db.session.get(Bloc, bloc_id)

    @staticmethod
    def save(bloc: Bloc) -> Bloc:
        """Sauvegarde ou met à jour un bloc (upsert), sans ses chambres."""
        saved = db.session.merge(bloc)
        db.session.commit()
        return saved
