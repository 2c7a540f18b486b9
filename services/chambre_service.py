"""Chambre Service - accès métier aux chambres.

Simple délégation au ChambreRepository : aucune validation, aucune
règle métier. Une chambre introuvable n'est pas une erreur.
"""
import logging
from typing import Optional, List
from models import Chambre
from repositories.chambre_repository import ChambreRepository


class ChambreService:
    """Service pour la gestion des chambres.

    Pattern: Service Layer
    SOLID: DIP (dépend du repository injecté)
    """

    def __init__(self, chambre_repository: ChambreRepository = None):
        """Initialise le service avec dependency injection.

        Args:
            chambre_repository: Repository pour accès données chambres
        """
        self.chambre_repo = chambre_repository or ChambreRepository()
        self.logger = logging.getLogger(__name__)

    def retrieve_all_chambres(self) -> List[Chambre]:
        return self.chambre_repo.find_all()

    def add_chambre(self, chambre: Chambre) -> Chambre:
        """Insère ou met à jour une chambre.

        Returns:
            La chambre persistée, ID renseigné
        """
        saved = self.chambre_repo.save(chambre)
        self.logger.info(f"Saved chambre {saved.id}")
        return saved

    def retrieve_chambre(self, chambre_id: int) -> Optional[Chambre]:
        """Récupère une chambre par son ID, ou None si elle n'existe pas."""
        return self.chambre_repo.find_by_id(chambre_id)
