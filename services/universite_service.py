"""Universite Service - accès métier aux universités."""
import logging
from typing import Optional, List
from models import Universite
from repositories.universite_repository import UniversiteRepository


class UniversiteService:
    """Service pour la gestion des universités (pure délégation)."""

    def __init__(self, universite_repository: UniversiteRepository = None):
        self.universite_repo = universite_repository or UniversiteRepository()
        self.logger = logging.getLogger(__name__)

    def retrieve_all_universites(self) -> List[Universite]:
        return self.universite_repo.find_all()

    def add_universite(self, universite: Universite) -> Universite:
        saved = self.universite_repo.save(universite)
        self.logger.info(f"Saved universite {saved.id}")
        return saved

    def retrieve_universite(self, universite_id: int) -> Optional[Universite]:
        """Récupère une université par son ID, ou None."""
        return self.universite_repo.find_by_id(universite_id)
