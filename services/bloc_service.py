"""Bloc Service - orchestration bloc / chambres.

Responsabilité (SRP) : sauvegarde d'un bloc avec ses chambres.
- Le bloc est sauvegardé AVANT ses chambres (elles référencent son ID)
- Chaque chambre est liée au bloc puis sauvegardée une seule fois
- PAS de transaction globale : si une chambre échoue, le bloc
  déjà sauvegardé reste en base, sans compensation
"""
import logging
from typing import Optional, List
from models import Bloc
from repositories.bloc_repository import BlocRepository
from repositories.chambre_repository import ChambreRepository


class BlocService:
    """Service pour la gestion des blocs.

    Pattern: Service Layer
    SOLID:
        - SRP (orchestration bloc/chambres uniquement)
        - DIP (dépend des repositories injectés)
    """

    def __init__(self, bloc_repository: BlocRepository = None,
                 chambre_repository: ChambreRepository = None):
        """Initialise le service avec dependency injection.

        Args:
            bloc_repository: Repository pour accès données blocs
            chambre_repository: Repository pour sauvegarder les chambres liées
        """
        self.bloc_repo = bloc_repository or BlocRepository()
        self.chambre_repo = chambre_repository or ChambreRepository()
        self.logger = logging.getLogger(__name__)

    def retrieve_all_blocs(self) -> List[Bloc]:
        return self.bloc_repo.find_all()

    def retrieve_bloc(self, bloc_id: int) -> Optional[Bloc]:
        """Récupère un bloc par son ID, ou None s'il n'existe pas."""
        return self.bloc_repo.find_by_id(bloc_id)

    def add_or_update(self, bloc: Bloc) -> Bloc:
        """Sauvegarde un bloc puis chacune de ses chambres.

        Args:
            bloc: Bloc à insérer (sans ID) ou mettre à jour (avec ID),
                  portant les chambres à lier

        Returns:
            Le bloc sauvegardé, ID renseigné
        """
        chambres = list(bloc.chambres)

        saved = self.bloc_repo.save(bloc)
        self.logger.info(f"Saved bloc {saved.id}, linking {len(chambres)} chambre(s)")

        for chambre in chambres:
            chambre.bloc_id = saved.id
            self.chambre_repo.save(chambre)

        return saved
