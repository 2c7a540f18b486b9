from unittest.mock import MagicMock

from models import Universite
from services.universite_service import UniversiteService


def test_add_and_retrieve_universite_delegate_to_repository():
    repository = MagicMock()
    universite = Universite(id=1, nom_universite='Esprit', adresse='Ariana')
    repository.save.return_value = universite
    repository.find_by_id.return_value = None
    repository.find_all.return_value = [universite]
    service = UniversiteService(repository)

    assert service.add_universite(universite) is universite
    assert service.retrieve_universite(5) is None
    assert service.retrieve_all_universites() == [universite]
    repository.save.assert_called_once_with(universite)
    repository.find_by_id.assert_called_once_with(5)
