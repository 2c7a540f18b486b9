from unittest.mock import MagicMock

import pytest

from models import Chambre
from services.chambre_service import ChambreService


@pytest.fixture
def chambre_repository():
    return MagicMock()


@pytest.fixture
def chambre_service(chambre_repository):
    return ChambreService(chambre_repository)


@pytest.fixture
def chambre1():
    return Chambre(id=1, numero_chambre='101', type_chambre='SIMPLE')


@pytest.fixture
def chambre2():
    return Chambre(id=2, numero_chambre='102', type_chambre='DOUBLE')


def test_retrieve_all_chambres(chambre_service, chambre_repository, chambre1, chambre2):
    chambre_repository.find_all.return_value = [chambre1, chambre2]

    chambres = chambre_service.retrieve_all_chambres()

    assert len(chambres) == 2, "Should return 2 chambres"
    chambre_repository.find_all.assert_called_once_with()


def test_add_chambre(chambre_service, chambre_repository, chambre1):
    chambre_repository.save.return_value = chambre1

    saved = chambre_service.add_chambre(chambre1)

    assert saved is not None
    assert saved.numero_chambre == '101'
    chambre_repository.save.assert_called_once_with(chambre1)


def test_retrieve_chambre_found(chambre_service, chambre_repository, chambre1):
    chambre_repository.find_by_id.return_value = chambre1

    assert chambre_service.retrieve_chambre(1) is chambre1
    chambre_repository.find_by_id.assert_called_once_with(1)


def test_retrieve_chambre_missing_returns_none(chambre_service, chambre_repository):
    chambre_repository.find_by_id.return_value = None

    assert chambre_service.retrieve_chambre(999) is None
