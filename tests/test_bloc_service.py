from unittest.mock import MagicMock

import pytest

from models import Bloc, Chambre
from services.bloc_service import BlocService


@pytest.fixture
def bloc_repository():
    return MagicMock()


@pytest.fixture
def chambre_repository():
    return MagicMock()


@pytest.fixture
def bloc_service(bloc_repository, chambre_repository):
    return BlocService(bloc_repository, chambre_repository)


def test_add_or_update_saves_bloc_then_each_chambre(bloc_service, bloc_repository, chambre_repository):
    chambre = Chambre(numero_chambre='101', type_chambre='SIMPLE')
    bloc = Bloc(nom_bloc='Bloc A', chambres=[chambre])
    saved_bloc = Bloc(id=1, nom_bloc='Bloc A')
    bloc_repository.save.return_value = saved_bloc
    chambre_repository.save.side_effect = lambda c: c

    result = bloc_service.add_or_update(bloc)

    assert result.id is not None
    bloc_repository.save.assert_called_once_with(bloc)
    chambre_repository.save.assert_called_once_with(chambre)
    assert chambre.bloc_id == 1


def test_add_or_update_parent_saved_before_children(bloc_service, bloc_repository, chambre_repository):
    calls = []
    saved_bloc = Bloc(id=7, nom_bloc='Bloc B')

    def save_bloc(bloc):
        calls.append('bloc')
        return saved_bloc

    def save_chambre(chambre):
        calls.append(('chambre', chambre.bloc_id))
        return chambre

    bloc_repository.save.side_effect = save_bloc
    chambre_repository.save.side_effect = save_chambre
    bloc = Bloc(nom_bloc='Bloc B', chambres=[
        Chambre(numero_chambre='201', type_chambre='SIMPLE'),
        Chambre(numero_chambre='202', type_chambre='DOUBLE'),
    ])

    bloc_service.add_or_update(bloc)

    assert calls == ['bloc', ('chambre', 7), ('chambre', 7)]


def test_add_or_update_without_chambres(bloc_service, bloc_repository, chambre_repository):
    bloc_repository.save.return_value = Bloc(id=3, nom_bloc='Vide')

    result = bloc_service.add_or_update(Bloc(nom_bloc='Vide'))

    assert result.id == 3
    chambre_repository.save.assert_not_called()


def test_add_or_update_child_failure_propagates_after_parent_save(bloc_service, bloc_repository, chambre_repository):
    bloc_repository.save.return_value = Bloc(id=4, nom_bloc='Bloc C')
    chambre_repository.save.side_effect = RuntimeError('constraint violation')
    bloc = Bloc(nom_bloc='Bloc C', chambres=[Chambre(numero_chambre='301')])

    with pytest.raises(RuntimeError):
        bloc_service.add_or_update(bloc)

    bloc_repository.save.assert_called_once_with(bloc)


def test_retrieve_bloc_missing_returns_none(bloc_service, bloc_repository):
    bloc_repository.find_by_id.return_value = None

    assert bloc_service.retrieve_bloc(42) is None
