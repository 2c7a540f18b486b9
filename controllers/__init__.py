"""API layer - blueprints Flask, un par entité.

Chaque fabrique reçoit le service déjà construit (injection explicite)
et se contente de traduire HTTP <-> appels de service.
"""
from controllers.chambre_controller import create_chambre_blueprint
from controllers.universite_controller import create_universite_blueprint
from controllers.bloc_controller import create_bloc_blueprint

__all__ = [
    'create_chambre_blueprint',
    'create_universite_blueprint',
    'create_bloc_blueprint',
]
