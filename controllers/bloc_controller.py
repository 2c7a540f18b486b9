"""Routes HTTP des blocs (/blocs)."""
import logging
from flask import Blueprint, jsonify, request
from models import db, Bloc
from services.bloc_service import BlocService


def create_bloc_blueprint(bloc_service: BlocService) -> Blueprint:
    """Construit le blueprint /blocs autour du service fourni."""
    bp = Blueprint('blocs', __name__, url_prefix='/blocs')

    @bp.route('', methods=['GET'])
    def get_all_blocs():
        try:
            blocs = bloc_service.retrieve_all_blocs()
            return jsonify([b.to_dict() for b in blocs]), 200
        except Exception:
            logging.getLogger(__name__).exception('Failed to get blocs')
            return jsonify({'error': 'Internal server error'}), 500

    @bp.route('', methods=['POST'])
    def add_or_update_bloc():
        """Save a bloc, then link and save each of its chambres.

        API Layer: délégation au BlocService (cascade non atomique).
        """
        try:
            bloc = Bloc.from_dict(request.get_json(silent=True))
            saved = bloc_service.add_or_update(bloc)
            return jsonify(saved.to_dict()), 200
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except Exception:
            db.session.rollback()
            logging.getLogger(__name__).exception('Failed to save bloc')
            return jsonify({'error': 'Internal server error'}), 500

    @bp.route('/<int:bloc_id>', methods=['GET'])
    def get_bloc(bloc_id):
        try:
            bloc = bloc_service.retrieve_bloc(bloc_id)
            if not bloc:
                return jsonify({'error': 'Bloc not found'}), 404
            return jsonify(bloc.to_dict()), 200
        except Exception:
            logging.getLogger(__name__).exception('Failed to get bloc')
            return jsonify({'error': 'Internal server error'}), 500

    return bp
