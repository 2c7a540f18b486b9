"""Routes HTTP des chambres (/chambres)."""
import logging
from flask import Blueprint, jsonify, request
from models import db, Chambre
from services.chambre_service import ChambreService


def create_chambre_blueprint(chambre_service: ChambreService) -> Blueprint:
    """Construit le blueprint /chambres autour du service fourni."""
    bp = Blueprint('chambres', __name__, url_prefix='/chambres')

    @bp.route('', methods=['GET'])
    def get_all_chambres():
        """List all chambres.

        API Layer: délégation au ChambreService.
        """
        try:
            chambres = chambre_service.retrieve_all_chambres()
            return jsonify([c.to_dict() for c in chambres]), 200
        except Exception:
            logging.getLogger(__name__).exception('Failed to get chambres')
            return jsonify({'error': 'Internal server error'}), 500

    @bp.route('', methods=['POST'])
    def add_chambre():
        """Create a chambre, or replace it when idChambre is given."""
        try:
            chambre = Chambre.from_dict(request.get_json(silent=True))
            saved = chambre_service.add_chambre(chambre)
            return jsonify(saved.to_dict()), 200
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except Exception:
            db.session.rollback()
            logging.getLogger(__name__).exception('Failed to save chambre')
            return jsonify({'error': 'Internal server error'}), 500

    @bp.route('/<int:chambre_id>', methods=['GET'])
    def get_chambre(chambre_id):
        try:
            chambre = chambre_service.retrieve_chambre(chambre_id)
            if not chambre:
                return jsonify({'error': 'Chambre not found'}), 404
            return jsonify(chambre.to_dict()), 200
        except Exception:
            logging.getLogger(__name__).exception('Failed to get chambre')
            return jsonify({'error': 'Internal server error'}), 500

    return bp
