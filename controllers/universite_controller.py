"""Routes HTTP des universités (/universites)."""
import logging
from flask import Blueprint, jsonify, request
from models import db, Universite
from services.universite_service import UniversiteService


def create_universite_blueprint(universite_service: UniversiteService) -> Blueprint:
    bp = Blueprint('universites', __name__, url_prefix='/universites')

    @bp.route('', methods=['GET'])
    def get_all_universites():
        try:
            universites = universite_service.retrieve_all_universites()
            return jsonify([u.to_dict() for u in universites]), 200
        except Exception:
            logging.getLogger(__name__).exception('Failed to get universites')
            return jsonify({'error': 'Internal server error'}), 500

    @bp.route('', methods=['POST'])
    def add_universite():
        try:
            universite = Universite.from_dict(request.get_json(silent=True))
            saved = universite_service.add_universite(universite)
            return jsonify(saved.to_dict()), 200
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except Exception:
            db.session.rollback()
            logging.getLogger(__name__).exception('Failed to save universite')
            return jsonify({'error': 'Internal server error'}), 500

    @bp.route('/<int:universite_id>', methods=['GET'])
    def get_universite(universite_id):
        try:
            universite = universite_service.retrieve_universite(universite_id)
            if not universite:
                return jsonify({'error': 'Universite not found'}), 404
            return jsonify(universite.to_dict()), 200
        except Exception:
            logging.getLogger(__name__).exception('Failed to get universite')
            return jsonify({'error': 'Internal server error'}), 500

    return bp
