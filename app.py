"""Flask backend for the Foyer student-housing API.

Architecture:
- API Layer (controllers/): Routes HTTP, traduction JSON
- Service Layer (services/): Délégation, cascade bloc -> chambres
- Repository Layer (repositories/): Accès données
- Domain Layer (models): Entités Chambre, Universite, Bloc
"""
from flask import Flask
from flask_cors import CORS
from models import db
import os
import logging

# Import des services et repositories (DIP)
from services.chambre_service import ChambreService
from services.universite_service import UniversiteService
from services.bloc_service import BlocService
from repositories.chambre_repository import ChambreRepository
from repositories.universite_repository import UniversiteRepository
from repositories.bloc_repository import BlocRepository
from controllers import (
    create_chambre_blueprint,
    create_universite_blueprint,
    create_bloc_blueprint,
)

# Configure basic logging so INFO logs appear in the Flask console by default
logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logging.getLogger('werkzeug').setLevel(logging.INFO)


def create_app(config=None):
    """Build and configure the Flask application.

    Args:
        config: Mapping overriding the environment-based configuration
                (ex: TESTING, SQLALCHEMY_DATABASE_URI)

    Returns:
        Application Flask prête à servir, tables créées
    """
    app = Flask(__name__, static_folder=None)
    app.logger.setLevel(logging.INFO)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///foyer.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    if config:
        app.config.update(config)

    # Initialize extensions
    CORS(app)
    db.init_app(app)

    # -------------------- Service Layer Initialization (DIP) --------------------
    chambre_repository = ChambreRepository()
    universite_repository = UniversiteRepository()
    bloc_repository = BlocRepository()

    chambre_service = ChambreService(chambre_repository)
    universite_service = UniversiteService(universite_repository)
    bloc_service = BlocService(bloc_repository, chambre_repository)

    app.register_blueprint(create_chambre_blueprint(chambre_service))
    app.register_blueprint(create_universite_blueprint(universite_service))
    app.register_blueprint(create_bloc_blueprint(bloc_service))

    # Create tables
    with app.app_context():
        db.create_all()

    app.logger.info('Foyer API ready')
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 8089)), debug=True)
