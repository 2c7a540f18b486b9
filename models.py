"""Database models for the Foyer backend (chambres, universités, blocs)."""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def _require_mapping(data, entity_name):
    if not isinstance(data, dict):
        raise ValueError(f"{entity_name} payload must be a JSON object")


class Chambre(db.Model):
    """Chambre d'un foyer universitaire.

    Le numéro de chambre est toujours stocké sous forme de chaîne :
    une valeur numérique reçue en JSON est convertie avec str().
    """
    __tablename__ = 'chambres'

    id = db.Column(db.Integer, primary_key=True)
    numero_chambre = db.Column(db.String(50))
    type_chambre = db.Column(db.String(50))
    bloc_id = db.Column(db.Integer, db.ForeignKey('blocs.id'), nullable=True, index=True)

    @classmethod
    def from_dict(cls, data):
        """Build a transient Chambre from a JSON body."""
        _require_mapping(data, 'Chambre')
        numero = data.get('numeroChambre')
        return cls(
            id=data.get('idChambre'),
            numero_chambre=str(numero) if numero is not None else None,
            type_chambre=data.get('typeChambre')
        )

    def to_dict(self):
        return {
            'idChambre': self.id,
            'numeroChambre': self.numero_chambre,
            'typeChambre': self.type_chambre
        }


class Universite(db.Model):
    """Université, sans relation avec les autres entités."""
    __tablename__ = 'universites'

    id = db.Column(db.Integer, primary_key=True)
    nom_universite = db.Column(db.String(255))
    adresse = db.Column(db.String(255))

    @classmethod
    def from_dict(cls, data):
        _require_mapping(data, 'Universite')
        return cls(
            id=data.get('idUniversite'),
            nom_universite=data.get('nomUniversite'),
            adresse=data.get('adresse')
        )

    def to_dict(self):
        return {
            'idUniversite': self.id,
            'nomUniversite': self.nom_universite,
            'adresse': self.adresse
        }


class Bloc(db.Model):
    """Bloc d'hébergement regroupant des chambres.

    IMPORTANT: la relation 'chambres' n'a pas la cascade 'merge'.
    Sauvegarder un bloc n'écrit jamais ses chambres : c'est BlocService
    qui les lie (bloc_id) et les sauvegarde une à une après le bloc.
    """
    __tablename__ = 'blocs'

    id = db.Column(db.Integer, primary_key=True)
    nom_bloc = db.Column(db.String(255))

    # Relationships
    chambres = db.relationship('Chambre', lazy=True, cascade='save-update',
                               order_by='Chambre.id')

    @classmethod
    def from_dict(cls, data):
        """Build a transient Bloc (and its chambres) from a JSON body."""
        _require_mapping(data, 'Bloc')
        raw_chambres = data.get('chambres')
        if raw_chambres is None:
            raw_chambres = []
        elif not isinstance(raw_chambres, list):
            raise ValueError("Bloc 'chambres' must be a JSON array")
        return cls(
            id=data.get('idBloc'),
            nom_bloc=data.get('nomBloc'),
            chambres=[Chambre.from_dict(item) for item in raw_chambres]
        )

    def to_dict(self):
        return {
            'idBloc': self.id,
            'nomBloc': self.nom_bloc,
            'chambres': [chambre.to_dict() for chambre in self.chambres]
        }
