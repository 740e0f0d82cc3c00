"""Modèles SQLAlchemy (tables de la base de données) et couche de persistance."""
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_brigades.models.utilisateur import Utilisateur
from gestion_brigades.models.brigade import Brigade
from gestion_brigades.models.equipe import Equipe
from gestion_brigades.models.employe import Employe, DisponibiliteEmploye
from gestion_brigades.models.chef_brigade import ChefBrigade
from gestion_brigades.models.materiel import Materiel, EtatMateriel
from gestion_brigades.models.phase import Phase, StatutPhase
from gestion_brigades.models.tache import Tache, StatutTache
from gestion_brigades.models.affectation import AffectationEmploye
from gestion_brigades.models.rapport import Rapport, ValidationRapport
from gestion_brigades.models.absence import Absence, StatutAbsence, TypeAbsence
from gestion_brigades.models.notification import Notification
from gestion_brigades.models.repository import (
    Repositories,
    Repository,
    Row,
    SqlAlchemyRepository,
)


def build_repositories(db: AsyncSession) -> Repositories:
    """Repositories SQLAlchemy partageant la session de la requête."""
    return Repositories(
        utilisateurs=SqlAlchemyRepository(db, Utilisateur),
        brigades=SqlAlchemyRepository(db, Brigade, order_by=("nom_brigade", "id")),
        equipes=SqlAlchemyRepository(db, Equipe, order_by=("nom_equipe", "id")),
        employes=SqlAlchemyRepository(db, Employe, order_by=("nom", "prenom", "id")),
        chefs_brigade=SqlAlchemyRepository(db, ChefBrigade, order_by=("id_brigade",)),
        materiels=SqlAlchemyRepository(db, Materiel, order_by=("nom", "id")),
        phases=SqlAlchemyRepository(db, Phase, order_by=("date_debut", "id")),
        taches=SqlAlchemyRepository(db, Tache, order_by=("date_debut", "id")),
        affectations=SqlAlchemyRepository(
            db, AffectationEmploye, order_by=("date_debut_affectation", "id")
        ),
        rapports=SqlAlchemyRepository(db, Rapport, order_by=("-date_rapport", "-id")),
        absences=SqlAlchemyRepository(db, Absence, order_by=("-date_debut", "-id")),
        notifications=SqlAlchemyRepository(db, Notification, order_by=("-date_creation", "-id")),
    )


__all__ = [
    "Utilisateur",
    "Brigade",
    "Equipe",
    "Employe",
    "DisponibiliteEmploye",
    "ChefBrigade",
    "Materiel",
    "EtatMateriel",
    "Phase",
    "StatutPhase",
    "Tache",
    "StatutTache",
    "AffectationEmploye",
    "Rapport",
    "ValidationRapport",
    "Absence",
    "StatutAbsence",
    "TypeAbsence",
    "Notification",
    "Repositories",
    "Repository",
    "Row",
    "SqlAlchemyRepository",
    "build_repositories",
]
