"""Schémas des employés et des chefs de brigade."""
from datetime import date
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field, StringConstraints, validate_email

from gestion_brigades.schemas.base import CreateBody, PartialUpdate

Disponibilite = Literal["disponible", "affecte", "absent"]


def normaliser_contact(value: str) -> str:
    """Un contact contenant un @ doit être un email valide (renvoyé normalisé)."""
    if "@" not in value:
        return value
    _, email = validate_email(value.strip())
    return email


Contact = Annotated[str, StringConstraints(min_length=1), AfterValidator(normaliser_contact)]


class EmployeCreate(CreateBody):
    nom: str = Field(min_length=1)
    prenom: str = Field(min_length=1)
    fonction: str = Field(min_length=1)
    contact: Contact = Field(description="Téléphone ou email")
    specialite: str | None = None
    disponibilite: Disponibilite = "disponible"
    mot_de_passe: str | None = Field(
        default=None,
        min_length=6,
        description="Mot de passe de connexion (requis pour un futur chef de brigade)",
    )


class EmployeUpdate(PartialUpdate):
    champs_obligatoires = ("nom", "prenom", "fonction", "contact", "disponibilite")

    nom: str | None = Field(default=None, min_length=1)
    prenom: str | None = Field(default=None, min_length=1)
    fonction: str | None = Field(default=None, min_length=1)
    contact: Contact | None = None
    specialite: str | None = None
    disponibilite: Disponibilite | None = None
    mot_de_passe: str | None = Field(default=None, min_length=6)


class EmployeItem(BaseModel):
    """Employé sans aucune donnée d'authentification."""

    id: int
    nom: str
    prenom: str
    fonction: str
    contact: str
    specialite: str | None = None
    disponibilite: str


class ChefBrigadeCreate(CreateBody):
    id_employe: int = Field(description="Employé nommé chef")
    id_brigade: int = Field(description="Brigade dirigée")
    date_nomination: date | None = None


class ChefBrigadeItem(BaseModel):
    id_employe: int
    nom: str
    prenom: str
    fonction: str
    contact: str | None = None
    date_nomination: date | None = None
    id_brigade: int
    nom_brigade: str
