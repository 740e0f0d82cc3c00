"""Schémas des brigades et de leurs équipes."""
from pydantic import BaseModel, Field

from gestion_brigades.schemas.base import CreateBody, PartialUpdate


class BrigadeCreate(CreateBody):
    nom_brigade: str = Field(description="Nom de la brigade", min_length=1)
    lieu: str = Field(description="Lieu d'affectation", min_length=1)


class BrigadeUpdate(PartialUpdate):
    champs_obligatoires = ("nom_brigade", "lieu")

    nom_brigade: str | None = Field(default=None, min_length=1)
    lieu: str | None = Field(default=None, min_length=1)


class BrigadeItem(BaseModel):
    id: int
    nom_brigade: str
    lieu: str


class EquipeCreate(CreateBody):
    nom_equipe: str = Field(description="Nom de l'équipe", min_length=1)
    specialite: str = Field(description="Spécialité (électricité, voirie...)", min_length=1)
    id_brigade: int = Field(description="ID de la brigade propriétaire")


class EquipeUpdate(PartialUpdate):
    champs_obligatoires = ("nom_equipe", "specialite", "id_brigade")

    nom_equipe: str | None = Field(default=None, min_length=1)
    specialite: str | None = Field(default=None, min_length=1)
    id_brigade: int | None = None


class EquipeItem(BaseModel):
    id: int
    nom_equipe: str
    specialite: str
    id_brigade: int
