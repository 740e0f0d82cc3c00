"""Schémas des rapports d'avancement."""
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from gestion_brigades.schemas.base import CreateBody, PartialUpdate

Validation = Literal["en_attente", "a_reviser", "approuve"]


class RapportCreate(CreateBody):
    """Nouveau rapport ; sa validation démarre toujours à en_attente."""

    description: str = Field(min_length=1)
    date_rapport: date
    photo_url: str | None = None
    avancement: int = Field(ge=0, le=100, description="Avancement en pourcentage")
    id_phase: int


class RapportUpdate(PartialUpdate):
    champs_obligatoires = ("description", "date_rapport", "avancement", "id_phase")

    description: str | None = Field(default=None, min_length=1)
    date_rapport: date | None = None
    photo_url: str | None = None
    avancement: int | None = Field(default=None, ge=0, le=100)
    id_phase: int | None = None


class RapportItem(BaseModel):
    id: int
    description: str
    date_rapport: date
    photo_url: str | None = None
    avancement: int
    id_phase: int
    validation: str
    commentaire: str | None = None


class RapportValidationRequest(CreateBody):
    validation: Validation
    commentaire: str | None = None


class PhaseResume(BaseModel):
    id: int
    nom: str


class TacheResume(BaseModel):
    id: int
    description: str


class EmployeResume(BaseModel):
    id: int
    nom: str
    prenom: str
    fonction: str


class RapportAvecEmployes(RapportItem):
    """Rapport avec sa phase, les tâches de la phase et les employés affectés à ces tâches."""

    phase: PhaseResume | None = None
    taches: list[TacheResume] = Field(default_factory=list)
    employes: list[EmployeResume] = Field(default_factory=list)
