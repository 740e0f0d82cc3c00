"""Schémas des phases et des tâches."""
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from gestion_brigades.schemas.base import CreateBody, PartialUpdate

StatutPhase = Literal["en_attente", "en_cours", "termine"]
StatutTache = Literal["planifiee", "en_cours", "terminee"]


class PhaseCreate(CreateBody):
    nom: str = Field(min_length=1)
    description: str | None = None
    duree_prevue: int = Field(ge=0, description="Durée prévue en jours")
    date_debut: date
    date_fin: date
    statut: StatutPhase = "en_attente"

    @model_validator(mode="after")
    def dates_coherentes(self):
        if self.date_fin < self.date_debut:
            raise ValueError("date_fin doit être postérieure ou égale à date_debut")
        return self


class PhaseUpdate(PartialUpdate):
    champs_obligatoires = ("nom", "duree_prevue", "date_debut", "date_fin", "statut")

    nom: str | None = Field(default=None, min_length=1)
    description: str | None = None
    duree_prevue: int | None = Field(default=None, ge=0)
    date_debut: date | None = None
    date_fin: date | None = None
    statut: StatutPhase | None = None


class PhaseItem(BaseModel):
    id: int
    nom: str
    description: str | None = None
    duree_prevue: int
    date_debut: date
    date_fin: date
    statut: str


class TacheCreate(CreateBody):
    description: str = Field(min_length=1)
    date_debut: date
    date_fin: date
    date_fin_reel: date | None = None
    statut: StatutTache = "planifiee"
    id_brigade: int | None = None
    id_equipe: int | None = None
    id_phase: int | None = None

    @model_validator(mode="after")
    def dates_coherentes(self):
        if self.date_fin < self.date_debut:
            raise ValueError("date_fin doit être postérieure ou égale à date_debut")
        return self


class TacheUpdate(PartialUpdate):
    champs_obligatoires = ("description", "date_debut", "date_fin", "statut")

    description: str | None = Field(default=None, min_length=1)
    date_debut: date | None = None
    date_fin: date | None = None
    date_fin_reel: date | None = None
    statut: StatutTache | None = None
    id_brigade: int | None = None
    id_equipe: int | None = None
    id_phase: int | None = None


class TacheItem(BaseModel):
    id: int
    description: str
    date_debut: date
    date_fin: date
    date_fin_reel: date | None = None
    statut: str
    id_brigade: int | None = None
    id_equipe: int | None = None
    id_phase: int | None = None


class PhaseAvecTaches(PhaseItem):
    """Phase accompagnée de la liste complète de ses tâches (éventuellement vide)."""

    taches: list[TacheItem] = Field(default_factory=list)
