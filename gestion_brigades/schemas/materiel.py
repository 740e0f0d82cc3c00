"""Schémas du matériel et des demandes de matériel."""
from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from gestion_brigades.schemas.base import CreateBody, PartialUpdate

Etat = Literal["disponible", "utilise", "maintenance"]


class MaterielCreate(CreateBody):
    nom: str = Field(min_length=1)
    type: str = Field(min_length=1)
    quantite: int = Field(ge=0)
    etat: Etat = "disponible"
    date_maintenance: date | None = None
    responsable: str | None = None


class MaterielUpdate(PartialUpdate):
    champs_obligatoires = ("nom", "type", "quantite", "etat")

    nom: str | None = Field(default=None, min_length=1)
    type: str | None = Field(default=None, min_length=1)
    quantite: int | None = Field(default=None, ge=0)
    etat: Etat | None = None
    date_maintenance: date | None = None
    responsable: str | None = None


class MaterielItem(BaseModel):
    id: int
    nom: str
    type: str
    quantite: int
    etat: str
    date_maintenance: date | None = None
    responsable: str | None = None


class LigneDemande(BaseModel):
    nom: str = Field(min_length=1, description="Nom du matériel demandé")
    quantite: int = Field(gt=0)


class DemandeMaterielRequest(CreateBody):
    """Demande de matériel d'un chef de brigade pour une de ses tâches."""

    id_tache: int
    materiels: list[LigneDemande] = Field(min_length=1)


class DemandeMaterielResponse(BaseModel):
    success: bool = True
    id_notification: int
