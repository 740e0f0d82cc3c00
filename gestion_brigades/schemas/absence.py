"""Schémas des absences."""
from datetime import date
from typing import Literal

from pydantic import BaseModel, model_validator

from gestion_brigades.schemas.base import CreateBody, PartialUpdate

TypeAbsence = Literal["conge", "maladie"]
StatutAbsence = Literal["planifie", "en_cours", "termine"]


class AbsenceCreate(CreateBody):
    id_employe: int
    date_debut: date
    date_fin: date | None = None
    type: TypeAbsence
    motif: str | None = None
    statut: StatutAbsence = "planifie"

    @model_validator(mode="after")
    def dates_coherentes(self):
        if self.date_fin is not None and self.date_fin < self.date_debut:
            raise ValueError("date_fin doit être postérieure ou égale à date_debut")
        return self


class AbsenceUpdate(PartialUpdate):
    champs_obligatoires = ("id_employe", "date_debut", "type", "statut")

    id_employe: int | None = None
    date_debut: date | None = None
    date_fin: date | None = None
    type: TypeAbsence | None = None
    motif: str | None = None
    statut: StatutAbsence | None = None


class AbsenceItem(BaseModel):
    id: int
    id_employe: int
    date_debut: date
    date_fin: date | None = None
    type: str
    motif: str | None = None
    statut: str
