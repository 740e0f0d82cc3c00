"""Schémas des affectations d'employés aux tâches."""
from datetime import date

from pydantic import BaseModel, Field, model_validator

from gestion_brigades.schemas.base import CreateBody, PartialUpdate


class AffectationCreate(CreateBody):
    role: str = Field(min_length=1, description="Rôle de l'employé sur la tâche")
    date_debut_affectation: date
    date_fin_affectation: date | None = Field(default=None, description="Absente tant que l'affectation est en cours")
    id_tache: int
    id_employe: int

    @model_validator(mode="after")
    def dates_coherentes(self):
        if self.date_fin_affectation is not None and self.date_fin_affectation < self.date_debut_affectation:
            raise ValueError("date_fin_affectation doit être postérieure ou égale à date_debut_affectation")
        return self


class AffectationUpdate(PartialUpdate):
    champs_obligatoires = ("role", "date_debut_affectation", "id_tache", "id_employe")

    role: str | None = Field(default=None, min_length=1)
    date_debut_affectation: date | None = None
    date_fin_affectation: date | None = None
    id_tache: int | None = None
    id_employe: int | None = None


class AffectationItem(BaseModel):
    id: int
    role: str
    date_debut_affectation: date
    date_fin_affectation: date | None = None
    id_tache: int
    id_employe: int
