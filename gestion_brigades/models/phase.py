"""Modèle Phase (étape planifiée regroupant des tâches)."""
from datetime import date

from sqlalchemy import BigInteger, Date, Identity, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class StatutPhase:
    """Valeurs permises pour le statut d'une phase."""
    EN_ATTENTE = "en_attente"
    EN_COURS = "en_cours"
    TERMINE = "termine"


class Phase(Base):
    __tablename__ = "phases"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    nom: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duree_prevue: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    date_debut: Mapped[date] = mapped_column(Date, nullable=False)
    date_fin: Mapped[date] = mapped_column(Date, nullable=False)
    statut: Mapped[str] = mapped_column(
        Text, nullable=False, default="en_attente", server_default=text("'en_attente'")
    )
