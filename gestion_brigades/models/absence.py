"""Modèle Absence (congé ou arrêt maladie d'un employé)."""
from datetime import date

from sqlalchemy import BigInteger, Date, ForeignKey, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class TypeAbsence:
    CONGE = "conge"
    MALADIE = "maladie"


class StatutAbsence:
    PLANIFIE = "planifie"
    EN_COURS = "en_cours"
    TERMINE = "termine"


class Absence(Base):
    __tablename__ = "absences"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    id_employe: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("employes.id", ondelete="CASCADE"), nullable=False
    )
    date_debut: Mapped[date] = mapped_column(Date, nullable=False)
    date_fin: Mapped[date | None] = mapped_column(Date, nullable=True)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    motif: Mapped[str | None] = mapped_column(Text, nullable=True)
    statut: Mapped[str] = mapped_column(
        Text, nullable=False, default="planifie", server_default=text("'planifie'")
    )
