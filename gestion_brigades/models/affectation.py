"""Modèle AffectationEmploye (employé affecté à une tâche sur une période)."""
from datetime import date

from sqlalchemy import BigInteger, Date, ForeignKey, Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class AffectationEmploye(Base):
    """Une affectation sans date de fin est en cours."""

    __tablename__ = "affectations_employes"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    date_debut_affectation: Mapped[date] = mapped_column(Date, nullable=False)
    date_fin_affectation: Mapped[date | None] = mapped_column(Date, nullable=True)
    id_tache: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("taches.id", ondelete="CASCADE"), nullable=False, index=True
    )
    id_employe: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("employes.id", ondelete="CASCADE"), nullable=False, index=True
    )
