"""Modèle Tache (travail planifié, confié à une brigade et éventuellement une équipe)."""
from datetime import date

from sqlalchemy import BigInteger, Date, ForeignKey, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class StatutTache:
    """Valeurs permises pour le statut d'une tâche."""
    PLANIFIEE = "planifiee"
    EN_COURS = "en_cours"
    TERMINEE = "terminee"


class Tache(Base):
    __tablename__ = "taches"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date_debut: Mapped[date] = mapped_column(Date, nullable=False)
    date_fin: Mapped[date] = mapped_column(Date, nullable=False)
    date_fin_reel: Mapped[date | None] = mapped_column(Date, nullable=True)
    statut: Mapped[str] = mapped_column(
        Text, nullable=False, default="planifiee", server_default=text("'planifiee'")
    )
    id_brigade: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("brigades.id", ondelete="SET NULL"), nullable=True, index=True
    )
    id_equipe: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("equipes.id", ondelete="SET NULL"), nullable=True
    )
    id_phase: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("phases.id", ondelete="SET NULL"), nullable=True, index=True
    )
