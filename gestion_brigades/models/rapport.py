"""Modèle Rapport (compte rendu d'avancement d'une phase)."""
from datetime import date

from sqlalchemy import BigInteger, Date, ForeignKey, Identity, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class ValidationRapport:
    """Valeurs permises pour la validation d'un rapport."""
    EN_ATTENTE = "en_attente"
    A_REVISER = "a_reviser"
    APPROUVE = "approuve"


class Rapport(Base):
    __tablename__ = "rapports"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date_rapport: Mapped[date] = mapped_column(Date, nullable=False)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    avancement: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    id_phase: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("phases.id", ondelete="CASCADE"), nullable=False
    )
    validation: Mapped[str] = mapped_column(
        Text, nullable=False, default="en_attente", server_default=text("'en_attente'")
    )
    commentaire: Mapped[str | None] = mapped_column(Text, nullable=True)
