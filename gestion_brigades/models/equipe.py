"""Modèle Equipe (sous-groupe spécialisé d'une brigade)."""
from sqlalchemy import BigInteger, ForeignKey, Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class Equipe(Base):
    __tablename__ = "equipes"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    nom_equipe: Mapped[str] = mapped_column(Text, nullable=False)
    specialite: Mapped[str] = mapped_column(Text, nullable=False)
    id_brigade: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("brigades.id", ondelete="CASCADE"), nullable=False, index=True
    )
