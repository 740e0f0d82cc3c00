"""Modèle Brigade (équipe d'intervention sur le terrain)."""
from sqlalchemy import BigInteger, Identity, Text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class Brigade(Base):
    """Brigade : nom et lieu d'affectation ; ses équipes référencent `id`."""

    __tablename__ = "brigades"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    nom_brigade: Mapped[str] = mapped_column(Text, nullable=False)
    lieu: Mapped[str] = mapped_column(Text, nullable=False)
