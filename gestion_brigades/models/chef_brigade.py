"""Modèle ChefBrigade (nomination d'un employé à la tête d'une brigade)."""
from datetime import date

from sqlalchemy import BigInteger, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class ChefBrigade(Base):
    """Un employé dirige au plus une brigade."""

    __tablename__ = "chefs_brigade"

    id_employe: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("employes.id", ondelete="CASCADE"), primary_key=True
    )
    id_brigade: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("brigades.id", ondelete="CASCADE"), nullable=False
    )
    date_nomination: Mapped[date | None] = mapped_column(Date, nullable=True)
