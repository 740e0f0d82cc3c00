"""Modèle Employe (agent de terrain)."""
from sqlalchemy import BigInteger, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class DisponibiliteEmploye:
    """Valeurs permises pour la disponibilité d'un employé."""
    DISPONIBLE = "disponible"
    AFFECTE = "affecte"
    ABSENT = "absent"


class Employe(Base):
    """Employé ; un chef de brigade se connecte avec son id ou son contact."""

    __tablename__ = "employes"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    nom: Mapped[str] = mapped_column(Text, nullable=False)
    prenom: Mapped[str] = mapped_column(Text, nullable=False)
    fonction: Mapped[str] = mapped_column(Text, nullable=False)
    contact: Mapped[str] = mapped_column(Text, nullable=False)
    specialite: Mapped[str | None] = mapped_column(Text, nullable=True)
    disponibilite: Mapped[str] = mapped_column(
        Text, nullable=False, default="disponible", server_default=text("'disponible'")
    )
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
