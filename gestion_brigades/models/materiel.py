"""Modèle Materiel (équipement et outillage)."""
from datetime import date

from sqlalchemy import BigInteger, Date, Identity, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class EtatMateriel:
    """Valeurs permises pour l'état d'un matériel."""
    DISPONIBLE = "disponible"
    UTILISE = "utilise"
    MAINTENANCE = "maintenance"


class Materiel(Base):
    __tablename__ = "materiels"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    nom: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    quantite: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    etat: Mapped[str] = mapped_column(
        Text, nullable=False, default="disponible", server_default=text("'disponible'")
    )
    date_maintenance: Mapped[date | None] = mapped_column(Date, nullable=True)
    responsable: Mapped[str | None] = mapped_column(Text, nullable=True)
