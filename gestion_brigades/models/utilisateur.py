"""Modèle Utilisateur (comptes du personnel de section)."""
from sqlalchemy import BigInteger, Identity, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from gestion_brigades.core.database import Base


class Utilisateur(Base):
    """Compte de connexion par email (chef de section)."""

    __tablename__ = "utilisateurs"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=True), primary_key=True)
    nom: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    role: Mapped[str] = mapped_column(
        Text, nullable=False, default="chef_section", server_default=text("'chef_section'")
    )
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
