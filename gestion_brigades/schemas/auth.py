"""Schémas d'authentification par session."""
from pydantic import BaseModel, Field

from gestion_brigades.core.roles import Role


class LoginRequest(BaseModel):
    """Corps de la connexion."""

    identifiant: str = Field(
        description="Email (chef de section) ou id / contact de l'employé (chef de brigade)",
        min_length=1,
        examples=["chef.section@brigades.local"],
    )
    mot_de_passe: str = Field(description="Mot de passe en clair", min_length=1)
    role: Role = Field(description="Rôle demandé : chef_section ou chef_brigade")


class AuthUser(BaseModel):
    """Utilisateur connecté tel que renvoyé au client."""

    id: str
    nom: str
    role: Role
    email: str | None = None
    contact: str | None = None
    id_brigade: int | None = None
    nom_brigade: str | None = None


class AuthUserResponse(BaseModel):
    utilisateur: AuthUser


class LogoutResponse(BaseModel):
    success: bool = True
