"""Authentification des chefs de section et des chefs de brigade."""
import logging
from dataclasses import dataclass

from gestion_brigades.core.guard import Principal
from gestion_brigades.core.roles import Role
from gestion_brigades.core.security import verify_password
from gestion_brigades.models import Repositories, Row
from gestion_brigades.schemas.auth import AuthUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Authentification:
    utilisateur: AuthUser
    brigade_id: int | None = None


def _normaliser(identifiant: str) -> str:
    return identifiant.strip().lower()


class AuthService:
    def __init__(self, repos: Repositories):
        self.repos = repos

    async def authentifier(self, identifiant: str, mot_de_passe: str, role: Role) -> Authentification | None:
        """Renvoie l'identité si les identifiants sont valides pour ce rôle, sinon None."""
        if role == Role.CHEF_SECTION:
            resultat = await self._chef_section_par_email(_normaliser(identifiant))
        else:
            resultat = await self._chef_brigade_par_identifiant(identifiant.strip())
        if resultat is None:
            logger.info("Connexion refusée : identifiant inconnu (%s)", Role(role).value)
            return None
        auth, password_hash = resultat
        if not verify_password(mot_de_passe, password_hash):
            logger.info("Connexion refusée : mot de passe incorrect (%s)", Role(role).value)
            return None
        return auth

    async def utilisateur_de_session(self, principal: Principal) -> AuthUser | None:
        """Recharge l'utilisateur d'une session ; None s'il n'existe plus."""
        if principal.role == Role.CHEF_SECTION:
            if not principal.subject_id.isdigit():
                return None
            row = await self.repos.utilisateurs.find_by_id(int(principal.subject_id))
            if row is None or row["role"] != Role.CHEF_SECTION.value:
                return None
            return self._auth_section(row).utilisateur
        if not principal.subject_id.isdigit():
            return None
        resultat = await self._chef_brigade_par_employe(
            await self.repos.employes.find_by_id(int(principal.subject_id))
        )
        return resultat[0].utilisateur if resultat else None

    @staticmethod
    def _auth_section(row: Row) -> Authentification:
        return Authentification(
            utilisateur=AuthUser(
                id=str(row["id"]),
                nom=row["nom"],
                role=Role.CHEF_SECTION,
                email=row["email"],
            )
        )

    async def _chef_section_par_email(self, email: str) -> tuple[Authentification, str | None] | None:
        rows = await self.repos.utilisateurs.find_all(email=email)
        if not rows or rows[0]["role"] != Role.CHEF_SECTION.value:
            return None
        return self._auth_section(rows[0]), rows[0].get("password_hash")

    async def _chef_brigade_par_identifiant(self, identifiant: str) -> tuple[Authentification, str | None] | None:
        employe = None
        if identifiant.isdigit():
            employe = await self.repos.employes.find_by_id(int(identifiant))
        if employe is None:
            # Un contact téléphonique peut aussi être entièrement numérique
            rows = await self.repos.employes.find_all(contact=identifiant)
            if not rows:
                rows = [
                    e for e in await self.repos.employes.find_all()
                    if _normaliser(e["contact"]) == _normaliser(identifiant)
                ]
            employe = rows[0] if rows else None
        return await self._chef_brigade_par_employe(employe)

    async def _chef_brigade_par_employe(self, employe: Row | None) -> tuple[Authentification, str | None] | None:
        if employe is None:
            return None
        chef = await self.repos.chefs_brigade.find_by_id(employe["id"])
        if chef is None:
            return None
        brigade = await self.repos.brigades.find_by_id(chef["id_brigade"])
        if brigade is None:
            return None
        auth = Authentification(
            utilisateur=AuthUser(
                id=str(employe["id"]),
                nom=f"{employe['prenom']} {employe['nom']}".strip(),
                role=Role.CHEF_BRIGADE,
                contact=employe.get("contact"),
                id_brigade=brigade["id"],
                nom_brigade=brigade["nom_brigade"],
            ),
            brigade_id=brigade["id"],
        )
        return auth, employe.get("password_hash")
