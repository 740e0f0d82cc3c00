"""Contrôle d'accès : session + rôle, appliqué à toute requête non publique.

Le garde est installé comme middleware : aucune route ne peut être atteinte
sans passer par lui, quelle que soit la façon dont elle est déclarée. Seuls
les chemins de PUBLIC_PATHS en sont exemptés. Il s'exécute avant la lecture
du corps de la requête.
"""
import logging
from dataclasses import dataclass

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from gestion_brigades.core.errors import AppError, Forbidden, Unauthenticated, error_response
from gestion_brigades.core.roles import PUBLIC_PATHS, Role, RolePolicy
from gestion_brigades.core.sessions import SessionCookieCodec, SessionStore

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def chemin_applicatif(scope) -> str:
    """Chemin relatif à l'application, sans le root_path du déploiement.

    C'est le chemin sur lequel le routeur résout la route : le garde et la
    politique de rôles doivent raisonner sur le même.
    """
    path = scope["path"]
    root_path = scope.get("root_path", "")
    if not root_path or not path.startswith(root_path):
        return path
    reste = path[len(root_path):]
    if not reste:
        return "/"
    if reste.startswith("/"):
        return reste
    return path


@dataclass(frozen=True)
class Principal:
    """Appelant authentifié et autorisé, transmis aux contrôleurs."""

    subject_id: str
    role: Role
    brigade_id: int | None = None


class AccessGuard:
    """Résout la session d'une requête et applique la politique de rôles."""

    def __init__(self, store: SessionStore, codec: SessionCookieCodec, policy: RolePolicy):
        self.store = store
        self.codec = codec
        self.policy = policy

    @staticmethod
    def protects(path: str) -> bool:
        """Tout chemin est protégé sauf ceux déclarés publics."""
        return path.rstrip("/") not in PUBLIC_PATHS

    def check(self, request: Request) -> Principal:
        """Renvoie le Principal ou lève Unauthenticated / Forbidden."""
        try:
            token = self.codec.read(request)
            session = self.store.lookup(token) if token else None
        except Exception:
            # Toute ambiguïté sur la session vaut refus
            logger.exception("Échec de résolution de session")
            raise Unauthenticated()
        if session is None:
            raise Unauthenticated()

        path = chemin_applicatif(request.scope)
        if session.role not in self.policy.allowed_roles(path):
            raise Forbidden()
        return Principal(
            subject_id=session.subject_id,
            role=session.role,
            brigade_id=session.brigade_id,
        )


class AccessGuardMiddleware(BaseHTTPMiddleware):
    """Applique AccessGuard (pris dans app.state) à chaque requête protégée."""

    async def dispatch(self, request: Request, call_next):
        guard: AccessGuard = request.app.state.access_guard
        path = chemin_applicatif(request.scope)
        if guard.protects(path):
            try:
                request.state.principal = guard.check(request)
            except AppError as exc:
                logger.info("Accès refusé (%s) : %s %s", exc.status_code, request.method, path)
                return error_response(exc)
        return await call_next(request)


def get_principal(request: Request) -> Principal:
    """Dépendance : Principal posé par le garde pour la requête courante."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise Unauthenticated()
    return principal


def get_brigade_principal(request: Request) -> Principal:
    """Dépendance : Principal d'un chef de brigade rattaché à une brigade."""
    principal = get_principal(request)
    if principal.role != Role.CHEF_BRIGADE or principal.brigade_id is None:
        raise Forbidden("Aucune brigade associée à cette session")
    return principal


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_session_codec(request: Request) -> SessionCookieCodec:
    return request.app.state.session_codec
