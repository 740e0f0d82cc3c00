"""Rôles applicatifs et table de politique route -> rôles autorisés."""
from enum import Enum
from typing import Iterable, Mapping


class Role(str, Enum):
    """Rôles connus. Ajouter un rôle = ajouter un membre et ses entrées de politique."""

    CHEF_SECTION = "chef_section"
    CHEF_BRIGADE = "chef_brigade"


class RolePolicy:
    """Table statique préfixe de route -> ensemble de rôles autorisés.

    La recherche retient le préfixe le plus long (sur une frontière de segment).
    Une route sans entrée déclarée renvoie un ensemble vide : interdite à tous.
    """

    def __init__(self, entries: Mapping[str, Iterable[Role]]):
        table: dict[str, frozenset[Role]] = {}
        for prefix, roles in entries.items():
            allowed = frozenset(roles)
            if not allowed:
                raise ValueError(f"La route '{prefix}' doit déclarer au moins un rôle")
            table[prefix.rstrip("/") or "/"] = allowed
        self._table = table

    @staticmethod
    def _matches(path: str, prefix: str) -> bool:
        return path == prefix or path.startswith(prefix + "/")

    def allowed_roles(self, path: str) -> frozenset[Role]:
        path = path.rstrip("/") or "/"
        matching = [p for p in self._table if self._matches(path, p)]
        if not matching:
            return frozenset()
        return self._table[max(matching, key=len)]

    def is_allowed(self, path: str, role: Role) -> bool:
        return role in self.allowed_roles(path)


SECTION_PREFIX = "/api/section"
BRIGADE_PREFIX = "/api/brigade"
SESSION_PATH = "/api/auth/session"

# Seules routes accessibles sans session ; toute autre route est contrôlée
PUBLIC_PATHS = frozenset(
    {
        "/api/auth/login",
        "/api/auth/logout",
        "/health",
        "/docs",
        "/docs/oauth2-redirect",
        "/redoc",
        "/openapi.json",
    }
)

ROLE_POLICY = RolePolicy(
    {
        SECTION_PREFIX: {Role.CHEF_SECTION},
        BRIGADE_PREFIX: {Role.CHEF_BRIGADE},
        SESSION_PATH: {Role.CHEF_SECTION, Role.CHEF_BRIGADE},
    }
)
