"""Service des notifications adressées à un rôle."""
import logging
from typing import Any

from gestion_brigades.core.roles import Role
from gestion_brigades.models import Row
from gestion_brigades.services.base import ResourceService

logger = logging.getLogger(__name__)

LIMITE_NOTIFICATIONS = 50


class NotificationService(ResourceService):
    depot = "notifications"
    libelle = "Notification"

    async def lister_pour_role(self, role: Role, limite: int = LIMITE_NOTIFICATIONS) -> list[Row]:
        """Notifications du rôle, les plus récentes d'abord."""
        rows = await self.repo.find_all(cible_role=Role(role).value)
        rows.sort(key=lambda r: (r["date_creation"], r["id"]), reverse=True)
        return rows[:limite]

    async def creer_pour_role(
        self,
        role: Role,
        titre: str,
        message: str,
        payload: dict[str, Any] | None = None,
        cible_utilisateur: str | None = None,
    ) -> Row:
        row = await self.repo.create(
            {
                "titre": titre,
                "message": message,
                "cible_role": Role(role).value,
                "cible_utilisateur": cible_utilisateur,
                "payload": payload,
                "lue": False,
            }
        )
        logger.info("Notification %s envoyée à %s", row["id"], Role(role).value)
        return row

    async def marquer_comme_lue(self, id: int, role: Role) -> Row:
        """Passe `lue` à vrai, sans toucher aux autres champs ; idempotent."""
        row = await self.repo.find_by_id(id)
        if row is None or row["cible_role"] != Role(role).value:
            raise self.introuvable()
        if row["lue"]:
            return row
        updated = await self.repo.update(id, {"lue": True})
        if updated is None:
            raise self.introuvable()
        return updated
