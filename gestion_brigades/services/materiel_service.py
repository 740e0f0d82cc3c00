"""Service du matériel et des demandes de matériel des brigades."""
import logging

from gestion_brigades.core.errors import NotFound
from gestion_brigades.core.roles import Role
from gestion_brigades.models import Row
from gestion_brigades.services.base import ResourceService
from gestion_brigades.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class MaterielService(ResourceService):
    depot = "materiels"
    libelle = "Matériel"

    async def demander(self, id_brigade: int, id_tache: int, materiels: list[dict]) -> Row:
        """Transmet au chef de section une demande de matériel pour une tâche de la brigade."""
        tache = await self.repos.taches.find_by_id(id_tache)
        if tache is None or tache.get("id_brigade") != id_brigade:
            raise NotFound("Tâche introuvable")
        lignes = "\n".join(f"- {m['nom']} (quantité: {m['quantite']})" for m in materiels)
        message = (
            f"Le chef de brigade demande des matériels pour la tâche "
            f"\"{tache['description']}\" ({id_tache}).\n\nMatériels demandés:\n{lignes}"
        )
        notification = await NotificationService(self.repos).creer_pour_role(
            Role.CHEF_SECTION,
            titre="Demande de matériel",
            message=message,
            payload={"id_tache": id_tache, "id_brigade": id_brigade, "materiels": materiels},
        )
        logger.info("Demande de matériel pour la tâche %s (brigade %s)", id_tache, id_brigade)
        return notification
