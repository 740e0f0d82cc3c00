"""Services des phases et des tâches, dont la liste agrégée phases + tâches."""
import logging
from typing import Any

from gestion_brigades.core.errors import AppError, RetrievalError
from gestion_brigades.core.roles import Role
from gestion_brigades.models import Row
from gestion_brigades.services.base import ResourceService, verifier_dates
from gestion_brigades.services.brigade_service import verifier_equipe_de_brigade
from gestion_brigades.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


def regrouper_par_parent(
    parents: list[Row], enfants: list[Row], cle: str, nom_liste: str
) -> list[Row]:
    """Annote chaque parent (dans l'ordre reçu) de la liste de ses enfants.

    Un parent sans enfant reçoit une liste vide ; aucun parent n'est omis.
    """
    par_parent: dict[Any, list[Row]] = {p["id"]: [] for p in parents}
    for enfant in enfants:
        liste = par_parent.get(enfant.get(cle))
        if liste is not None:
            liste.append(enfant)
    return [{**parent, nom_liste: par_parent[parent["id"]]} for parent in parents]


class PhaseService(ResourceService):
    depot = "phases"
    libelle = "Phase"

    async def verifier_coherence(self, data: dict[str, Any]) -> None:
        verifier_dates(data)

    async def lister_avec_taches(self, id_brigade: int | None = None) -> list[Row]:
        """Toutes les phases avec leurs tâches (celles de `id_brigade` si fourni).

        Lecture seule ; en cas d'échec de lecture, rien de partiel n'est renvoyé.
        """
        try:
            phases = await self.repo.find_all()
            taches = await self.repos.taches.find_all_in("id_phase", [p["id"] for p in phases])
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Échec de lecture des phases avec tâches")
            raise RetrievalError("Erreur lors de la récupération des phases") from exc
        if id_brigade is not None:
            taches = [t for t in taches if t.get("id_brigade") == id_brigade]
        return regrouper_par_parent(phases, taches, "id_phase", "taches")


class TacheService(ResourceService):
    depot = "taches"
    libelle = "Tâche"
    references = {"id_brigade": "brigades", "id_equipe": "equipes", "id_phase": "phases"}

    async def verifier_coherence(self, data: dict[str, Any]) -> None:
        verifier_dates(data)
        await verifier_equipe_de_brigade(self, data)

    async def creer(self, data: dict[str, Any]) -> Row:
        tache = await super().creer(data)
        try:
            await NotificationService(self.repos).creer_pour_role(
                Role.CHEF_BRIGADE,
                titre="Nouvelle tâche ajoutée",
                message=f"La tâche \"{tache['description']}\" a été planifiée par le chef de section.",
                payload={"id_tache": tache["id"], "id_brigade": tache.get("id_brigade")},
            )
        except Exception:
            # La tâche reste créée même si la notification échoue
            logger.warning("Impossible de notifier le chef de brigade (tâche %s)", tache["id"], exc_info=True)
        return tache

    async def lister_pour_brigade(self, id_brigade: int) -> list[Row]:
        rows = await self.repo.find_all(id_brigade=id_brigade)
        return [row for row in rows if row.get("id_brigade") == id_brigade]

    async def obtenir_pour_brigade(self, id: int, id_brigade: int) -> Row:
        row = await self.repo.find_by_id(id)
        if row is None or row.get("id_brigade") != id_brigade:
            raise self.introuvable()
        return row
