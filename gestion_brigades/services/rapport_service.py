"""Service des rapports d'avancement et de leur validation."""
import logging
from typing import Any

from gestion_brigades.core.errors import AppError, RetrievalError
from gestion_brigades.core.roles import Role
from gestion_brigades.models import Row, ValidationRapport
from gestion_brigades.services.base import ResourceService
from gestion_brigades.services.notification_service import NotificationService
from gestion_brigades.services.phase_service import regrouper_par_parent

logger = logging.getLogger(__name__)

LIBELLES_VALIDATION = {
    ValidationRapport.EN_ATTENTE: "remis en attente",
    ValidationRapport.A_REVISER: "à réviser",
    ValidationRapport.APPROUVE: "approuvé",
}


class RapportService(ResourceService):
    depot = "rapports"
    libelle = "Rapport"
    references = {"id_phase": "phases"}

    def preparer(self, data: dict[str, Any]) -> dict[str, Any]:
        # La validation ne passe jamais par la création ou la modification générale
        return {k: v for k, v in data.items() if k not in ("validation", "commentaire")}

    async def creer(self, data: dict[str, Any]) -> Row:
        data = {**self.preparer(data), "validation": ValidationRapport.EN_ATTENTE}
        await self.verifier_references(data)
        row = await self.repo.create(data)
        logger.info("Rapport créé (id=%s, phase=%s)", row["id"], row["id_phase"])
        return row

    async def valider(self, id: int, validation: str, commentaire: str | None = None) -> Row:
        """Change uniquement `validation` et `commentaire`, puis notifie la brigade."""
        await self.obtenir(id)
        row = await self.repo.update(id, {"validation": validation, "commentaire": commentaire})
        if row is None:
            raise self.introuvable()
        try:
            await NotificationService(self.repos).creer_pour_role(
                Role.CHEF_BRIGADE,
                titre="Validation de rapport",
                message=f"Votre rapport du {row['date_rapport']} a été {LIBELLES_VALIDATION[validation]}.",
                payload={"id_rapport": row["id"], "validation": validation},
            )
        except Exception:
            logger.warning("Impossible de notifier la validation du rapport %s", id, exc_info=True)
        return row

    async def lister_avec_employes(self) -> list[Row]:
        """Rapports avec leur phase, les tâches de la phase et les employés affectés.

        Chaque relation est lue en une requête groupée ; en cas d'échec de
        lecture, rien de partiel n'est renvoyé. Un employé affecté à plusieurs
        tâches de la phase n'apparaît qu'une fois.
        """
        try:
            rapports = await self.repo.find_all()
            id_phases = {r["id_phase"] for r in rapports}
            phases = await self.repos.phases.find_all_in("id", id_phases)
            taches = await self.repos.taches.find_all_in("id_phase", id_phases)
            affectations = await self.repos.affectations.find_all_in("id_tache", [t["id"] for t in taches])
            employes = await self.repos.employes.find_all_in("id", {a["id_employe"] for a in affectations})
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Échec de lecture des rapports avec employés")
            raise RetrievalError("Erreur lors de la récupération des rapports") from exc

        employes_par_id = {e["id"]: e for e in employes}
        taches = regrouper_par_parent(taches, affectations, "id_tache", "affectations")
        phases = regrouper_par_parent(phases, taches, "id_phase", "taches")
        phases_par_id = {p["id"]: p for p in phases}

        items = []
        for rapport in rapports:
            phase = phases_par_id.get(rapport["id_phase"])
            taches_phase = phase["taches"] if phase is not None else []
            vus: dict[int, Row] = {}
            for tache in taches_phase:
                for affectation in tache["affectations"]:
                    employe = employes_par_id.get(affectation["id_employe"])
                    if employe is not None and employe["id"] not in vus:
                        vus[employe["id"]] = {k: employe[k] for k in ("id", "nom", "prenom", "fonction")}
            items.append(
                {
                    **rapport,
                    "phase": {"id": phase["id"], "nom": phase["nom"]} if phase is not None else None,
                    "taches": [{"id": t["id"], "description": t["description"]} for t in taches_phase],
                    "employes": list(vus.values()),
                }
            )
        return items
