"""Services des employés, des chefs de brigade et des absences."""
import logging
from typing import Any

from gestion_brigades.core.errors import ValidationError
from gestion_brigades.core.roles import Role
from gestion_brigades.core.security import hash_password
from gestion_brigades.models import Row
from gestion_brigades.services.base import ResourceService, verifier_dates

logger = logging.getLogger(__name__)


class EmployeService(ResourceService):
    depot = "employes"
    libelle = "Employé"

    def preparer(self, data: dict[str, Any]) -> dict[str, Any]:
        data = dict(data)
        mot_de_passe = data.pop("mot_de_passe", None)
        if mot_de_passe:
            data["password_hash"] = hash_password(mot_de_passe)
        return data

    async def supprimer(self, id: int) -> None:
        await super().supprimer(id)
        if self.session_store is not None:
            self.session_store.invalidate_subject(str(id), Role.CHEF_BRIGADE)


class ChefBrigadeService(ResourceService):
    """Nominations : un employé dirige au plus une brigade, une brigade a au plus un chef."""

    depot = "chefs_brigade"
    libelle = "Chef de brigade"
    references = {"id_employe": "employes", "id_brigade": "brigades"}

    async def lister(self) -> list[Row]:
        chefs = await self.repo.find_all()
        employes = {
            e["id"]: e for e in await self.repos.employes.find_all_in("id", [c["id_employe"] for c in chefs])
        }
        brigades = {
            b["id"]: b for b in await self.repos.brigades.find_all_in("id", [c["id_brigade"] for c in chefs])
        }
        items = []
        for chef in chefs:
            employe = employes.get(chef["id_employe"])
            brigade = brigades.get(chef["id_brigade"])
            if employe is None or brigade is None:
                continue
            items.append(
                {
                    "id_employe": employe["id"],
                    "nom": employe["nom"],
                    "prenom": employe["prenom"],
                    "fonction": employe["fonction"],
                    "contact": employe["contact"],
                    "date_nomination": chef.get("date_nomination"),
                    "id_brigade": brigade["id"],
                    "nom_brigade": brigade["nom_brigade"],
                }
            )
        return items

    async def obtenir(self, id_employe: int) -> Row:
        await super().obtenir(id_employe)
        for item in await self.lister():
            if item["id_employe"] == id_employe:
                return item
        raise self.introuvable()

    async def creer(self, data: dict[str, Any]) -> Row:
        await self.verifier_references(data)
        if await self.repo.find_by_id(data["id_employe"]) is not None:
            raise ValidationError(
                "Nomination impossible",
                champs=[{"champ": "id_employe", "message": "Cet employé dirige déjà une brigade"}],
            )
        if await self.repo.find_all(id_brigade=data["id_brigade"]):
            raise ValidationError(
                "Nomination impossible",
                champs=[{"champ": "id_brigade", "message": "Cette brigade a déjà un chef"}],
            )
        await self.repo.create(data)
        logger.info("Employé %s nommé chef de la brigade %s", data["id_employe"], data["id_brigade"])
        return await self.obtenir(data["id_employe"])

    async def supprimer(self, id_employe: int) -> None:
        await super().supprimer(id_employe)
        if self.session_store is not None:
            self.session_store.invalidate_subject(str(id_employe), Role.CHEF_BRIGADE)


class AbsenceService(ResourceService):
    depot = "absences"
    libelle = "Absence"
    references = {"id_employe": "employes"}

    async def verifier_coherence(self, data: dict[str, Any]) -> None:
        verifier_dates(data)


class AffectationService(ResourceService):
    """Affectations d'employés aux tâches ; sans date de fin, l'affectation est en cours."""

    depot = "affectations"
    libelle = "Affectation"
    references = {"id_tache": "taches", "id_employe": "employes"}

    async def verifier_coherence(self, data: dict[str, Any]) -> None:
        verifier_dates(data, debut="date_debut_affectation", fin="date_fin_affectation")
