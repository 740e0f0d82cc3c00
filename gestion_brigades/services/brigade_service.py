"""Services des brigades et des équipes."""
from gestion_brigades.core.errors import NotFound, ValidationError
from gestion_brigades.models import Row
from gestion_brigades.services.base import ResourceService


class BrigadeService(ResourceService):
    depot = "brigades"
    libelle = "Brigade"

    async def lister_equipes(self, id_brigade: int) -> list[Row]:
        """Équipes de la brigade, et uniquement celles-ci."""
        await self.obtenir(id_brigade)
        rows = await self.repos.equipes.find_all(id_brigade=id_brigade)
        # Le filtre est réappliqué ici : seules les lignes de ce parent sortent
        return [row for row in rows if row["id_brigade"] == id_brigade]


class EquipeService(ResourceService):
    depot = "equipes"
    libelle = "Équipe"
    references = {"id_brigade": "brigades"}


async def verifier_equipe_de_brigade(service: ResourceService, data: dict) -> None:
    """Une équipe désignée doit appartenir à la brigade désignée."""
    id_equipe = data.get("id_equipe")
    id_brigade = data.get("id_brigade")
    if id_equipe is None or id_brigade is None:
        return
    equipe = await service.repos.equipes.find_by_id(id_equipe)
    if equipe is None:
        raise NotFound("Équipe introuvable")
    if equipe["id_brigade"] != id_brigade:
        raise ValidationError(
            "Référence invalide",
            champs=[{"champ": "id_equipe", "message": "L'équipe n'appartient pas à cette brigade"}],
        )
