"""Service générique : CRUD au-dessus d'un Repository, avec contrôle des références."""
import logging
from typing import Any, ClassVar

from gestion_brigades.core.errors import NotFound, ValidationError
from gestion_brigades.core.sessions import SessionStore
from gestion_brigades.models import Repositories, Repository, Row

logger = logging.getLogger(__name__)


class ResourceService:
    """Opérations lister / obtenir / créer / modifier / supprimer d'une ressource.

    Les sous-classes déclarent le repository utilisé (`depot`), le libellé des
    messages (`libelle`) et les clés étrangères à vérifier (`references`,
    champ -> nom du repository cible). Toutes les vérifications ont lieu avant
    la moindre écriture.
    """

    depot: ClassVar[str]
    libelle: ClassVar[str] = "Ressource"
    references: ClassVar[dict[str, str]] = {}

    def __init__(self, repos: Repositories, session_store: SessionStore | None = None):
        self.repos = repos
        self.session_store = session_store

    @property
    def repo(self) -> Repository:
        return getattr(self.repos, self.depot)

    def introuvable(self) -> NotFound:
        return NotFound(f"{self.libelle} introuvable")

    async def verifier_references(self, data: dict[str, Any]) -> None:
        """Lève ValidationError (détail par champ) si une référence n'existe pas."""
        champs = []
        for champ, depot in self.references.items():
            valeur = data.get(champ)
            if valeur is None:
                continue
            if await getattr(self.repos, depot).find_by_id(valeur) is None:
                champs.append({"champ": champ, "message": f"Aucun enregistrement avec l'id {valeur}"})
        if champs:
            raise ValidationError("Référence invalide", champs=champs)

    async def verifier_coherence(self, data: dict[str, Any]) -> None:
        """Règles portant sur plusieurs champs d'une ligne complète.

        En modification, `data` est la ligne stockée après application des
        changements : une règle ne peut pas être contournée par un envoi partiel.
        """

    def preparer(self, data: dict[str, Any]) -> dict[str, Any]:
        """Transforme le corps validé en colonnes persistées."""
        return data

    async def lister(self, **filtres: Any) -> list[Row]:
        return await self.repo.find_all(**filtres)

    async def obtenir(self, id: Any) -> Row:
        row = await self.repo.find_by_id(id)
        if row is None:
            raise self.introuvable()
        return row

    async def creer(self, data: dict[str, Any]) -> Row:
        await self.verifier_references(data)
        await self.verifier_coherence(data)
        row = await self.repo.create(self.preparer(data))
        logger.info("%s créé(e) (id=%s)", self.libelle, row.get("id"))
        return row

    async def modifier(self, id: Any, changes: dict[str, Any]) -> Row:
        existant = await self.obtenir(id)
        await self.verifier_references(changes)
        await self.verifier_coherence({**existant, **changes})
        row = await self.repo.update(id, self.preparer(changes))
        if row is None:
            raise self.introuvable()
        return row

    async def supprimer(self, id: Any) -> None:
        if not await self.repo.delete(id):
            raise self.introuvable()
        logger.info("%s supprimé(e) (id=%s)", self.libelle, id)


def verifier_dates(data: dict[str, Any], debut: str = "date_debut", fin: str = "date_fin") -> None:
    """La fin, si elle est connue, ne précède pas le début."""
    date_debut, date_fin = data.get(debut), data.get(fin)
    if date_debut is not None and date_fin is not None and date_fin < date_debut:
        raise ValidationError(
            "Données invalides",
            champs=[{"champ": fin, "message": f"{fin} doit être postérieure ou égale à {debut}"}],
        )
