"""Couche modèle : interface de persistance et implémentation SQLAlchemy.

Les services ne dépendent que de `Repository` ; les lignes circulent sous
forme de dictionnaires de colonnes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

Row = dict[str, Any]

# Plage des colonnes BIGINT des clés primaires et étrangères
BIGINT_MIN, BIGINT_MAX = -(2**63), 2**63 - 1


class Repository(ABC):
    """Opérations de persistance attendues pour chaque entité."""

    @abstractmethod
    async def find_all(self, **filters: Any) -> list[Row]:
        """Toutes les lignes dont les colonnes valent `filters` (égalité)."""

    @abstractmethod
    async def find_all_in(self, field: str, values: Iterable[Any]) -> list[Row]:
        """Lignes dont `field` appartient à `values` (requête de relation groupée)."""

    @abstractmethod
    async def find_by_id(self, id: Any) -> Row | None:
        ...

    @abstractmethod
    async def create(self, data: Row) -> Row:
        ...

    @abstractmethod
    async def update(self, id: Any, data: Row) -> Row | None:
        """Applique `data` ; renvoie la ligne modifiée ou None si absente."""

    @abstractmethod
    async def delete(self, id: Any) -> bool:
        ...


class SqlAlchemyRepository(Repository):
    """Repository générique sur un modèle déclaratif et une AsyncSession."""

    def __init__(self, db: AsyncSession, model: type, order_by: Iterable[str] = ("id",)):
        self.db = db
        self.model = model
        self.mapper = inspect(model)
        self.order_by = [
            getattr(model, name[1:]).desc() if name.startswith("-") else getattr(model, name)
            for name in order_by
        ]
        self.columns = {attr.key for attr in self.mapper.column_attrs}

    def _to_row(self, instance) -> Row:
        return {key: getattr(instance, key) for key in self.columns}

    def _column(self, name: str):
        if name not in self.columns:
            raise KeyError(f"Colonne inconnue pour {self.model.__name__}: {name}")
        return getattr(self.model, name)

    def _identity(self, id: Any):
        (pk,) = self.mapper.primary_key
        return pk.type.python_type(id)

    async def find_all(self, **filters: Any) -> list[Row]:
        q = select(self.model).order_by(*self.order_by)
        for name, value in filters.items():
            q = q.where(self._column(name) == value)
        result = await self.db.execute(q)
        return [self._to_row(obj) for obj in result.scalars().all()]

    async def find_all_in(self, field: str, values: Iterable[Any]) -> list[Row]:
        values = list(values)
        if not values:
            return []
        q = select(self.model).where(self._column(field).in_(values)).order_by(*self.order_by)
        result = await self.db.execute(q)
        return [self._to_row(obj) for obj in result.scalars().all()]

    async def _get(self, id: Any):
        identity = self._identity(id)
        if isinstance(identity, int) and not BIGINT_MIN <= identity <= BIGINT_MAX:
            # Aucune ligne ne peut porter cet id ; le pilote refuserait le paramètre
            return None
        return await self.db.get(self.model, identity)

    async def find_by_id(self, id: Any) -> Row | None:
        instance = await self._get(id)
        return self._to_row(instance) if instance is not None else None

    async def create(self, data: Row) -> Row:
        instance = self.model(**{k: v for k, v in data.items() if k in self.columns})
        # Savepoint : une insertion refusée laisse la transaction de la requête utilisable
        async with self.db.begin_nested():
            self.db.add(instance)
        await self.db.refresh(instance)
        return self._to_row(instance)

    async def update(self, id: Any, data: Row) -> Row | None:
        instance = await self._get(id)
        if instance is None:
            return None
        for key, value in data.items():
            if key in self.columns:
                setattr(instance, key, value)
        await self.db.flush()
        await self.db.refresh(instance)
        return self._to_row(instance)

    async def delete(self, id: Any) -> bool:
        instance = await self._get(id)
        if instance is None:
            return False
        await self.db.delete(instance)
        await self.db.flush()
        return True


@dataclass
class Repositories:
    """Un repository par entité, construit pour la durée d'une requête."""

    utilisateurs: Repository
    brigades: Repository
    equipes: Repository
    employes: Repository
    chefs_brigade: Repository
    materiels: Repository
    phases: Repository
    taches: Repository
    affectations: Repository
    rapports: Repository
    absences: Repository
    notifications: Repository
