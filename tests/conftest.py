# tests/conftest.py

"""
Pytest configuration and shared fixtures.

The application runs against in-memory repositories (the `get_repositories`
dependency is overridden) and a real InMemorySessionStore, so no database is
needed. The TestClient is used without its context manager: the lifespan
(table creation, session purge task) does not run.
"""

import os

os.environ.setdefault("CREATE_TABLES", "false")
os.environ.setdefault("SESSION_PURGE_INTERVAL_SECONDS", "0")

import copy
import itertools
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Iterable

import pytest
from fastapi.testclient import TestClient

from gestion_brigades.api.deps import get_repositories
from gestion_brigades.core.roles import Role
from gestion_brigades.core.security import hash_password
from gestion_brigades.core.sessions import InMemorySessionStore
from gestion_brigades.main import create_app
from gestion_brigades.models import Repositories, Repository, Row

PASSWORD = "secret123"
PASSWORD_HASH = hash_password(PASSWORD)
COOKIE = "session_token"


class InMemoryRepository(Repository):
    """Repository fake keeping rows in a dict; `fail = True` makes every call raise."""

    def __init__(
        self,
        pk: str = "id",
        order_by: Iterable[str] = (),
        defaults: Callable[[], Row] | None = None,
    ):
        self.pk = pk
        self.order_by = tuple(order_by)
        self.defaults = defaults
        self.rows: dict[Any, Row] = {}
        self.fail = False
        self._ids = itertools.count(1)

    def _check(self):
        if self.fail:
            raise RuntimeError("connection to server lost (password=hunter2)")

    def add(self, row: Row) -> Row:
        """Synchronous seeding helper."""
        row = dict(row)
        if self.pk == "id" and "id" not in row:
            row["id"] = next(self._ids)
        if self.defaults is not None:
            row = {**self.defaults(), **row}
        self.rows[row[self.pk]] = row
        return copy.deepcopy(row)

    def _sorted(self, rows: list[Row]) -> list[Row]:
        for key in reversed(self.order_by):
            rows = sorted(rows, key=lambda r: r.get(key))
        return [copy.deepcopy(r) for r in rows]

    async def find_all(self, **filters: Any) -> list[Row]:
        self._check()
        rows = [r for r in self.rows.values() if all(r.get(k) == v for k, v in filters.items())]
        return self._sorted(rows)

    async def find_all_in(self, field: str, values: Iterable[Any]) -> list[Row]:
        self._check()
        values = set(values)
        return self._sorted([r for r in self.rows.values() if r.get(field) in values])

    async def find_by_id(self, id: Any) -> Row | None:
        self._check()
        row = self.rows.get(id)
        return copy.deepcopy(row) if row is not None else None

    async def create(self, data: Row) -> Row:
        self._check()
        return self.add(data)

    async def update(self, id: Any, data: Row) -> Row | None:
        self._check()
        if id not in self.rows:
            return None
        self.rows[id].update(data)
        return copy.deepcopy(self.rows[id])

    async def delete(self, id: Any) -> bool:
        self._check()
        return self.rows.pop(id, None) is not None


def make_repositories() -> Repositories:
    clock = itertools.count()
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def notification_defaults() -> Row:
        return {"lue": False, "date_creation": base + timedelta(seconds=next(clock))}

    return Repositories(
        utilisateurs=InMemoryRepository(),
        brigades=InMemoryRepository(),
        equipes=InMemoryRepository(),
        employes=InMemoryRepository(defaults=lambda: {"disponibilite": "disponible", "password_hash": None}),
        chefs_brigade=InMemoryRepository(pk="id_employe", order_by=("id_brigade",)),
        materiels=InMemoryRepository(),
        phases=InMemoryRepository(order_by=("date_debut", "id")),
        taches=InMemoryRepository(order_by=("date_debut", "id")),
        affectations=InMemoryRepository(order_by=("date_debut_affectation", "id")),
        rapports=InMemoryRepository(),
        absences=InMemoryRepository(),
        notifications=InMemoryRepository(defaults=notification_defaults),
    )


@pytest.fixture
def repos() -> Repositories:
    """Repositories seeded with two brigades, their chiefs, phases and tasks.

    ids: brigades 1 (Nord) and 2 (Sud); equipes 1, 2 (Nord) and 3 (Sud);
    employes 1 (chief of Nord), 2 (chief of Sud), 3 (not a chief);
    phases 1 (taches 1 and 2 of Nord, tache 3 of Sud) and 2 (no tache);
    utilisateur 1 (chef_section).
    """
    r = make_repositories()
    r.utilisateurs.add(
        {"nom": "Claire Section", "email": "chef.section@brigades.local", "role": "chef_section",
         "password_hash": PASSWORD_HASH}
    )
    r.brigades.add({"nom_brigade": "Brigade Nord", "lieu": "Secteur nord"})
    r.brigades.add({"nom_brigade": "Brigade Sud", "lieu": "Secteur sud"})
    r.equipes.add({"nom_equipe": "Voirie", "specialite": "voirie", "id_brigade": 1})
    r.equipes.add({"nom_equipe": "Éclairage", "specialite": "électricité", "id_brigade": 1})
    r.equipes.add({"nom_equipe": "Espaces verts", "specialite": "élagage", "id_brigade": 2})
    r.employes.add(
        {"nom": "Martin", "prenom": "Paul", "fonction": "Chef de brigade", "contact": "0600000001",
         "password_hash": PASSWORD_HASH}
    )
    r.employes.add(
        {"nom": "Durand", "prenom": "Léa", "fonction": "Chef de brigade", "contact": "lea.durand@brigades.local",
         "password_hash": PASSWORD_HASH}
    )
    r.employes.add(
        {"nom": "Petit", "prenom": "Marc", "fonction": "Agent", "contact": "0600000003",
         "password_hash": PASSWORD_HASH}
    )
    r.chefs_brigade.add({"id_employe": 1, "id_brigade": 1, "date_nomination": date(2024, 1, 2)})
    r.chefs_brigade.add({"id_employe": 2, "id_brigade": 2, "date_nomination": date(2024, 1, 3)})
    r.phases.add(
        {"nom": "Préparation", "description": None, "duree_prevue": 10, "date_debut": date(2024, 3, 1),
         "date_fin": date(2024, 3, 10), "statut": "en_cours"}
    )
    r.phases.add(
        {"nom": "Finitions", "description": None, "duree_prevue": 5, "date_debut": date(2024, 4, 1),
         "date_fin": date(2024, 4, 5), "statut": "en_attente"}
    )
    r.taches.add(
        {"description": "Reboucher les nids-de-poule", "date_debut": date(2024, 3, 1),
         "date_fin": date(2024, 3, 3), "date_fin_reel": None, "statut": "en_cours",
         "id_brigade": 1, "id_equipe": 1, "id_phase": 1}
    )
    r.taches.add(
        {"description": "Remplacer les lampadaires", "date_debut": date(2024, 3, 4),
         "date_fin": date(2024, 3, 8), "date_fin_reel": None, "statut": "planifiee",
         "id_brigade": 1, "id_equipe": 2, "id_phase": 1}
    )
    r.taches.add(
        {"description": "Tailler les haies", "date_debut": date(2024, 3, 5),
         "date_fin": date(2024, 3, 6), "date_fin_reel": None, "statut": "planifiee",
         "id_brigade": 2, "id_equipe": 3, "id_phase": 1}
    )
    return r


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore(ttl_seconds=3600)


@pytest.fixture
def app(store, repos):
    """Application wired to the fake repositories and the test session store."""
    application = create_app(session_store=store)

    async def _repositories() -> Repositories:
        return repos

    application.dependency_overrides[get_repositories] = _repositories
    return application


@pytest.fixture
def client(app) -> TestClient:
    """Client without any session."""
    return TestClient(app)


def open_session(
    app, store, role: Role, subject_id: str, brigade_id: int | None = None, **client_options
) -> TestClient:
    """Client whose cookie holds a session created directly in the store."""
    test_client = TestClient(app, **client_options)
    token = store.create(subject_id, role, brigade_id=brigade_id)
    test_client.cookies.set(COOKIE, token)
    return test_client


@pytest.fixture
def section_client(app, store) -> TestClient:
    return open_session(app, store, Role.CHEF_SECTION, "1")


@pytest.fixture
def brigade_client(app, store) -> TestClient:
    """Chief of brigade 1 (Brigade Nord)."""
    return open_session(app, store, Role.CHEF_BRIGADE, "1", brigade_id=1)
