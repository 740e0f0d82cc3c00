# tests/test_repository.py

"""
Tests for SqlAlchemyRepository behaviour that does not need a database.
"""

import asyncio

from gestion_brigades.models import Brigade, SqlAlchemyRepository


class RecordingSession:
    """Stands in for AsyncSession: records the primary keys passed to get()."""

    def __init__(self):
        self.gets = []

    async def get(self, model, identity):
        self.gets.append(identity)
        return None


def test_ids_outside_the_bigint_range_never_reach_the_driver():
    db = RecordingSession()
    repo = SqlAlchemyRepository(db, Brigade)

    assert asyncio.run(repo.find_by_id(2**63)) is None
    assert asyncio.run(repo.find_by_id(-(2**63) - 1)) is None
    assert asyncio.run(repo.update(10**20, {"lieu": "Ouest"})) is None
    assert asyncio.run(repo.delete(10**20)) is False
    assert db.gets == []


def test_ids_inside_the_bigint_range_are_looked_up():
    db = RecordingSession()
    repo = SqlAlchemyRepository(db, Brigade)

    assert asyncio.run(repo.find_by_id(2**63 - 1)) is None
    assert asyncio.run(repo.find_by_id("7")) is None
    assert db.gets == [2**63 - 1, 7]
