"""Moteur PostgreSQL asynchrone, session par requête et création du schéma.

Une requête HTTP = une AsyncSession = une transaction : validée si le
contrôleur aboutit, annulée sinon (y compris pour une erreur métier).
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from gestion_brigades.core.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url_async,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=settings.postgres_pool_size,
    max_overflow=settings.postgres_max_overflow,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Base déclarative des tables brigades, employés, phases, tâches, etc."""


async def get_db():
    """Dépendance : la session transactionnelle de la requête."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception as exc:
            logger.debug("Transaction annulée (%s)", type(exc).__name__)
            await session.rollback()
            raise


async def init_db() -> None:
    """Crée les tables manquantes ; les tables existantes ne sont pas modifiées."""
    # Les modèles doivent être importés pour figurer dans Base.metadata
    import gestion_brigades.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schéma vérifié : %d table(s)", len(Base.metadata.tables))


async def dispose_db() -> None:
    """Ferme les connexions du pool à l'arrêt de l'application."""
    await engine.dispose()
