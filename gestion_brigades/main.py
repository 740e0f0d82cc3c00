"""Point d'entrée de l'application FastAPI."""
import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gestion_brigades.api import router as api_router
from gestion_brigades.core.config import settings
from gestion_brigades.core.database import dispose_db, init_db
from gestion_brigades.core.errors import register_exception_handlers
from gestion_brigades.core.guard import AccessGuard, AccessGuardMiddleware
from gestion_brigades.core.logging_config import configure_logging
from gestion_brigades.core.roles import ROLE_POLICY, RolePolicy
from gestion_brigades.core.sessions import InMemorySessionStore, SessionCookieCodec, SessionStore

logger = logging.getLogger(__name__)

# Documentation Swagger : disponible sur /docs
OPENAPI_TAGS = [
    {
        "name": "auth",
        "description": "Connexion par identifiant, mot de passe et rôle. La session est portée par le cookie `session_token`.",
    },
    {"name": "brigades", "description": "Brigades et équipes d'une brigade (chef de section)."},
    {"name": "equipes", "description": "Équipes (chef de section)."},
    {"name": "employes", "description": "Employés (chef de section)."},
    {"name": "chefs-brigade", "description": "Nomination et révocation des chefs de brigade (chef de section)."},
    {"name": "materiels", "description": "Inventaire du matériel (chef de section)."},
    {"name": "phases", "description": "Phases du chantier, avec ou sans leurs tâches (chef de section)."},
    {"name": "taches", "description": "Tâches planifiées (chef de section)."},
    {"name": "affectations", "description": "Affectations des employés aux tâches (chef de section)."},
    {"name": "rapports", "description": "Rapports d'avancement, leur validation et les employés concernés (chef de section)."},
    {"name": "absences", "description": "Absences des employés (chef de section)."},
    {"name": "notifications", "description": "Notifications du rôle connecté."},
    {"name": "espace brigade", "description": "Tâches, équipes, rapports et demandes de matériel du chef de brigade."},
    {"name": "sante", "description": "Vérification de l'état du service."},
]


async def purger_sessions(store: SessionStore, interval: int) -> None:
    """Retire périodiquement les sessions expirées jamais relues."""
    while True:
        await asyncio.sleep(interval)
        purgees = store.purge_expired()
        if purgees:
            logger.info("%d session(s) expirée(s) purgée(s)", purgees)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gère le cycle de vie : démarrage et arrêt de l'application."""
    if settings.create_tables:
        await init_db()

    purge = None
    if settings.session_purge_interval_seconds > 0:
        purge = asyncio.create_task(
            purger_sessions(app.state.session_store, settings.session_purge_interval_seconds)
        )

    yield

    if purge is not None:
        purge.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await purge
    await dispose_db()


def create_app(
    session_store: SessionStore | None = None,
    policy: RolePolicy = ROLE_POLICY,
) -> FastAPI:
    """Construit l'application ; les tests y injectent leur propre magasin de sessions."""
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="""
API REST de gestion des brigades d'entretien : brigades, équipes, employés, matériel,
phases, tâches, rapports, absences et notifications.

## Authentification

1. **POST /api/auth/login** avec `identifiant`, `mot_de_passe` et `role`.
2. Le cookie httpOnly `session_token` est posé ; le navigateur le renvoie ensuite seul.
3. **POST /api/auth/logout** invalide la session et efface le cookie.

Les routes `/api/section/*` sont réservées au rôle `chef_section`,
les routes `/api/brigade/*` au rôle `chef_brigade`.
""",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    store = session_store if session_store is not None else InMemorySessionStore()
    codec = SessionCookieCodec()
    app.state.session_store = store
    app.state.session_codec = codec
    app.state.access_guard = AccessGuard(store, codec, policy)

    register_exception_handlers(app)

    # Le garde est ajouté avant CORS : les pré-vols OPTIONS sont traités sans session
    app.add_middleware(AccessGuardMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get(
        "/health",
        tags=["sante"],
        summary="État du service",
        response_description="Indique que l'API est en cours d'exécution",
    )
    async def health_check():
        """Vérifie que le service est actif. Ne requiert pas d'authentification."""
        return {"status": "ok", "message": "Service en cours d'exécution"}

    return app


app = create_app()
