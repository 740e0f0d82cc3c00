"""Dépendances FastAPI : repositories et services par requête."""
from typing import Callable, TypeVar

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_brigades.core.database import get_db
from gestion_brigades.models import Repositories, build_repositories
from gestion_brigades.services.auth_service import AuthService
from gestion_brigades.services.base import ResourceService
from gestion_brigades.services.brigade_service import BrigadeService, EquipeService
from gestion_brigades.services.employe_service import (
    AbsenceService,
    AffectationService,
    ChefBrigadeService,
    EmployeService,
)
from gestion_brigades.services.materiel_service import MaterielService
from gestion_brigades.services.notification_service import NotificationService
from gestion_brigades.services.phase_service import PhaseService, TacheService
from gestion_brigades.services.rapport_service import RapportService

S = TypeVar("S", bound=ResourceService)


async def get_repositories(db: AsyncSession = Depends(get_db)) -> Repositories:
    """Couche modèle de la requête (remplacée par des faux en test)."""
    return build_repositories(db)


def service_dependency(service_cls: type[S]) -> Callable[..., S]:
    """Fabrique la dépendance qui instancie `service_cls` pour la requête."""

    def _dependency(request: Request, repos: Repositories = Depends(get_repositories)) -> S:
        return service_cls(repos, session_store=request.app.state.session_store)

    _dependency.__name__ = f"get_{service_cls.__name__}"
    return _dependency


def get_auth_service(repos: Repositories = Depends(get_repositories)) -> AuthService:
    return AuthService(repos)


get_brigade_service = service_dependency(BrigadeService)
get_equipe_service = service_dependency(EquipeService)
get_employe_service = service_dependency(EmployeService)
get_chef_brigade_service = service_dependency(ChefBrigadeService)
get_absence_service = service_dependency(AbsenceService)
get_affectation_service = service_dependency(AffectationService)
get_materiel_service = service_dependency(MaterielService)
get_phase_service = service_dependency(PhaseService)
get_tache_service = service_dependency(TacheService)
get_rapport_service = service_dependency(RapportService)
get_notification_service = service_dependency(NotificationService)
