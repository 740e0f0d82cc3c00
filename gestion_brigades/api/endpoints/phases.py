"""Endpoints des phases (espace section), dont la liste agrégée avec les tâches."""
from fastapi import APIRouter, Depends

from gestion_brigades.api.crud import Libelles, appeler_service, register_crud_routes
from gestion_brigades.api.deps import get_phase_service
from gestion_brigades.schemas.phase import PhaseAvecTaches, PhaseCreate, PhaseItem, PhaseUpdate
from gestion_brigades.services.phase_service import PhaseService

router = APIRouter(prefix="/phases", tags=["phases"])


# Déclarée avant /{id} pour ne pas être capturée par la route générique
@router.get(
    "/avec-taches",
    response_model=list[PhaseAvecTaches],
    summary="Phases avec leurs tâches",
    description="Chaque phase est renvoyée avec la liste complète de ses tâches, vide si elle n'en a pas.",
)
async def lister_phases_avec_taches(service: PhaseService = Depends(get_phase_service)):
    return await appeler_service("la récupération des phases", service.lister_avec_taches())


register_crud_routes(
    router,
    service_dependency=get_phase_service,
    item_schema=PhaseItem,
    create_schema=PhaseCreate,
    update_schema=PhaseUpdate,
    libelles=Libelles("phase", "phases"),
)
