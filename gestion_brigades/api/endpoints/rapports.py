"""Endpoints des rapports (espace section), dont la validation et la liste avec employés."""
from fastapi import APIRouter, Depends

from gestion_brigades.api.crud import IdPath, Libelles, appeler_service, register_crud_routes
from gestion_brigades.api.deps import get_rapport_service
from gestion_brigades.schemas.rapport import (
    RapportAvecEmployes,
    RapportCreate,
    RapportItem,
    RapportUpdate,
    RapportValidationRequest,
)
from gestion_brigades.services.rapport_service import RapportService

router = APIRouter(prefix="/rapports", tags=["rapports"])


# Déclarée avant /{id} pour ne pas être capturée par la route générique
@router.get(
    "/avec-employes",
    response_model=list[RapportAvecEmployes],
    summary="Rapports avec les employés concernés",
    description=(
        "Chaque rapport est renvoyé avec sa phase, les tâches de la phase et les employés "
        "affectés à ces tâches (sans doublon)."
    ),
)
async def lister_rapports_avec_employes(service: RapportService = Depends(get_rapport_service)):
    return await appeler_service("la récupération des rapports", service.lister_avec_employes())


@router.put(
    "/{id}/validation",
    response_model=RapportItem,
    summary="Valider un rapport",
    description="Change uniquement le statut de validation et le commentaire, puis notifie la brigade.",
    responses={
        400: {"description": "Statut de validation invalide"},
        404: {"description": "Rapport introuvable"},
    },
)
async def valider_rapport(
    id: IdPath,
    body: RapportValidationRequest,
    service: RapportService = Depends(get_rapport_service),
):
    return await appeler_service(
        "la mise à jour de la validation", service.valider(id, body.validation, body.commentaire)
    )


register_crud_routes(
    router,
    service_dependency=get_rapport_service,
    item_schema=RapportItem,
    create_schema=RapportCreate,
    update_schema=RapportUpdate,
    libelles=Libelles("rapport", "rapports"),
)
