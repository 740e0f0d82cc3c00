"""Endpoints des brigades (espace section), dont la sous-collection des équipes."""
from fastapi import APIRouter, Depends

from gestion_brigades.api.crud import IdPath, Libelles, appeler_service, register_crud_routes
from gestion_brigades.api.deps import get_brigade_service
from gestion_brigades.schemas.brigade import BrigadeCreate, BrigadeItem, BrigadeUpdate, EquipeItem
from gestion_brigades.services.brigade_service import BrigadeService

router = APIRouter(prefix="/brigades", tags=["brigades"])


@router.get(
    "/{id}/equipes",
    response_model=list[EquipeItem],
    summary="Équipes d'une brigade",
    description="Renvoie uniquement les équipes rattachées à la brigade indiquée.",
    responses={404: {"description": "Brigade introuvable"}},
)
async def lister_equipes_brigade(id: IdPath, service: BrigadeService = Depends(get_brigade_service)):
    return await appeler_service("la récupération des équipes", service.lister_equipes(id))


register_crud_routes(
    router,
    service_dependency=get_brigade_service,
    item_schema=BrigadeItem,
    create_schema=BrigadeCreate,
    update_schema=BrigadeUpdate,
    libelles=Libelles("brigade", "brigades"),
)
