"""Endpoints des équipes (espace section)."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_equipe_service
from gestion_brigades.schemas.brigade import EquipeCreate, EquipeItem, EquipeUpdate

router = APIRouter(prefix="/equipes", tags=["equipes"])

register_crud_routes(
    router,
    service_dependency=get_equipe_service,
    item_schema=EquipeItem,
    create_schema=EquipeCreate,
    update_schema=EquipeUpdate,
    libelles=Libelles("équipe", "équipes"),
)
