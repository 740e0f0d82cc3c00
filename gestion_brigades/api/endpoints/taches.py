"""Endpoints des tâches (espace section). La création notifie les chefs de brigade."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_tache_service
from gestion_brigades.schemas.phase import TacheCreate, TacheItem, TacheUpdate

router = APIRouter(prefix="/taches", tags=["taches"])

register_crud_routes(
    router,
    service_dependency=get_tache_service,
    item_schema=TacheItem,
    create_schema=TacheCreate,
    update_schema=TacheUpdate,
    libelles=Libelles("tâche", "tâches"),
)
