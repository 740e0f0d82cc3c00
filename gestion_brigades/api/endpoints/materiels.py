"""Endpoints du matériel (espace section)."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_materiel_service
from gestion_brigades.schemas.materiel import MaterielCreate, MaterielItem, MaterielUpdate

router = APIRouter(prefix="/materiels", tags=["materiels"])

register_crud_routes(
    router,
    service_dependency=get_materiel_service,
    item_schema=MaterielItem,
    create_schema=MaterielCreate,
    update_schema=MaterielUpdate,
    libelles=Libelles("matériel", "matériels"),
)
