"""Endpoints des affectations d'employés aux tâches (espace section)."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_affectation_service
from gestion_brigades.schemas.affectation import AffectationCreate, AffectationItem, AffectationUpdate

router = APIRouter(prefix="/affectations", tags=["affectations"])

register_crud_routes(
    router,
    service_dependency=get_affectation_service,
    item_schema=AffectationItem,
    create_schema=AffectationCreate,
    update_schema=AffectationUpdate,
    libelles=Libelles("affectation", "affectations"),
)
