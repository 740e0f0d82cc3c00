"""Endpoints des absences (espace section)."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_absence_service
from gestion_brigades.schemas.absence import AbsenceCreate, AbsenceItem, AbsenceUpdate

router = APIRouter(prefix="/absences", tags=["absences"])

register_crud_routes(
    router,
    service_dependency=get_absence_service,
    item_schema=AbsenceItem,
    create_schema=AbsenceCreate,
    update_schema=AbsenceUpdate,
    libelles=Libelles("absence", "absences"),
)
