"""Endpoints des employés (espace section). Le hash du mot de passe n'est jamais renvoyé."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_employe_service
from gestion_brigades.schemas.employe import EmployeCreate, EmployeItem, EmployeUpdate

router = APIRouter(prefix="/employes", tags=["employes"])

register_crud_routes(
    router,
    service_dependency=get_employe_service,
    item_schema=EmployeItem,
    create_schema=EmployeCreate,
    update_schema=EmployeUpdate,
    libelles=Libelles("employé", "employés"),
)
