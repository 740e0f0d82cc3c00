"""Endpoints des chefs de brigade : listing, nomination et révocation (espace section)."""
from fastapi import APIRouter

from gestion_brigades.api.crud import Libelles, register_crud_routes
from gestion_brigades.api.deps import get_chef_brigade_service
from gestion_brigades.schemas.employe import ChefBrigadeCreate, ChefBrigadeItem

router = APIRouter(prefix="/chefs-brigade", tags=["chefs-brigade"])

# Une nomination ne se modifie pas : on révoque puis on renomme.
# L'identifiant d'une nomination est celui de l'employé.
register_crud_routes(
    router,
    service_dependency=get_chef_brigade_service,
    item_schema=ChefBrigadeItem,
    create_schema=ChefBrigadeCreate,
    libelles=Libelles("chef de brigade", "chefs de brigade"),
    operations=("list", "get", "create", "delete"),
)
