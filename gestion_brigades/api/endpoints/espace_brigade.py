"""Endpoints de l'espace chef de brigade.

Toutes les lectures sont limitées à la brigade de la session ; l'identifiant
de brigade n'est jamais lu depuis la requête.
"""
from fastapi import APIRouter, Depends, status

from gestion_brigades.api.crud import IdPath, appeler_service
from gestion_brigades.api.deps import (
    get_brigade_service,
    get_materiel_service,
    get_phase_service,
    get_rapport_service,
    get_tache_service,
)
from gestion_brigades.core.guard import Principal, get_brigade_principal
from gestion_brigades.schemas.brigade import EquipeItem
from gestion_brigades.schemas.materiel import DemandeMaterielRequest, DemandeMaterielResponse
from gestion_brigades.schemas.phase import PhaseAvecTaches, TacheItem
from gestion_brigades.schemas.rapport import RapportCreate, RapportItem
from gestion_brigades.services.brigade_service import BrigadeService
from gestion_brigades.services.materiel_service import MaterielService
from gestion_brigades.services.phase_service import PhaseService, TacheService
from gestion_brigades.services.rapport_service import RapportService

taches_router = APIRouter(prefix="/taches", tags=["espace brigade"])
equipes_router = APIRouter(prefix="/equipes", tags=["espace brigade"])
phases_router = APIRouter(prefix="/phases", tags=["espace brigade"])
rapports_router = APIRouter(prefix="/rapports", tags=["espace brigade"])
materiels_router = APIRouter(prefix="/materiels", tags=["espace brigade"])


@taches_router.get("", response_model=list[TacheItem], summary="Tâches de ma brigade")
async def lister_taches(
    principal: Principal = Depends(get_brigade_principal),
    service: TacheService = Depends(get_tache_service),
):
    return await appeler_service(
        "la récupération des tâches", service.lister_pour_brigade(principal.brigade_id)
    )


@taches_router.get(
    "/{id}",
    response_model=TacheItem,
    summary="Obtenir une tâche de ma brigade",
    responses={404: {"description": "Tâche introuvable ou d'une autre brigade"}},
)
async def obtenir_tache(
    id: IdPath,
    principal: Principal = Depends(get_brigade_principal),
    service: TacheService = Depends(get_tache_service),
):
    return await appeler_service(
        "la récupération des tâches", service.obtenir_pour_brigade(id, principal.brigade_id)
    )


@equipes_router.get("", response_model=list[EquipeItem], summary="Équipes de ma brigade")
async def lister_equipes(
    principal: Principal = Depends(get_brigade_principal),
    service: BrigadeService = Depends(get_brigade_service),
):
    return await appeler_service(
        "la récupération des équipes", service.lister_equipes(principal.brigade_id)
    )


@phases_router.get(
    "/avec-taches",
    response_model=list[PhaseAvecTaches],
    summary="Phases avec les tâches de ma brigade",
    description="Toutes les phases sont renvoyées ; seules les tâches de la brigade y figurent.",
)
async def lister_phases_avec_taches(
    principal: Principal = Depends(get_brigade_principal),
    service: PhaseService = Depends(get_phase_service),
):
    return await appeler_service(
        "la récupération des phases", service.lister_avec_taches(id_brigade=principal.brigade_id)
    )


@rapports_router.post(
    "",
    response_model=RapportItem,
    status_code=status.HTTP_201_CREATED,
    summary="Soumettre un rapport",
    description="Le rapport est créé avec la validation `en_attente`.",
    responses={400: {"description": "Données invalides"}},
)
async def creer_rapport(
    body: RapportCreate,
    principal: Principal = Depends(get_brigade_principal),
    service: RapportService = Depends(get_rapport_service),
):
    return await appeler_service("la création du rapport", service.creer(body.values()))


@materiels_router.post(
    "/demandes",
    response_model=DemandeMaterielResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Demander du matériel",
    description="Notifie le chef de section d'une demande de matériel pour une tâche de la brigade.",
    responses={
        400: {"description": "Données invalides"},
        404: {"description": "Tâche introuvable ou d'une autre brigade"},
    },
)
async def demander_materiel(
    body: DemandeMaterielRequest,
    principal: Principal = Depends(get_brigade_principal),
    service: MaterielService = Depends(get_materiel_service),
):
    notification = await appeler_service(
        "la demande de matériel",
        service.demander(
            principal.brigade_id,
            body.id_tache,
            [ligne.model_dump() for ligne in body.materiels],
        ),
    )
    return DemandeMaterielResponse(success=True, id_notification=notification["id"])


routers = (taches_router, equipes_router, phases_router, rapports_router, materiels_router)
