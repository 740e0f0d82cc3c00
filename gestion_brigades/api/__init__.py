"""Routers de la API.

/api/auth      connexion, déconnexion, session courante
/api/section   espace chef de section
/api/brigade   espace chef de brigade

Le contrôle d'accès est appliqué par AccessGuardMiddleware selon le préfixe.
"""
from fastapi import APIRouter

from gestion_brigades.api.endpoints import (
    absences,
    affectations,
    auth,
    brigades,
    chefs_brigade,
    employes,
    equipes,
    espace_brigade,
    materiels,
    notifications,
    phases,
    rapports,
    taches,
)
from gestion_brigades.core.guard import API_PREFIX

section_router = APIRouter(prefix="/section")
section_router.include_router(brigades.router)
section_router.include_router(equipes.router)
section_router.include_router(employes.router)
section_router.include_router(chefs_brigade.router)
section_router.include_router(materiels.router)
section_router.include_router(phases.router)
section_router.include_router(taches.router)
section_router.include_router(affectations.router)
section_router.include_router(rapports.router)
section_router.include_router(absences.router)
section_router.include_router(notifications.router)

brigade_router = APIRouter(prefix="/brigade")
for sub_router in espace_brigade.routers:
    brigade_router.include_router(sub_router)
brigade_router.include_router(notifications.router)

router = APIRouter(prefix=API_PREFIX)
router.include_router(auth.router)
router.include_router(section_router)
router.include_router(brigade_router)
