"""Endpoints d'authentification : connexion, déconnexion et session courante.

La session est portée par un cookie httpOnly contenant un jeton opaque ;
toutes les données de session restent côté serveur.
"""
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from gestion_brigades.api.deps import get_auth_service
from gestion_brigades.core.errors import Unauthenticated, error_response
from gestion_brigades.core.guard import Principal, get_principal, get_session_codec, get_session_store
from gestion_brigades.core.sessions import SessionCookieCodec, SessionStore
from gestion_brigades.schemas.auth import AuthUserResponse, LoginRequest, LogoutResponse
from gestion_brigades.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=AuthUserResponse,
    summary="Se connecter",
    response_description="Utilisateur connecté ; le jeton de session est posé en cookie",
    responses={
        200: {"description": "Connexion réussie, cookie de session posé"},
        400: {"description": "Corps de requête invalide"},
        401: {"description": "Identifiants invalides"},
    },
)
async def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    store: SessionStore = Depends(get_session_store),
    codec: SessionCookieCodec = Depends(get_session_codec),
):
    """
    Connexion par **identifiant**, **mot de passe** et **rôle**.

    - `chef_section` : l'identifiant est l'email de l'utilisateur.
    - `chef_brigade` : l'identifiant est l'id ou le contact de l'employé nommé chef.
    """
    auth = await service.authentifier(data.identifiant, data.mot_de_passe, data.role)
    if auth is None:
        raise Unauthenticated("Identifiants invalides")

    # Une reconnexion remplace la session précédente du navigateur
    ancien = codec.read(request)
    if ancien:
        store.invalidate(ancien)

    token = store.create(auth.utilisateur.id, data.role, brigade_id=auth.brigade_id)
    codec.write(response, token)
    logger.info("Connexion de %s (%s)", auth.utilisateur.id, data.role.value)
    return AuthUserResponse(utilisateur=auth.utilisateur)


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Se déconnecter",
    description="Invalide la session côté serveur et efface le cookie. Toujours 200.",
)
async def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
    codec: SessionCookieCodec = Depends(get_session_codec),
):
    token = codec.read(request)
    if token:
        store.invalidate(token)
    codec.clear(response)
    return LogoutResponse(success=True)


@router.get(
    "/session",
    response_model=AuthUserResponse,
    summary="Session courante",
    responses={401: {"description": "Aucune session valide"}},
)
async def session_courante(
    request: Request,
    principal: Principal = Depends(get_principal),
    service: AuthService = Depends(get_auth_service),
    store: SessionStore = Depends(get_session_store),
    codec: SessionCookieCodec = Depends(get_session_codec),
):
    """Renvoie l'utilisateur de la session ; si son compte n'existe plus, la session est fermée."""
    utilisateur = await service.utilisateur_de_session(principal)
    if utilisateur is None:
        token = codec.read(request)
        if token:
            store.invalidate(token)
        response: JSONResponse = error_response(Unauthenticated("Session invalide"))
        codec.clear(response)
        return response
    return AuthUserResponse(utilisateur=utilisateur)
