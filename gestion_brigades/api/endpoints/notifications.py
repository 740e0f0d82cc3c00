"""Endpoints des notifications, communs aux deux espaces.

Le rôle ciblé est toujours celui de la session, jamais un paramètre du client.
"""
from fastapi import APIRouter, Depends, Request

from gestion_brigades.api.crud import IdPath, appeler_service
from gestion_brigades.api.deps import get_notification_service
from gestion_brigades.core.errors import ValidationError
from gestion_brigades.core.guard import Principal, get_principal
from gestion_brigades.schemas.notification import NotificationItem
from gestion_brigades.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])

CORPS_VIDES = (b"", b"{}")


@router.get(
    "",
    response_model=list[NotificationItem],
    summary="Notifications du rôle connecté",
)
async def lister_notifications(
    principal: Principal = Depends(get_principal),
    service: NotificationService = Depends(get_notification_service),
):
    return await appeler_service(
        "la récupération des notifications", service.lister_pour_role(principal.role)
    )


@router.patch(
    "/{id}",
    response_model=NotificationItem,
    summary="Marquer une notification comme lue",
    description="Passe `lue` à vrai. N'accepte aucun autre champ ; rappeler l'opération est sans effet.",
    responses={
        400: {"description": "Un corps de requête a été envoyé"},
        404: {"description": "Notification introuvable"},
    },
)
async def marquer_notification_lue(
    id: IdPath,
    request: Request,
    principal: Principal = Depends(get_principal),
    service: NotificationService = Depends(get_notification_service),
):
    if (await request.body()).strip() not in CORPS_VIDES:
        raise ValidationError("Cette opération n'accepte aucun champ")
    return await appeler_service(
        "la mise à jour de la notification", service.marquer_comme_lue(id, principal.role)
    )
