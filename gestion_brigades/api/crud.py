"""Contrôleur générique : routes list / get / create / update / delete d'une ressource.

Chaque ressource ne fournit que sa dépendance de service et ses schémas ;
la validation, les codes HTTP et la normalisation des erreurs sont communs.
"""
import logging
from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable, Iterable, TypeVar

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel

from gestion_brigades.core.errors import AppError, InternalError
from gestion_brigades.services.base import ResourceService

logger = logging.getLogger(__name__)

T = TypeVar("T")

OPERATIONS = ("list", "get", "create", "update", "delete")

# Les clés primaires sont des BIGINT : un id hors de cette plage est refusé en 400
BIGINT_MAX = 2**63 - 1
IdPath = Annotated[int, Path(ge=1, le=BIGINT_MAX)]


async def appeler_service(action: str, appel: Awaitable[T]) -> T:
    """Frontière du contrôleur : les AppError passent, tout le reste devient une 500 générique."""
    try:
        return await appel
    except AppError:
        raise
    except Exception as exc:
        logger.exception("Échec inattendu lors de %s", action)
        raise InternalError(f"Erreur lors de {action}") from exc


@dataclass(frozen=True)
class Libelles:
    """Libellés utilisés dans les résumés OpenAPI et les messages d'erreur."""

    singulier: str
    pluriel: str


def register_crud_routes(
    router: APIRouter,
    *,
    service_dependency: Callable[..., ResourceService],
    item_schema: type[BaseModel],
    libelles: Libelles,
    create_schema: type[BaseModel] | None = None,
    update_schema: type[BaseModel] | None = None,
    operations: Iterable[str] = OPERATIONS,
) -> APIRouter:
    """Enregistre sur `router` les opérations demandées et renvoie le routeur."""
    operations = set(operations)
    inconnues = operations - set(OPERATIONS)
    if inconnues:
        raise ValueError(f"Opérations inconnues : {sorted(inconnues)}")
    if "create" in operations and create_schema is None:
        raise ValueError("create_schema est requis pour l'opération create")
    if "update" in operations and update_schema is None:
        raise ValueError("update_schema est requis pour l'opération update")

    if "list" in operations:

        @router.get(
            "",
            response_model=list[item_schema],
            summary=f"Lister les {libelles.pluriel}",
        )
        async def lister(service: ResourceService = Depends(service_dependency)) -> Any:
            return await appeler_service(f"la récupération des {libelles.pluriel}", service.lister())

    if "get" in operations:

        @router.get(
            "/{id}",
            response_model=item_schema,
            summary=f"Obtenir un(e) {libelles.singulier}",
            responses={404: {"description": f"{libelles.singulier} introuvable"}},
        )
        async def obtenir(id: IdPath, service: ResourceService = Depends(service_dependency)) -> Any:
            return await appeler_service(f"la récupération des {libelles.pluriel}", service.obtenir(id))

    if "create" in operations:

        @router.post(
            "",
            response_model=item_schema,
            status_code=status.HTTP_201_CREATED,
            summary=f"Créer un(e) {libelles.singulier}",
            responses={400: {"description": "Données invalides"}},
        )
        async def creer(
            body: create_schema,  # type: ignore[valid-type]
            service: ResourceService = Depends(service_dependency),
        ) -> Any:
            return await appeler_service(f"la création ({libelles.pluriel})", service.creer(body.values()))

    if "update" in operations:

        @router.put(
            "/{id}",
            response_model=item_schema,
            summary=f"Modifier un(e) {libelles.singulier}",
            description="Seuls les champs envoyés sont modifiés.",
            responses={
                400: {"description": "Données invalides"},
                404: {"description": f"{libelles.singulier} introuvable"},
            },
        )
        async def modifier(
            id: IdPath,
            body: update_schema,  # type: ignore[valid-type]
            service: ResourceService = Depends(service_dependency),
        ) -> Any:
            return await appeler_service(
                f"la modification ({libelles.pluriel})", service.modifier(id, body.changes())
            )

    if "delete" in operations:

        @router.delete(
            "/{id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            summary=f"Supprimer un(e) {libelles.singulier}",
            responses={404: {"description": f"{libelles.singulier} introuvable"}},
        )
        async def supprimer(id: IdPath, service: ResourceService = Depends(service_dependency)) -> Response:
            await appeler_service(f"la suppression ({libelles.pluriel})", service.supprimer(id))
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
