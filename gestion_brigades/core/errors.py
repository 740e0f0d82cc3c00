"""Taxonomie des erreurs de l'API et conversion en réponses JSON {"error": ...}."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MESSAGE_ERREUR_INTERNE = "Erreur interne du serveur"


class AppError(Exception):
    """Erreur métier portant un statut HTTP et un message affichable."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = MESSAGE_ERREUR_INTERNE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_body(self) -> dict:
        return {"error": self.message}


class Unauthenticated(AppError):
    """Aucune session, ou session inconnue / expirée."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentification requise"


class Forbidden(AppError):
    """Session valide mais rôle non autorisé pour la route."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Accès refusé pour ce rôle"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Ressource introuvable"


class ValidationError(AppError):
    """Données d'entrée invalides, avec le détail par champ."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Données invalides"

    def __init__(self, message: str | None = None, champs: list[dict] | None = None):
        super().__init__(message)
        self.champs = champs or []

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.champs:
            body["champs"] = self.champs
        return body


class InternalError(AppError):
    """Échec inattendu ; le détail reste dans les logs."""


class RetrievalError(InternalError):
    """Échec de lecture d'un agrégat (aucun résultat partiel n'est renvoyé)."""

    message = "Erreur lors de la récupération des données"


def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def champs_depuis_erreurs(errors: list[dict]) -> list[dict]:
    """Convertit les erreurs pydantic en liste [{champ, message}]."""
    champs = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        champs.append({"champ": ".".join(loc) or "body", "message": err.get("msg", "")})
    return champs


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(ValidationError(champs=champs_depuis_erreurs(exc.errors())))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        return JSONResponse(status_code=exc.status_code, content={"error": MESSAGE_ERREUR_INTERNE})
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        # Une méthode non exposée sur un chemin connu est une route inexistante
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Route introuvable"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Erreur non gérée sur %s %s", request.method, request.url.path)
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers qui normalisent toutes les erreurs en {"error": ...}."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
