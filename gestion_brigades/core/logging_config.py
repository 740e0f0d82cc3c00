"""Configuration du logging applicatif."""
import logging

from gestion_brigades.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Configure le logger racine une seule fois (évite les doublons au rechargement)."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(settings.log_level.upper())
        return
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
