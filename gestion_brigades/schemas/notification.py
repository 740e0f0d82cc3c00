"""Schémas des notifications."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel


class NotificationItem(BaseModel):
    id: int
    titre: str
    message: str
    cible_role: str
    cible_utilisateur: str | None = None
    payload: dict[str, Any] | None = None
    lue: bool
    date_creation: datetime
