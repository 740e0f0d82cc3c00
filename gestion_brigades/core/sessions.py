"""Sessions côté serveur : stockage par jeton opaque et transport par cookie.

Le jeton est un aléa de 256 bits sans aucune donnée dérivée de l'utilisateur :
invalider le jeton retire immédiatement tout accès.
"""
import logging
import secrets
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from fastapi import Request, Response

from gestion_brigades.core.config import settings
from gestion_brigades.core.roles import Role

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Session:
    """Session détenue par le serveur ; le client ne connaît que le jeton."""

    token: str
    subject_id: str
    role: Role
    issued_at: datetime
    expires_at: datetime
    brigade_id: int | None = None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SessionStore(ABC):
    """Contrat du magasin de sessions."""

    @abstractmethod
    def create(self, subject_id: str, role: Role, brigade_id: int | None = None) -> str:
        """Crée une session et renvoie son jeton opaque."""

    @abstractmethod
    def lookup(self, token: str) -> Session | None:
        """Renvoie la session du jeton, ou None si inconnue ou expirée."""

    @abstractmethod
    def invalidate(self, token: str) -> None:
        """Supprime la session du jeton (sans effet si elle n'existe pas)."""

    @abstractmethod
    def invalidate_subject(self, subject_id: str, role: Role) -> int:
        """Supprime toutes les sessions d'un sujet ; renvoie le nombre supprimé."""

    @abstractmethod
    def purge_expired(self) -> int:
        """Supprime les sessions expirées ; renvoie le nombre supprimé."""


class InMemorySessionStore(SessionStore):
    """Magasin en mémoire, sûr pour des accès concurrents (verrou unique).

    Example:
        store = InMemorySessionStore(ttl_seconds=3600)
        token = store.create("12", Role.CHEF_BRIGADE, brigade_id=3)
        session = store.lookup(token)
    """

    def __init__(
        self,
        ttl_seconds: int = settings.session_ttl_seconds,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: dict[str, Session] = {}

    def create(self, subject_id: str, role: Role, brigade_id: int | None = None) -> str:
        now = self._clock()
        token = secrets.token_urlsafe(TOKEN_BYTES)
        session = Session(
            token=token,
            subject_id=str(subject_id),
            role=Role(role),
            issued_at=now,
            expires_at=now + self.ttl,
            brigade_id=brigade_id,
        )
        with self._lock:
            self._sessions[token] = session
        logger.info("Session créée pour %s (%s)", session.subject_id, session.role.value)
        return token

    def lookup(self, token: str) -> Session | None:
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self._clock()):
                # Éviction paresseuse
                del self._sessions[token]
                return None
            return session

    def invalidate(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def invalidate_subject(self, subject_id: str, role: Role) -> int:
        subject_id = str(subject_id)
        with self._lock:
            tokens = [
                t for t, s in self._sessions.items()
                if s.subject_id == subject_id and s.role == role
            ]
            for token in tokens:
                del self._sessions[token]
        if tokens:
            logger.info("%d session(s) révoquée(s) pour %s", len(tokens), subject_id)
        return len(tokens)

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class SessionCookieCodec:
    """Lit et écrit le jeton de session dans le cookie ; rien d'autre n'est lu du client."""

    def __init__(
        self,
        cookie_name: str = settings.session_cookie_name,
        max_age: int = settings.session_ttl_seconds,
        secure: bool = settings.session_cookie_secure,
    ):
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    def read(self, request: Request) -> str | None:
        token = request.cookies.get(self.cookie_name)
        return token or None

    def write(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age,
            path="/",
            httponly=True,
            samesite="lax",
            secure=self.secure,
        )

    def clear(self, response: Response) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value="",
            max_age=0,
            path="/",
            httponly=True,
            samesite="lax",
            secure=self.secure,
        )
