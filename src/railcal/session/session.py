from __future__ import annotations

import time
from collections.abc import Callable, MutableMapping
from typing import Optional
from urllib.parse import quote

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = structlog.get_logger(__name__)


class SessionError(ValueError):
    """Raised when stored session data cannot be parsed."""


class SessionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_key: str = Field(default="railwayAuthSession", min_length=1)
    login_page: str = Field(default="login.html", min_length=1)
    default_page: str = Field(default="index.html", min_length=1)


class AuthSession(BaseModel):
    """Stored login marker; ``expiry`` is epoch milliseconds."""

    model_config = ConfigDict(strict=True, frozen=True)

    authenticated: bool
    expiry: int

    @classmethod
    def parse(cls, raw: str) -> AuthSession:
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise SessionError(f"Invalid session data: {exc.error_count()} error(s).") from exc

    def is_valid(self, now_ms: int) -> bool:
        return self.authenticated and self.expiry > now_ms

    def dumps(self) -> str:
        return self.model_dump_json()


def _now_ms() -> int:
    return int(time.time() * 1000)


class SessionGuard:
    """
    Placeholder access gate over a key/value store.  Not a security
    mechanism: anyone who can write the store can log in.

    The host calls ``require_auth`` explicitly on page load.
    """

    def __init__(
        self,
        store: MutableMapping[str, str],
        config: Optional[SessionConfig] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._store = store
        self._config = config or SessionConfig()
        self._clock = clock or _now_ms

    def session_info(self) -> Optional[AuthSession]:
        raw = self._store.get(self._config.session_key)
        if raw is None:
            return None
        try:
            return AuthSession.parse(raw)
        except SessionError:
            return None

    def is_authenticated(self) -> bool:
        key = self._config.session_key
        raw = self._store.get(key)
        if raw is None:
            return False
        try:
            session = AuthSession.parse(raw)
        except SessionError as exc:
            logger.warning("discarding corrupt session", key=key, error=str(exc))
            self._store.pop(key, None)
            return False
        if not session.is_valid(self._clock()):
            logger.info("discarding expired session", key=key, expiry=session.expiry)
            self._store.pop(key, None)
            return False
        return True

    def require_auth(self, current_page: str = "") -> Optional[str]:
        """Return the login redirect URL, or None when already authenticated."""
        if self.is_authenticated():
            return None
        page = current_page.rsplit("/", 1)[-1] or self._config.default_page
        url = f"{self._config.login_page}?redirect={quote(page, safe='')}"
        logger.info("redirecting to login", page=page)
        return url

    def login(self, ttl_ms: int) -> AuthSession:
        if ttl_ms <= 0:
            raise SessionError(f"Session lifetime must be positive; got {ttl_ms}.")
        session = AuthSession(authenticated=True, expiry=self._clock() + ttl_ms)
        self._store[self._config.session_key] = session.dumps()
        return session

    def logout(self) -> str:
        self._store.pop(self._config.session_key, None)
        return self._config.login_page

    @property
    def config(self) -> SessionConfig:
        return self._config

    def __repr__(self) -> str:
        return f"SessionGuard(key={self._config.session_key!r}, login_page={self._config.login_page!r})"
