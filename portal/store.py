import logging
import secrets
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Optional
from flask import current_app
from .kv import KeyValueStore, now

logger = logging.getLogger("portal")

SESSION_PREFIX = "session:"
CREDENTIAL_PREFIX = "credential:"


@dataclass(frozen=True)
class Session:
    token: str
    username: str
    expires_at: datetime


# Szerver oldali munkamenetek (a cookie csak a tokent viszi)
class SessionStore:
    def __init__(self, kv: KeyValueStore, ttl: timedelta, clock: Callable[[], datetime] = now):
        self._kv = kv
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def create(self, username: str) -> Session:
        s = Session(
            token=secrets.token_hex(16),
            username=username,
            expires_at=self._clock() + self._ttl,
        )
        self._kv.put(SESSION_PREFIX + s.token, s, ttl=self._ttl)
        return s

    def validate(self, token: Optional[str]) -> Optional[Session]:
        """Return the session for ``token`` with its expiry pushed to now + TTL.

        Unknown and expired tokens both come back as None; an expired entry is
        removed on the way out. Every successful call is also a write.
        """
        if not token:
            return None
        key = SESSION_PREFIX + token
        while True:
            s = self._kv.get(key)
            if s is None:
                return None
            current = self._clock()
            if s.expires_at <= current:
                if self._kv.compare_and_swap(key, s, None):
                    logger.info(f"session_expired user={s.username}")
                    return None
                continue
            renewed = replace(s, expires_at=current + self._ttl)
            # párhuzamos megújítás esetén újrapróbáljuk
            if self._kv.compare_and_swap(key, s, renewed, ttl=self._ttl):
                return renewed

    def invalidate(self, token: Optional[str]) -> None:
        if token:
            self._kv.delete(SESSION_PREFIX + token)

    def purge_expired(self) -> int:
        return self._kv.purge_expired()


# Felhasználónév -> jelszó; csak az alapértelmezett felhasználó töltődik fel magától
class CredentialStore:
    def __init__(self, kv: KeyValueStore, default_username: str, default_secret: str):
        self._kv = kv
        self._default_username = default_username
        self._default_secret = default_secret

    @property
    def default_secret(self) -> str:
        return self._default_secret

    def get(self, username: str) -> Optional[str]:
        """Return the stored secret, or None for a username that was never set.

        The configured default user is seeded with the default secret on its
        first lookup; seeding happens at most once.
        """
        key = CREDENTIAL_PREFIX + username
        while True:
            secret = self._kv.get(key)
            if secret is not None:
                return secret
            if username != self._default_username:
                return None
            # put-if-absent: legfeljebb egyszer fut le
            if self._kv.compare_and_swap(key, None, self._default_secret):
                logger.info(f"credential_seeded user={username}")
                return self._default_secret

    def set(self, username: str, new_secret: str) -> None:
        self._kv.put(CREDENTIAL_PREFIX + username, new_secret)


def get_session_store() -> SessionStore:
    return current_app.extensions["portal"]["sessions"]


def get_credential_store() -> CredentialStore:
    return current_app.extensions["portal"]["credentials"]
