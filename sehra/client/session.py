"""Persistent session storage for the client."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from jose import JWTError, jwt
from pydantic import BaseModel, Field, ValidationError

from sehra.domain.entities import (
    STAFF_ROLES,
    PackageTier,
    UserRole,
    parse_package_tier,
    parse_role,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """The authenticated identity the client acts as."""

    user_id: int
    role: UserRole | None
    token: str
    package_tier: PackageTier | None = None
    name: str | None = None
    email: str | None = None

    @property
    def has_package(self) -> bool:
        return self.package_tier is not None or self.role in STAFF_ROLES

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Session":
        """Build a session from the ``{user, token}`` body returned on login."""

        document = SessionDocument.model_validate(payload)
        return document.to_session()

    def to_document(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "user": {
                "id": self.user_id,
                "name": self.name,
                "email": self.email,
                "role": self.role.value if self.role else None,
                "package": self.package_tier.value if self.package_tier else None,
            },
        }


class CachedUser(BaseModel):
    id: int
    name: str | None = None
    email: str | None = None
    role: str | None = None
    package: str | None = None


class SessionDocument(BaseModel):
    """On-disk layout: the bearer ``token`` plus the cached ``user`` profile."""

    token: str = Field(..., min_length=1)
    user: CachedUser

    def to_session(self) -> Session:
        return Session(
            user_id=self.user.id,
            role=parse_role(self.user.role),
            token=self.token,
            package_tier=parse_package_tier(self.user.package),
            name=self.user.name,
            email=self.user.email,
        )


def token_expired(token: str, *, now: datetime | None = None) -> bool:
    """Return ``True`` when ``token`` is a JWT whose ``exp`` claim has passed.

    Tokens that are not JWTs, or carry no ``exp``, are left to the server to judge.
    """

    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return False
    expires = claims.get("exp")
    if not isinstance(expires, (int, float)):
        return False
    current = now or datetime.now(tz=timezone.utc)
    return expires <= current.timestamp()


class SessionStore:
    """Load, save and clear the persisted session document at ``path``.

    Writes go to a temporary file in the same directory which is then moved
    over the document, so a reader sees either the old or the new session.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._current: Session | None = None
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def current(self) -> Session | None:
        return self._current

    def load(self) -> Session | None:
        """Read the persisted session, discarding malformed or expired documents."""

        self._loaded = True
        self._current = None

        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read session file %s: %s", self.path, exc)
            return None

        try:
            document = SessionDocument.model_validate(json.loads(raw))
        except ValueError as exc:
            logger.warning("Discarding malformed session document %s: %s", self.path, exc)
            self._discard()
            return None

        if token_expired(document.token):
            logger.info("Discarding expired session for user %s", document.user.id)
            self._discard()
            return None

        self._current = document.to_session()
        return self._current

    def save(self, session: Session) -> Session:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(session.to_document(), handle)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_path, self.path)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

        self._current = session
        self._loaded = True
        return session

    def update(self, **changes: Any) -> Session:
        """Replace fields of the current session and persist the result."""

        if self._current is None:
            raise ValueError("No active session to update")
        return self.save(replace(self._current, **changes))

    def clear(self) -> None:
        self._discard()
        self._current = None
        self._loaded = True

    def _discard(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not remove session file %s: %s", self.path, exc)


__all__ = ["Session", "SessionDocument", "SessionStore", "token_expired"]
