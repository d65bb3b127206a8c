"""Login, registration and session lifecycle for the client."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from pydantic_core import to_jsonable_python

from sehra.domain.entities import PackageTier, UserRole, parse_package_tier

from .api import ApiClient, ApiError
from .channel import RealtimeChannelClient
from .notifications import NotificationState
from .role_guard import AUTH_PATH, landing_path
from .routing import Navigator
from .session import Session, SessionStore
from .toasts import Toaster, ToastVariant

logger = logging.getLogger(__name__)


class AuthService:
    """Turn API results into session changes, navigation and toasts.

    Each action catches its own failures and reports them as a destructive
    toast, returning ``None``.
    """

    def __init__(
        self,
        *,
        api: ApiClient,
        session_store: SessionStore,
        channel: RealtimeChannelClient,
        notifications: NotificationState,
        navigator: Navigator,
        toaster: Toaster,
    ) -> None:
        self._api = api
        self._session_store = session_store
        self._channel = channel
        self._notifications = notifications
        self._navigator = navigator
        self._toaster = toaster

    def _fail(self, title: str, exc: Exception) -> None:
        message = exc.message if isinstance(exc, ApiError) else str(exc)
        logger.info("%s: %s", title, message)
        self._toaster.show(title, message, ToastVariant.DESTRUCTIVE)

    async def _begin(self, payload: Any, greeting: str) -> Session:
        session = Session.from_payload(payload)
        self._session_store.save(session)
        self._notifications.reset()
        self._notifications.bind_user(session.user_id)
        await self._channel.connect(session.token)
        self._toaster.show(greeting, variant=ToastVariant.SUCCESS)
        self._navigator.navigate(landing_path(session.role, session.has_package), replace=True)
        return session

    async def login(self, email: str, password: str) -> Session | None:
        try:
            payload = await self._api.post("/auth/login", {"email": email, "password": password})
            session = await self._begin(payload, "Welcome back")
        except (ApiError, ValueError, OSError) as exc:
            self._fail("Login failed", exc)
            return None
        return session

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole | str = UserRole.BRIDE,
    ) -> Session | None:
        body = {"name": name, "email": email, "password": password, "role": UserRole(role).value}
        try:
            payload = await self._api.post("/auth/register", body)
            session = await self._begin(payload, "Account created")
        except (ApiError, ValueError, OSError) as exc:
            self._fail("Registration failed", exc)
            return None
        return session

    async def select_package(
        self,
        package: PackageTier | str,
        *,
        budget: float | None = None,
        wedding_date: date | None = None,
        location: str | None = None,
        partner_name: str | None = None,
    ) -> Session | None:
        tier = parse_package_tier(package)
        if tier is None:
            self._fail("Package selection failed", ValueError(f"Unknown package: {package}"))
            return None

        body = {
            "package": tier.value,
            "budget": budget,
            "wedding_date": wedding_date,
            "location": location,
            "partner_name": partner_name,
        }
        try:
            payload = await self._api.post(
                "/auth/select-package",
                to_jsonable_python({k: v for k, v in body.items() if v is not None}),
            )
            user = payload["user"]
            session = self._session_store.update(package_tier=parse_package_tier(user.get("package")))
        except (ApiError, ValueError, KeyError, TypeError, OSError) as exc:
            self._fail("Package selection failed", exc)
            return None

        self._toaster.show(f"{tier.value} package selected", variant=ToastVariant.SUCCESS)
        self._navigator.navigate(landing_path(session.role, session.has_package), replace=True)
        return session

    async def update_profile(self, **changes: Any) -> Session | None:
        """PATCH the profile and mirror the cached identity fields."""

        try:
            user = await self._api.patch("/users/me", to_jsonable_python(changes))
            session = self._session_store.update(name=user.get("name"), email=user.get("email"))
        except (ApiError, ValueError, AttributeError, OSError) as exc:
            self._fail("Profile update failed", exc)
            return None

        self._toaster.show("Profile updated", variant=ToastVariant.SUCCESS)
        return session

    async def logout(self) -> None:
        await self._channel.disconnect()
        self._notifications.reset()
        self._session_store.clear()
        self._navigator.navigate("/", replace=True)

    async def handle_unauthorized(self) -> None:
        """Drop a session the server no longer accepts and go to the login view."""

        if self._session_store.current() is None:
            return
        logger.info("Session rejected by the server; signing out")
        await self._channel.disconnect()
        self._notifications.reset()
        self._session_store.clear()
        self._toaster.show("Session expired", "Please sign in again.", ToastVariant.DESTRUCTIVE)
        self._navigator.navigate(AUTH_PATH, replace=True)


__all__ = ["AuthService"]
