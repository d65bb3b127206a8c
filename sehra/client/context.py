"""Explicit wiring of the client components."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

import httpx

from .api import ApiClient
from .auth import AuthService
from .channel import RealtimeChannelClient
from .config import ClientSettings, get_client_settings
from .messaging import Messenger
from .notifications import NotificationState
from .routing import Navigator, Router, View, build_default_routes
from .session import Session, SessionStore
from .toasts import Toaster
from .transport import ChannelTransport, WebSocketTransport


@dataclass
class AppContext:
    """Every process-wide client component, built once per application."""

    settings: ClientSettings
    session_store: SessionStore
    navigator: Navigator
    toaster: Toaster
    notifications: NotificationState
    channel: RealtimeChannelClient
    api: ApiClient
    messenger: Messenger
    auth: AuthService
    router: Router

    @classmethod
    def create(
        cls,
        settings: ClientSettings | None = None,
        *,
        views: Mapping[str, View] | None = None,
        not_found: View | None = None,
        transport_factory: Callable[[], ChannelTransport] = WebSocketTransport,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AppContext":
        settings = settings or get_client_settings()
        session_store = SessionStore(settings.session_file)
        navigator = Navigator()
        toaster = Toaster(duration=settings.toast_duration_seconds)
        notifications = NotificationState(max_messages=settings.max_notifications)
        channel = RealtimeChannelClient(
            settings.realtime_url,
            notifications=notifications,
            toaster=toaster,
            transport_factory=transport_factory,
        )
        api = ApiClient(settings.api_base_url, session_store, transport=http_transport)
        auth = AuthService(
            api=api,
            session_store=session_store,
            channel=channel,
            notifications=notifications,
            navigator=navigator,
            toaster=toaster,
        )
        api.on_unauthorized = auth.handle_unauthorized
        router = Router(
            build_default_routes(views or {}),
            session_store,
            navigator,
            not_found=not_found,
        )
        return cls(
            settings=settings,
            session_store=session_store,
            navigator=navigator,
            toaster=toaster,
            notifications=notifications,
            channel=channel,
            api=api,
            messenger=Messenger(channel, notifications, toaster),
            auth=auth,
            router=router,
        )

    async def start(self) -> Session | None:
        """Restore a persisted session and open the realtime channel for it."""

        session = self.session_store.load()
        if session is not None:
            self.notifications.bind_user(session.user_id)
            await self.channel.connect(session.token)
        return session

    async def aclose(self) -> None:
        await self.channel.disconnect()
        await self.api.aclose()
        self.toaster.clear()


__all__ = ["AppContext"]
