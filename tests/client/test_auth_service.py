import asyncio
import json
from datetime import date

import httpx
import pytest

from sehra.client.api import ApiError
from sehra.client.channel import ChannelState
from sehra.client.config import ClientSettings
from sehra.client.context import AppContext
from sehra.client.session import Session, SessionStore
from sehra.domain.entities import PackageTier, UserRole

pytestmark = pytest.mark.anyio

USER = {"id": 3, "name": "Asha", "email": "asha@example.com", "role": "bride", "package": None}


async def settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


class FakeApi:
    """Route table for ``httpx.MockTransport`` that records request bodies."""

    def __init__(self) -> None:
        self.bodies: dict[str, object] = {}
        self.responses: dict[str, httpx.Response] = {
            "/api/auth/login": httpx.Response(200, json={"user": USER, "token": "tok"}),
            "/api/auth/select-package": httpx.Response(
                200, json={"user": {**USER, "package": "Gold"}}
            ),
            "/api/users/me": httpx.Response(200, json={**USER, "name": "Asha R"}),
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.content:
            self.bodies[request.url.path] = json.loads(request.content)
        return self.responses.get(request.url.path, httpx.Response(404, json={"message": "Not Found"}))


@pytest.fixture()
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture()
async def context(tmp_path, fake_api, transport_factory):
    settings = ClientSettings(
        api_base_url="http://api.test",
        realtime_url="ws://test/ws",
        session_file=tmp_path / "session.json",
    )
    ctx = AppContext.create(
        settings,
        views={"/auth": lambda: "auth", "/dashboard": lambda: "dashboard"},
        transport_factory=transport_factory,
        http_transport=httpx.MockTransport(fake_api),
    )
    yield ctx
    await ctx.aclose()


async def test_login_saves_session_and_connects(context, transports, tmp_path) -> None:
    session = await context.auth.login("asha@example.com", "Secret123")
    await settle()

    assert session.user_id == 3
    assert SessionStore(tmp_path / "session.json").load() == session
    assert context.notifications.user_id == 3
    assert context.navigator.location == "/select-package"
    assert context.toaster.toasts[-1].title == "Welcome back"
    assert transports[0].sent == [{"type": "authenticate", "data": {"token": "tok"}}]
    assert context.channel.state is ChannelState.CONNECTED


async def test_failed_login_toasts_the_server_message(context, fake_api) -> None:
    fake_api.responses["/api/auth/login"] = httpx.Response(
        400, json={"message": "Invalid email or password"}
    )

    assert await context.auth.login("asha@example.com", "wrong") is None

    toast = context.toaster.toasts[-1]
    assert (toast.title, toast.description) == ("Login failed", "Invalid email or password")
    assert context.session_store.current() is None


async def test_select_package_updates_session(context, fake_api) -> None:
    await context.auth.login("asha@example.com", "Secret123")

    session = await context.auth.select_package(
        "gold", budget=50000, wedding_date=date(2026, 12, 1)
    )

    assert fake_api.bodies["/api/auth/select-package"] == {
        "package": "Gold",
        "budget": 50000,
        "wedding_date": "2026-12-01",
    }
    assert session.package_tier is PackageTier.GOLD
    assert context.navigator.location == "/dashboard"
    assert context.router.render() == "dashboard"


async def test_unknown_package_is_rejected_locally(context, fake_api) -> None:
    await context.auth.login("asha@example.com", "Secret123")

    assert await context.auth.select_package("diamond") is None
    assert "/api/auth/select-package" not in fake_api.bodies
    assert context.toaster.toasts[-1].title == "Package selection failed"


async def test_update_profile_refreshes_cached_identity(context) -> None:
    await context.auth.login("asha@example.com", "Secret123")

    session = await context.auth.update_profile(name="Asha R")

    assert session.name == "Asha R"
    assert context.toaster.toasts[-1].title == "Profile updated"


async def test_unauthorized_response_signs_out(context, fake_api, transports) -> None:
    await context.auth.login("asha@example.com", "Secret123")
    await settle()
    fake_api.responses["/api/tasks"] = httpx.Response(401, json={"message": "Invalid credentials"})

    with pytest.raises(ApiError):
        await context.api.get("/tasks")

    assert context.session_store.current() is None
    assert context.navigator.location == "/auth"
    assert context.toaster.toasts[-1].title == "Session expired"
    assert context.channel.state is ChannelState.DISCONNECTED
    assert transports[0].closed is True


async def test_wrong_password_keeps_the_current_session(context, fake_api, transports) -> None:
    session = await context.auth.login("asha@example.com", "Secret123")
    await settle()
    fake_api.responses["/api/auth/login"] = httpx.Response(
        401, json={"message": "Invalid email or password"}
    )

    assert await context.auth.login("asha@example.com", "wrong") is None

    assert context.session_store.current() == session
    assert context.toaster.toasts[-1].description == "Invalid email or password"
    assert context.navigator.location != "/auth"
    assert transports[0].closed is False


async def test_logout(context) -> None:
    await context.auth.login("asha@example.com", "Secret123")
    await context.auth.logout()

    assert context.session_store.current() is None
    assert context.notifications.user_id is None
    assert context.navigator.location == "/"
    assert not context.channel.connected


async def test_start_restores_a_persisted_session(context, transports) -> None:
    context.session_store.save(
        Session(user_id=3, role=UserRole.BRIDE, token="saved", package_tier=PackageTier.SILVER)
    )

    session = await context.start()
    await settle()

    assert session.token == "saved"
    assert context.notifications.user_id == 3
    assert transports[0].sent == [{"type": "authenticate", "data": {"token": "saved"}}]
    assert context.router.render("/dashboard") == "dashboard"
