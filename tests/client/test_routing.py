import pytest

from sehra.client.routing import Navigator, Route, Router, build_default_routes
from sehra.client.session import Session, SessionStore
from sehra.domain.entities import PackageTier, UserRole

VIEW_PATHS = [
    "/",
    "/auth",
    "/select-package",
    "/dashboard",
    "/wedding-journey",
    "/admin-dashboard",
    "/vendor-dashboard",
    "/supervisor-dashboard",
]


@pytest.fixture()
def store(tmp_path) -> SessionStore:
    return SessionStore(tmp_path / "session.json")


def _router(store: SessionStore, navigator: Navigator) -> Router:
    views = {path: (lambda path=path: f"view:{path}") for path in VIEW_PATHS}
    return Router(build_default_routes(views), store, navigator, not_found=lambda: "not-found")


def _sign_in(store: SessionStore, role: UserRole, package: PackageTier | None = None) -> None:
    store.save(Session(user_id=1, role=role, token="t", package_tier=package))


def test_nothing_renders_before_the_session_is_loaded(store) -> None:
    navigator = Navigator("/dashboard")
    router = _router(store, navigator)

    assert router.render() is None
    assert navigator.location == "/dashboard"


def test_anonymous_visitor_is_redirected_with_replace(store) -> None:
    store.load()
    navigator = Navigator("/dashboard")
    router = _router(store, navigator)

    assert router.render() is None
    assert navigator.location == "/auth"
    assert navigator.history == ["/auth"]
    assert router.render() == "view:/auth"


def test_client_without_package_is_sent_to_selection(store) -> None:
    _sign_in(store, UserRole.BRIDE)
    navigator = Navigator("/wedding-journey")
    router = _router(store, navigator)

    assert router.render() is None
    assert navigator.location == "/select-package"
    assert router.render() == "view:/select-package"


def test_role_dashboards(store) -> None:
    _sign_in(store, UserRole.VENDOR)
    navigator = Navigator()
    router = _router(store, navigator)

    assert router.render("/vendor-dashboard") == "view:/vendor-dashboard"
    assert router.render("/admin-dashboard") is None
    assert navigator.location == "/vendor-dashboard"


def test_public_routes(store) -> None:
    _sign_in(store, UserRole.GROOM, PackageTier.GOLD)
    navigator = Navigator("/auth")
    router = _router(store, navigator)

    assert router.render("/") == "view:/"
    assert router.render() is None
    assert navigator.location == "/dashboard"
    assert router.render() == "view:/dashboard"


def test_unknown_path_and_query_strings(store) -> None:
    store.load()
    router = _router(store, Navigator())

    assert router.render("/nowhere") == "not-found"
    assert router.match("/auth?next=/dashboard").path == "/auth"


def test_missing_views_are_skipped() -> None:
    routes = build_default_routes({"/auth": lambda: None})
    assert [route.path for route in routes] == ["/auth"]
    assert routes[0].public is True


def test_navigator_history() -> None:
    navigator = Navigator()
    navigator.navigate("/auth")
    navigator.navigate("/dashboard", replace=True)
    assert navigator.history == ["/", "/dashboard"]


def test_custom_route_table(store) -> None:
    _sign_in(store, UserRole.SUPERVISOR)
    route = Route(
        "/reports",
        lambda: "reports",
        required_roles=frozenset({UserRole.SUPERVISOR, UserRole.ADMIN}),
        requires_package=True,
    )
    router = Router([route], store, Navigator("/reports"))

    assert router.render() == "reports"
