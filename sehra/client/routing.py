"""Route composition: bind paths to views behind Role Guard decisions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from sehra.domain.entities import UserRole

from .role_guard import (
    AccessDecision,
    Allow,
    RedirectTo,
    evaluate_access,
    evaluate_public_access,
)
from .session import SessionStore

logger = logging.getLogger(__name__)

View = Callable[[], Any]


@dataclass(frozen=True)
class Route:
    path: str
    view: View
    required_roles: frozenset[UserRole] = field(default_factory=frozenset)
    requires_package: bool = False
    public: bool = False
    no_redirect: bool = False


class Navigator:
    """Holds the current location; the only place navigation happens."""

    def __init__(self, initial: str = "/") -> None:
        self.location = initial
        self.history: list[str] = [initial]

    def navigate(self, path: str, *, replace: bool = False) -> None:
        if replace and self.history:
            self.history[-1] = path
        else:
            self.history.append(path)
        self.location = path
        logger.debug("Navigated to %s%s", path, " (replace)" if replace else "")


class Router:
    """Resolve a path to a route and render it when the guard allows."""

    def __init__(
        self,
        routes: Iterable[Route],
        session_store: SessionStore,
        navigator: Navigator,
        not_found: View | None = None,
    ) -> None:
        self._routes = {route.path: route for route in routes}
        self._session_store = session_store
        self._navigator = navigator
        self._not_found = not_found

    def match(self, path: str) -> Route | None:
        return self._routes.get(urlsplit(path).path or "/")

    def decide(self, route: Route) -> AccessDecision | None:
        """Return the guard decision, or ``None`` while the session is still loading."""

        if not self._session_store.loaded:
            return None

        session = self._session_store.current()
        is_authenticated = session is not None
        role = session.role if session else None
        has_package = session.has_package if session else False

        if route.public:
            return evaluate_public_access(
                is_authenticated, role, has_package, no_redirect=route.no_redirect
            )
        return evaluate_access(
            is_authenticated,
            role,
            has_package,
            required_roles=route.required_roles,
            requires_package=route.requires_package,
        )

    def render(self, path: str | None = None) -> Any:
        """Render the view at ``path`` (default: current location).

        Nothing renders while the guard is pending; a redirect navigates
        with ``replace`` and renders nothing either.
        """

        target = path if path is not None else self._navigator.location
        route = self.match(target)
        if route is None:
            return self._not_found() if self._not_found else None

        decision = self.decide(route)
        if decision is None:
            return None
        if isinstance(decision, RedirectTo):
            self._navigator.navigate(decision.path, replace=True)
            return None
        if isinstance(decision, Allow):
            return route.view()
        return None


def build_default_routes(views: Mapping[str, View]) -> list[Route]:
    """Return the application's route table for the given path→view mapping.

    Paths missing from ``views`` are skipped.
    """

    table = [
        Route("/", views.get("/"), public=True, no_redirect=True),
        Route("/auth", views.get("/auth"), public=True),
        Route("/select-package", views.get("/select-package")),
        Route("/dashboard", views.get("/dashboard"), requires_package=True),
        Route("/wedding-journey", views.get("/wedding-journey"), requires_package=True),
        Route(
            "/admin-dashboard",
            views.get("/admin-dashboard"),
            required_roles=frozenset({UserRole.ADMIN}),
        ),
        Route(
            "/vendor-dashboard",
            views.get("/vendor-dashboard"),
            required_roles=frozenset({UserRole.VENDOR}),
        ),
        Route(
            "/supervisor-dashboard",
            views.get("/supervisor-dashboard"),
            required_roles=frozenset({UserRole.SUPERVISOR}),
        ),
    ]
    return [route for route in table if route.view is not None]


__all__ = ["Navigator", "Route", "Router", "View", "build_default_routes"]
