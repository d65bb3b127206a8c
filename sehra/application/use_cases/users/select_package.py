"""Use case for choosing a wedding package."""

from dataclasses import replace
from datetime import date

from sqlalchemy.orm import Session

from sehra.domain.entities import PackageTier, User
from sehra.infrastructure.repositories import UserRepository


def select_package(
    session: Session,
    *,
    user_id: int,
    package: PackageTier,
    budget: float | None = None,
    wedding_date: date | None = None,
    location: str | None = None,
    partner_name: str | None = None,
) -> User:
    """Store the selected package and the wedding details collected alongside it."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("User not found")

    updated = replace(
        user,
        package=package,
        budget=budget if budget is not None else user.budget,
        wedding_date=wedding_date or user.wedding_date,
        location=location or user.location,
        partner_name=partner_name or user.partner_name,
    )
    return repository.update(updated)
