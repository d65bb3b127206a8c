"""Use case for updating the caller's own profile."""

from dataclasses import replace
from datetime import date

from sqlalchemy.orm import Session

from sehra.domain.entities import User
from sehra.infrastructure.repositories import UserRepository


def update_profile(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    wedding_date: date | None = None,
    budget: float | None = None,
    location: str | None = None,
    partner_name: str | None = None,
) -> User:
    """Update profile fields; role and password cannot be changed here."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise ValueError("User not found")

    new_email = current_user.email
    if email is not None and email.strip().lower() != current_user.email:
        existing = repository.get_by_email(email)
        if existing and existing.id != user_id:
            raise ValueError("Email is already registered")
        new_email = email.strip().lower()

    updated_user = replace(
        current_user,
        name=name if name is not None else current_user.name,
        email=new_email,
        wedding_date=wedding_date if wedding_date is not None else current_user.wedding_date,
        budget=budget if budget is not None else current_user.budget,
        location=location if location is not None else current_user.location,
        partner_name=partner_name if partner_name is not None else current_user.partner_name,
    )
    return repository.update(updated_user)
