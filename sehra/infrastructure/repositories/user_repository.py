"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import User, UserRole, parse_package_tier
from sehra.infrastructure.models import UserModel


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.id).offset(skip).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_by_roles(self, roles: Iterable[UserRole]) -> Sequence[User]:
        values = [role.value for role in roles]
        query = (
            self.session.query(UserModel)
            .filter(UserModel.role.in_(values))
            .order_by(UserModel.name)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_by_supervisor(self, supervisor_id: int) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .filter(UserModel.supervisor_id == supervisor_id)
            .order_by(UserModel.name)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def clear_supervisor(self, supervisor_id: int) -> int:
        """Detach every client from ``supervisor_id``; returns how many were detached."""

        updated = (
            self.session.query(UserModel)
            .filter(UserModel.supervisor_id == supervisor_id)
            .update({UserModel.supervisor_id: None}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            role=UserRole(model.role),
            package=parse_package_tier(model.package),
            wedding_date=model.wedding_date,
            budget=model.budget,
            location=model.location,
            partner_name=model.partner_name,
            supervisor_id=model.supervisor_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email.strip().lower()
        model.password = user.password
        model.role = user.role.value
        model.package = user.package.value if user.package else None
        model.wedding_date = user.wedding_date
        model.budget = user.budget
        model.location = user.location
        model.partner_name = user.partner_name
        model.supervisor_id = user.supervisor_id
