"""Persistence helpers for vendor profiles."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import VendorProfile, VendorType
from sehra.infrastructure.models import VendorProfileModel


class VendorProfileRepository:
    """Provide CRUD operations for :class:`VendorProfile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, vendor_type: VendorType | None = None) -> Sequence[VendorProfile]:
        query = self.session.query(VendorProfileModel)
        if vendor_type is not None:
            query = query.filter(VendorProfileModel.vendor_type == vendor_type.value)
        query = query.order_by(
            VendorProfileModel.featured.desc(),
            VendorProfileModel.verified.desc(),
            VendorProfileModel.rating.desc(),
            VendorProfileModel.id,
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, vendor_id: int) -> VendorProfile | None:
        model = self.session.get(VendorProfileModel, vendor_id)
        return self._to_entity(model) if model else None

    def get_by_user(self, user_id: int) -> VendorProfile | None:
        model = (
            self.session.query(VendorProfileModel)
            .filter(VendorProfileModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, profile: VendorProfile) -> VendorProfile:
        model = VendorProfileModel(user_id=profile.user_id)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, profile: VendorProfile) -> VendorProfile:
        model = self.session.get(VendorProfileModel, profile.id)
        if model is None:
            msg = f"Vendor profile with id {profile.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, profile)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: VendorProfileModel, profile: VendorProfile) -> None:
        model.business_name = profile.business_name
        model.description = profile.description
        model.vendor_type = profile.vendor_type.value
        model.contact_email = profile.contact_email
        model.contact_phone = profile.contact_phone
        model.address = profile.address
        model.website = profile.website
        model.services = list(profile.services or [])
        model.pricing = dict(profile.pricing or {})
        model.rating = profile.rating
        model.featured = profile.featured
        model.verified = profile.verified

    @staticmethod
    def _to_entity(model: VendorProfileModel) -> VendorProfile:
        return VendorProfile(
            id=model.id,
            user_id=model.user_id,
            business_name=model.business_name,
            vendor_type=VendorType(model.vendor_type),
            description=model.description,
            contact_email=model.contact_email,
            contact_phone=model.contact_phone,
            address=model.address,
            website=model.website,
            services=list(model.services or []),
            pricing=dict(model.pricing or {}),
            rating=model.rating or 0.0,
            featured=model.featured,
            verified=model.verified,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["VendorProfileRepository"]
