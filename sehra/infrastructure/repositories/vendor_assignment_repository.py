"""Persistence of supervisor vendor recommendations."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from sehra.infrastructure.models import VendorAssignmentModel


class VendorAssignmentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_vendor_ids(self, client_id: int) -> list[int]:
        query = (
            self.session.query(VendorAssignmentModel.vendor_user_id)
            .filter(VendorAssignmentModel.client_id == client_id)
            .order_by(VendorAssignmentModel.id)
        )
        return [vendor_user_id for (vendor_user_id,) in query.all()]

    def replace(
        self, client_id: int, vendor_user_ids: Iterable[int], *, assigned_by: int | None
    ) -> list[int]:
        """Make ``vendor_user_ids`` the complete assignment list of ``client_id``."""

        self.session.query(VendorAssignmentModel).filter(
            VendorAssignmentModel.client_id == client_id
        ).delete(synchronize_session=False)
        unique_ids = list(dict.fromkeys(vendor_user_ids))
        for vendor_user_id in unique_ids:
            self.session.add(
                VendorAssignmentModel(
                    client_id=client_id,
                    vendor_user_id=vendor_user_id,
                    assigned_by=assigned_by,
                )
            )
        self.session.commit()
        return unique_ids
