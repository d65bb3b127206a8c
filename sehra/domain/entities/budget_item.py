"""Domain entity representing a budget line."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class BudgetItem:
    """Planned or actual expense tracked by a client."""

    id: int | None
    user_id: int
    category: str
    title: str
    estimated_cost: float
    description: str | None = None
    actual_cost: float | None = None
    paid_amount: float = 0.0
    vendor_id: int | None = None
    due_date: date | None = None
    is_paid: bool = False
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def outstanding(self) -> float:
        """Amount still owed against the actual (or estimated) cost."""

        total = self.actual_cost if self.actual_cost is not None else self.estimated_cost
        return max(total - (self.paid_amount or 0.0), 0.0)
