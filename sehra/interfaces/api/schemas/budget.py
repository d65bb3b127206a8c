"""Budget item schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class BudgetItemCreate(BaseModel):
    category: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=200)
    estimated_cost: float = Field(..., ge=0)
    description: str | None = None
    actual_cost: float | None = Field(default=None, ge=0)
    paid_amount: float = Field(default=0.0, ge=0)
    vendor_id: int | None = None
    due_date: date | None = None
    is_paid: bool = False
    notes: str | None = None


class BudgetItemUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: str | None = Field(default=None, min_length=1, max_length=50)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    estimated_cost: float | None = Field(default=None, ge=0)
    description: str | None = None
    actual_cost: float | None = Field(default=None, ge=0)
    paid_amount: float | None = Field(default=None, ge=0)
    vendor_id: int | None = None
    due_date: date | None = None
    is_paid: bool | None = None
    notes: str | None = None


class BudgetItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    category: str
    title: str
    estimated_cost: float
    description: str | None
    actual_cost: float | None
    paid_amount: float
    outstanding: float
    vendor_id: int | None
    due_date: date | None
    is_paid: bool
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None
