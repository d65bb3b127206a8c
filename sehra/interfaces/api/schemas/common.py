"""Schemas shared by several endpoints."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    message: str
    errors: list[Any] | None = None
