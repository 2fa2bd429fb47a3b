"""Generic API response envelope model.

Every backend response is wrapped in this envelope:
{ success: bool, message: str | None, data: T | None, total: int | None, error: str | None }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all backend responses."""

    success: bool = True
    message: str | None = None
    data: T | None = None
    total: int | None = None
    error: str | None = None
