"""Response envelope shared by every endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Uniform ``{"success": ..., "data": ...}`` response body."""

    success: bool = True
    message: str | None = None
    data: DataT | None = None


__all__ = ["ApiResponse"]
