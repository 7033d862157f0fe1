"""Pydantic request/response schemas for the Warehousing API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateWarehouseRequest(BaseModel):
    business_unit_code: str = Field(min_length=1, max_length=50)
    location: str = Field(min_length=1, max_length=50)
    capacity: int = Field(ge=0)
    stock: int = Field(ge=0, default=0)


class ReplaceWarehouseRequest(BaseModel):
    location: str = Field(min_length=1, max_length=50)
    capacity: int = Field(ge=0)
    stock: int = Field(ge=0, default=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class WarehouseResponse(BaseModel):
    warehouse_id: str
    business_unit_code: str
    location: str
    capacity: int
    stock: int
    created_at: datetime | None = None
    archived_at: datetime | None = None


class LocationResponse(BaseModel):
    identification: str
    max_number_of_warehouses: int
    max_capacity: int


class ErrorResponse(BaseModel):
    error_id: str
    code: int
    error: str
    exception_type: str
    timestamp: datetime
