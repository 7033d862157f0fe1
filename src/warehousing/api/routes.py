"""FastAPI routes for the Warehousing domain — warehouses and locations."""

from fastapi import APIRouter, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from warehousing.api.schemas import (
    CreateWarehouseRequest,
    LocationResponse,
    ReplaceWarehouseRequest,
    WarehouseResponse,
)
from warehousing.location import get_location_resolver
from warehousing.warehouse.operations import (
    archive_warehouse,
    create_warehouse,
    replace_warehouse,
)
from warehousing.warehouse.warehouse import Warehouse


def _to_response(warehouse) -> WarehouseResponse:
    return WarehouseResponse(
        warehouse_id=str(warehouse.id),
        business_unit_code=warehouse.business_unit_code,
        location=warehouse.location,
        capacity=warehouse.capacity,
        stock=warehouse.stock,
        created_at=warehouse.created_at,
        archived_at=warehouse.archived_at,
    )


# ---------------------------------------------------------------------------
# Warehouse Router
# ---------------------------------------------------------------------------
warehouse_router = APIRouter(prefix="/warehouses", tags=["warehouses"])


@warehouse_router.get("", response_model=list[WarehouseResponse])
async def list_warehouses() -> list[WarehouseResponse]:
    warehouses = current_domain.repository_for(Warehouse).get_all()
    warehouses = sorted(warehouses, key=lambda w: (w.business_unit_code, w.created_at))
    return [_to_response(w) for w in warehouses]


@warehouse_router.get("/{business_unit_code}", response_model=WarehouseResponse)
async def get_warehouse(business_unit_code: str) -> WarehouseResponse:
    warehouse = current_domain.repository_for(Warehouse).find_by_business_unit_code(business_unit_code)
    if warehouse is None:
        raise ObjectNotFoundError(
            {
                "business_unit_code": [
                    f"Warehouse with business unit code '{business_unit_code}' does not exist."
                ]
            }
        )
    return _to_response(warehouse)


@warehouse_router.post("", status_code=201, response_model=WarehouseResponse)
async def create(body: CreateWarehouseRequest) -> WarehouseResponse:
    warehouse_id = create_warehouse(
        business_unit_code=body.business_unit_code,
        location=body.location,
        capacity=body.capacity,
        stock=body.stock,
    )
    return _to_response(current_domain.repository_for(Warehouse).get(warehouse_id))


@warehouse_router.delete("/{business_unit_code}", status_code=204)
async def archive(business_unit_code: str) -> Response:
    archive_warehouse(business_unit_code=business_unit_code)
    return Response(status_code=204)


@warehouse_router.post("/{business_unit_code}/replacement", status_code=201, response_model=WarehouseResponse)
async def replace(business_unit_code: str, body: ReplaceWarehouseRequest) -> WarehouseResponse:
    warehouse_id = replace_warehouse(
        business_unit_code=business_unit_code,
        location=body.location,
        capacity=body.capacity,
        stock=body.stock,
    )
    return _to_response(current_domain.repository_for(Warehouse).get(warehouse_id))


# ---------------------------------------------------------------------------
# Location Router
# ---------------------------------------------------------------------------
location_router = APIRouter(prefix="/locations", tags=["locations"])


@location_router.get("", response_model=list[LocationResponse])
async def list_locations() -> list[LocationResponse]:
    return [
        LocationResponse(
            identification=loc.identification,
            max_number_of_warehouses=loc.max_number_of_warehouses,
            max_capacity=loc.max_capacity,
        )
        for loc in get_location_resolver().all()
    ]
