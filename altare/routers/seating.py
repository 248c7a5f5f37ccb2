### Description ###
# Altare Planner - Wedding Planning API
# - Seating Chart Router -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Seating Chart Endpoints

Table templates, tables and chairs for the signed-in planner.
Tables and chairs are scoped to their owner; another planner's
table answers 404.
"""

from fastapi import APIRouter, Depends, Request, status

from altare.dependencies import get_table_layout_service
from altare.middleware.auth import ActorInfo, get_current_user
from altare.middleware.rate_limit import TABLE_CREATE_RATE_LIMIT, limiter
from altare.schemas.responses import APIResponse, ListResponse
from altare.schemas.seating import (
    ChairAssignment,
    SeatingTableCreate,
    SeatingTableDetail,
    SeatingTableResponse,
    TableChairResponse,
    TableTemplateCreate,
    TableTemplateResponse,
)
from altare.services import TableLayoutService

router = APIRouter()


# ========================================
# Template Endpoints
# ========================================

@router.get(
    "/templates",
    response_model=ListResponse[TableTemplateResponse],
    summary="List table templates",
)
async def list_templates(
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> ListResponse[TableTemplateResponse]:
    """Predefined and user-defined templates, ordered by name"""
    rows = await service.list_templates()
    data = [TableTemplateResponse.model_validate(row) for row in rows]
    return ListResponse(success=True, data=data, count=len(data))


@router.post(
    "/templates",
    response_model=APIResponse[TableTemplateResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create table template",
)
async def create_template(
    data: TableTemplateCreate,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> APIResponse[TableTemplateResponse]:
    """Create a user-defined template"""
    row = await service.create_template(
        name=data.name,
        shape=data.shape,
        width=data.width,
        length=data.length,
        seats=data.seats,
        owner_id=service.persistence.current_actor(),
    )
    return APIResponse(success=True, data=TableTemplateResponse.model_validate(row), message="Template created")


# ========================================
# Table Endpoints
# ========================================

@router.post(
    "/tables",
    response_model=APIResponse[SeatingTableResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add table",
    description="Create a table from a template along with its chairs",
)
@limiter.limit(TABLE_CREATE_RATE_LIMIT)
async def add_table(
    request: Request,
    data: SeatingTableCreate,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> APIResponse[SeatingTableResponse]:
    """
    Add a table to the floor plan.

    If the chairs cannot be created the table is kept and a 500 is returned
    with the table id; POST /tables/{table_id}/chairs retries.
    """
    table = await service.add_table(data.name, data.template_id, service.persistence.current_actor())
    return APIResponse(success=True, data=SeatingTableResponse.model_validate(table), message="Table added")


@router.get(
    "/tables",
    response_model=ListResponse[SeatingTableResponse],
    summary="List tables",
)
async def list_tables(
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> ListResponse[SeatingTableResponse]:
    """Planner's tables, oldest first"""
    rows = await service.list_tables(service.persistence.current_actor())
    data = [SeatingTableResponse.model_validate(row) for row in rows]
    return ListResponse(success=True, data=data, count=len(data))


@router.get(
    "/tables/{table_id}",
    response_model=APIResponse[SeatingTableDetail],
    summary="Get table",
    description="Table with its chairs",
)
async def get_table(
    table_id: int,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> APIResponse[SeatingTableDetail]:
    owner_id = service.persistence.current_actor()
    table = await service.get_table(table_id, owner_id)
    chairs = await service.list_chairs(table_id, owner_id)
    return APIResponse(success=True, data=SeatingTableDetail.model_validate({**table, "chairs": chairs}))


@router.delete(
    "/tables/{table_id}",
    response_model=APIResponse[dict],
    summary="Delete table",
    description="Delete a table and its chairs",
)
async def delete_table(
    table_id: int,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> APIResponse[dict]:
    await service.delete_table(table_id, service.persistence.current_actor())
    return APIResponse(success=True, message=f"Table {table_id} deleted")


# ========================================
# Chair Endpoints
# ========================================

@router.get(
    "/tables/{table_id}/chairs",
    response_model=ListResponse[TableChairResponse],
    summary="List chairs",
)
async def list_chairs(
    table_id: int,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> ListResponse[TableChairResponse]:
    """Chairs in seat order"""
    rows = await service.list_chairs(table_id, service.persistence.current_actor())
    data = [TableChairResponse.model_validate(row) for row in rows]
    return ListResponse(success=True, data=data, count=len(data))


@router.post(
    "/tables/{table_id}/chairs",
    response_model=ListResponse[TableChairResponse],
    summary="Create missing chairs",
    description="Retry chair creation for a table whose chairs failed to save",
)
async def create_missing_chairs(
    table_id: int,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> ListResponse[TableChairResponse]:
    rows = await service.create_missing_chairs(table_id, service.persistence.current_actor())
    data = [TableChairResponse.model_validate(row) for row in rows]
    return ListResponse(success=True, data=data, count=len(data))


@router.patch(
    "/tables/{table_id}/chairs/{position}",
    response_model=APIResponse[TableChairResponse],
    summary="Assign guest",
    description="Seat a guest on a chair, or clear it with guest_id=null",
)
async def assign_guest(
    table_id: int,
    position: int,
    data: ChairAssignment,
    user: ActorInfo = Depends(get_current_user),
    service: TableLayoutService = Depends(get_table_layout_service),
) -> APIResponse[TableChairResponse]:
    row = await service.assign_guest(table_id, position, data.guest_id, service.persistence.current_actor())
    return APIResponse(success=True, data=TableChairResponse.model_validate(row))
