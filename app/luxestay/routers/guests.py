from fastapi import APIRouter, Depends

from app.luxestay.core.error_catalog import AppError, ErrorCatalog
from app.luxestay.repos.mock_store import MockStore, get_store
from app.luxestay.schemas.common import ApiErrorResponse, ApiResponse, PaginatedData
from app.luxestay.schemas.guests import Guest
from app.luxestay.services.listing import ListParams, build_listing, list_params
from shared.data_table import Column

router = APIRouter(responses={404: {"model": ApiErrorResponse}, 422: {"model": ApiErrorResponse}})

GUEST_COLUMNS = [
    Column("name", "Guest"),
    Column("email", "Email"),
    Column("phone", "Phone"),
    Column("idType", "ID Type"),
    Column("idNumber", "ID Number"),
    Column("totalStays", "Stays"),
    Column("totalSpent", "Spent"),
    Column("avatar", "Avatar", sortable=False, searchable=False),
]


@router.get("/guests", response_model=ApiResponse[PaginatedData[Guest]])
async def list_guests(params: ListParams = Depends(list_params), store: MockStore = Depends(get_store)):
    data = build_listing("guests", store.guests, GUEST_COLUMNS, params)
    return {"success": True, "data": data, "message": "Guests retrieved successfully", "status": 200}


@router.get("/guests/{guest_id}", response_model=ApiResponse[Guest])
async def get_guest(guest_id: str, store: MockStore = Depends(get_store)):
    guest = store.get_guest(guest_id)
    if guest is None:
        raise AppError(ErrorCatalog.NOT_FOUND, details={"resource": "guest", "id": guest_id})
    return {"success": True, "data": guest, "message": "Guest retrieved successfully", "status": 200}
