from fastapi import APIRouter, Depends, Query

from app.luxestay.core.error_catalog import AppError, ErrorCatalog
from app.luxestay.repos.mock_store import MockStore, get_store
from app.luxestay.schemas.common import ApiErrorResponse, ApiResponse, PaginatedData
from app.luxestay.schemas.rooms import Room
from app.luxestay.services.listing import ListParams, build_listing, list_params
from shared.data_table import Column

router = APIRouter(responses={404: {"model": ApiErrorResponse}, 422: {"model": ApiErrorResponse}})

ROOM_COLUMNS = [
    Column("roomNumber", "Room"),
    Column("categoryName", "Category"),
    Column("hotelName", "Hotel"),
    Column("floor", "Floor"),
    Column("status", "Status"),
    Column("price", "Price"),
    Column("image", "Image", sortable=False, searchable=False),
]


@router.get("/rooms", response_model=ApiResponse[PaginatedData[Room]])
async def list_rooms(
    params: ListParams = Depends(list_params),
    status: str | None = Query(default=None),
    store: MockStore = Depends(get_store),
):
    data = build_listing("rooms", store.rooms, ROOM_COLUMNS, params, exact_filters={"status": status})
    return {"success": True, "data": data, "message": "Rooms retrieved successfully", "status": 200}


@router.get("/rooms/{room_id}", response_model=ApiResponse[Room])
async def get_room(room_id: str, store: MockStore = Depends(get_store)):
    room = store.get_room(room_id)
    if room is None:
        raise AppError(ErrorCatalog.NOT_FOUND, details={"resource": "room", "id": room_id})
    return {"success": True, "data": room, "message": "Room retrieved successfully", "status": 200}
