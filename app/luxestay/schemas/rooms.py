from typing import Literal

from app.luxestay.schemas.common import CamelModel

RoomStatus = Literal["available", "occupied", "reserved", "maintenance"]


class Room(CamelModel):
    id: str
    hotel_id: str
    category_id: str
    room_number: str
    floor: int
    status: RoomStatus
    price: float
    image: str | None = None
    is_promoted: bool = False
    category_name: str | None = None
    hotel_name: str | None = None
