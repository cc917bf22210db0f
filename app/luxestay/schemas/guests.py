from app.luxestay.schemas.common import CamelModel


class Guest(CamelModel):
    id: str
    hotel_id: str
    name: str
    email: str
    phone: str | None = None
    id_type: str | None = None
    id_number: str | None = None
    address: str | None = None
    total_stays: int = 0
    total_spent: float = 0
    avatar: str | None = None
