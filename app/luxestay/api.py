from fastapi import APIRouter

from app.luxestay.core.config import settings
from app.luxestay.routers.bookings import router as bookings_router
from app.luxestay.routers.guests import router as guests_router
from app.luxestay.routers.health import router as health_router
from app.luxestay.routers.rooms import router as rooms_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(rooms_router, prefix=settings.API_PREFIX, tags=["rooms"])
api_router.include_router(guests_router, prefix=settings.API_PREFIX, tags=["guests"])
api_router.include_router(bookings_router, prefix=settings.API_PREFIX, tags=["bookings"])
