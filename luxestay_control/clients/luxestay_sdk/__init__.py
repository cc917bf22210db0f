from luxestay_control.clients.luxestay_sdk.bookings_client import BookingsClient
from luxestay_control.clients.luxestay_sdk.config import SDKConfig
from luxestay_control.clients.luxestay_sdk.errors import ApiError
from luxestay_control.clients.luxestay_sdk.guests_client import GuestsClient
from luxestay_control.clients.luxestay_sdk.http_client import HttpClient
from luxestay_control.clients.luxestay_sdk.listing import build_query_params
from luxestay_control.clients.luxestay_sdk.normalizers import normalize_listing
from luxestay_control.clients.luxestay_sdk.rooms_client import RoomsClient

__all__ = [
    "SDKConfig",
    "ApiError",
    "HttpClient",
    "RoomsClient",
    "GuestsClient",
    "BookingsClient",
    "build_query_params",
    "normalize_listing",
]
