from __future__ import annotations

from typing import Any

from luxestay_control.clients.luxestay_sdk.listing import ListingClient
from luxestay_control.clients.luxestay_sdk.normalizers import unwrap_record


class RoomsClient(ListingClient):
    resource = "rooms"

    def list_rooms(
        self,
        page: int | None = None,
        page_size: int | None = None,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        return self._list(
            page=page,
            page_size=page_size,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            status=status,
        )

    def get_room(self, room_id: str) -> dict[str, Any]:
        return unwrap_record(self.http_client.request("GET", f"{self.path}/{room_id}"))
