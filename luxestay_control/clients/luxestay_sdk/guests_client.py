from __future__ import annotations

from typing import Any

from luxestay_control.clients.luxestay_sdk.listing import ListingClient
from luxestay_control.clients.luxestay_sdk.normalizers import unwrap_record


class GuestsClient(ListingClient):
    resource = "guests"

    def list_guests(
        self,
        page: int | None = None,
        page_size: int | None = None,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> dict[str, Any]:
        return self._list(page=page, page_size=page_size, search=search, sort_by=sort_by, sort_order=sort_order)

    def get_guest(self, guest_id: str) -> dict[str, Any]:
        return unwrap_record(self.http_client.request("GET", f"{self.path}/{guest_id}"))
