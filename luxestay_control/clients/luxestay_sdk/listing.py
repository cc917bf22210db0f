from __future__ import annotations

from typing import Any

from luxestay_control.clients.luxestay_sdk.http_client import HttpClient
from luxestay_control.clients.luxestay_sdk.normalizers import normalize_listing

MAX_FETCH_PAGES = 100


class ListingClient:
    resource: str = ""

    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    @property
    def path(self) -> str:
        return f"/api/{self.resource}"

    def _list(self, **query: Any) -> dict[str, Any]:
        page = query.get("page") or 1
        page_size = query.get("page_size") or 10
        params = build_query_params(**query)
        payload = self.http_client.request("GET", self.path, params=params)
        return normalize_listing(payload, page=page, page_size=page_size)

    def fetch_all_rows(self, *, page_size: int = 100, **filters: Any) -> list[dict[str, Any]]:
        """Walk every page of the listing and return the concatenated rows."""
        rows: list[dict[str, Any]] = []
        page = 1
        while page <= MAX_FETCH_PAGES:
            listing = self._list(page=page, page_size=page_size, **filters)
            rows.extend(listing["rows"])
            if not listing["has_next"]:
                break
            page += 1
        return rows


def build_query_params(
    *,
    page: int | None = None,
    page_size: int | None = None,
    search: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    params = {
        "page": page,
        "pageSize": page_size,
        "search": search,
        "sortBy": sort_by,
        "sortOrder": sort_order,
    }
    params.update({_camel(key): value for key, value in extra.items()})
    return {key: value for key, value in params.items() if value not in (None, "")}


def _camel(key: str) -> str:
    head, *tail = key.split("_")
    return head + "".join(part.title() for part in tail)
