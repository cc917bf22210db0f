from __future__ import annotations

from typing import Any


def normalize_listing(payload: Any, *, page: int = 1, page_size: int = 10) -> dict[str, Any]:
    """Flatten a listing envelope into ``rows/page/page_size/total/has_next``.

    Accepts the API envelope (``{"data": {"items": [...], "totalItems": ...}}``),
    a bare ``{"items": [...]}`` body or a plain list.
    """
    safe_page = max(1, int(page or 1))
    safe_page_size = max(1, int(page_size or 10))

    rows: list[Any] = []
    total: int | None = None
    total_pages: int | None = None
    body: dict[str, Any] = {}

    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        data = payload.get("data")
        if isinstance(data, dict):
            body = data
        elif isinstance(data, list):
            rows = data
        else:
            body = payload

    if body:
        if isinstance(body.get("items"), list):
            rows = body["items"]
        elif isinstance(body.get("rows"), list):
            rows = body["rows"]
        total = _to_int(body.get("totalItems"))
        total = total if total is not None else _to_int(body.get("total"))
        total_pages = _to_int(body.get("totalPages"))
        safe_page = _to_int(body.get("currentPage")) or _to_int(body.get("page")) or safe_page
        safe_page_size = _to_int(body.get("pageSize")) or _to_int(body.get("page_size")) or safe_page_size

    safe_page = max(1, safe_page)
    safe_page_size = max(1, safe_page_size)

    if total is None and safe_page == 1 and len(rows) < safe_page_size:
        total = len(rows)
    if total_pages is None and total is not None:
        total_pages = -(-total // safe_page_size)

    has_next = safe_page * safe_page_size < total if total is not None else len(rows) == safe_page_size

    return {
        "rows": rows,
        "page": safe_page,
        "page_size": safe_page_size,
        "total": total,
        "total_pages": total_pages,
        "has_next": has_next,
        "has_prev": safe_page > 1,
    }


def unwrap_record(payload: Any) -> dict[str, Any]:
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload if isinstance(payload, dict) else {}


def _to_int(value: Any) -> int | None:
    try:
        if value is None or value == "":
            return None
        return int(value)
    except (TypeError, ValueError):
        return None
