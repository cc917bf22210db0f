from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

TRACE_HEADER = "X-Trace-ID"


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        header_trace_id = response.headers.get(TRACE_HEADER)
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            return cls(
                code=str(payload.get("code") or "HTTP_ERROR"),
                message=str(payload.get("message") or response.text or "HTTP request failed"),
                details=payload.get("details"),
                trace_id=payload.get("trace_id") or header_trace_id,
                status_code=response.status_code,
            )

        return cls(
            code="HTTP_ERROR",
            message=response.text or "HTTP request failed",
            details=payload,
            trace_id=header_trace_id,
            status_code=response.status_code,
        )
