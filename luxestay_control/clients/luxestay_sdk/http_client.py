from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import httpx

from luxestay_control.clients.luxestay_sdk.config import SDKConfig
from luxestay_control.clients.luxestay_sdk.errors import ApiError

Transport = Callable[..., httpx.Response]


class HttpClient:
    def __init__(self, config: SDKConfig | None = None, transport: Transport | None = None) -> None:
        self.config = config or SDKConfig.from_env()
        self.base_url = self.config.base_url.rstrip("/")
        self.retry_max_attempts = max(1, self.config.retry_max_attempts)
        self.retry_backoff_ms = max(0, self.config.retry_backoff_ms)
        self.transport = transport or httpx.request

    def request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        request_headers = {"Accept": "application/json", **(headers or {})}
        normalized_path = path if path.startswith("/") else f"/{path}"
        url = f"{self.base_url}{normalized_path}"
        allow_retry = method.upper() == "GET"

        for attempt in range(1, self.retry_max_attempts + 1):
            try:
                response = self.transport(
                    method.upper(),
                    url,
                    params=params,
                    json=json_body,
                    headers=request_headers,
                    timeout=self.config.timeout_seconds,
                    verify=self.config.verify_ssl,
                )
            except httpx.TimeoutException as exc:
                if (not allow_retry) or attempt >= self.retry_max_attempts:
                    raise ApiError(
                        code="TIMEOUT_ERROR",
                        message="The request timed out while calling the LuxeStay API",
                        details=str(exc),
                    ) from exc
                self._backoff(attempt)
                continue
            except httpx.TransportError as exc:
                if (not allow_retry) or attempt >= self.retry_max_attempts:
                    raise ApiError(
                        code="NETWORK_ERROR",
                        message="Could not reach the LuxeStay API",
                        details=str(exc),
                    ) from exc
                self._backoff(attempt)
                continue

            if response.status_code >= 400:
                error = ApiError.from_http_response(response)
                if allow_retry and self._is_retryable_status(response.status_code) and attempt < self.retry_max_attempts:
                    self._backoff(attempt)
                    continue
                raise error
            return self._safe_json(response)

        raise ApiError(code="NETWORK_ERROR", message="Could not reach the LuxeStay API", details="retry exhausted")

    def _backoff(self, attempt: int) -> None:
        time.sleep((self.retry_backoff_ms * attempt) / 1000)

    @staticmethod
    def _is_retryable_status(status_code: int) -> bool:
        return 500 <= status_code <= 599

    @staticmethod
    def _safe_json(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {"data": payload}
