from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from luxestay_control.clients.luxestay_sdk.config import (
    DEFAULT_BASE_URL,
    SDKConfig,
    parse_bool,
    read_float,
    read_int,
)
from shared.data_table import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE_OPTIONS

DEFAULT_EXPORT_DIR = "out/exports"


@dataclass(frozen=True)
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    verify_ssl: bool = True
    retry_max_attempts: int = 3
    retry_backoff_ms: int = 150
    page_size: int = DEFAULT_PAGE_SIZE
    export_dir: str = DEFAULT_EXPORT_DIR

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "AppConfig":
        load_dotenv(env_file)
        config = cls(
            base_url=os.getenv("LUXESTAY_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/"),
            timeout_seconds=read_float("LUXESTAY_TIMEOUT_SECONDS", "10"),
            verify_ssl=parse_bool(os.getenv("LUXESTAY_VERIFY_SSL"), default=True),
            retry_max_attempts=read_int("LUXESTAY_RETRY_MAX_ATTEMPTS", "3"),
            retry_backoff_ms=read_int("LUXESTAY_RETRY_BACKOFF_MS", "150"),
            page_size=read_int("LUXESTAY_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)),
            export_dir=os.getenv("LUXESTAY_EXPORT_DIR", DEFAULT_EXPORT_DIR).strip() or DEFAULT_EXPORT_DIR,
        )
        config.validate()
        return config

    def validate(self) -> None:
        self.sdk_config().validate()
        if self.page_size not in DEFAULT_PAGE_SIZE_OPTIONS:
            options = ", ".join(str(option) for option in DEFAULT_PAGE_SIZE_OPTIONS)
            raise ValueError(f"LUXESTAY_PAGE_SIZE must be one of {options}")

    def sdk_config(self) -> SDKConfig:
        return SDKConfig(
            base_url=self.base_url,
            timeout_seconds=self.timeout_seconds,
            verify_ssl=self.verify_ssl,
            retry_max_attempts=self.retry_max_attempts,
            retry_backoff_ms=self.retry_backoff_ms,
        )
