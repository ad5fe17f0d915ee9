"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000"
TRANSPORTS = ("http", "stdio")

_TRUE_VALUES = ("1", "true", "yes", "y", "on")
_FALSE_VALUES = ("0", "false", "no", "n", "off")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


class Settings(BaseModel):
    """Server configuration."""

    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    allowed_origins: list[str] = Field(default_factory=lambda: [DEFAULT_ALLOWED_ORIGINS])
    afternoon_end_inclusive: bool = True
    transport: str = "http"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from RECEIPT_POINTS_* variables (and LOG_LEVEL)."""
        env = os.environ if environ is None else environ

        port_raw = env.get("RECEIPT_POINTS_PORT", str(DEFAULT_PORT))
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"RECEIPT_POINTS_PORT must be an integer, got {port_raw!r}") from None

        transport = env.get("RECEIPT_POINTS_TRANSPORT", "http").strip().lower()
        if transport not in TRANSPORTS:
            raise ValueError(f"RECEIPT_POINTS_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}")

        origins = [
            origin.strip()
            for origin in env.get("RECEIPT_POINTS_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS).split(",")
            if origin.strip()
        ]

        return cls(
            host=env.get("RECEIPT_POINTS_HOST", DEFAULT_HOST),
            port=port,
            allowed_origins=origins,
            afternoon_end_inclusive=_parse_bool(
                "RECEIPT_POINTS_AFTERNOON_END_INCLUSIVE",
                env.get("RECEIPT_POINTS_AFTERNOON_END_INCLUSIVE", "true"),
            ),
            transport=transport,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
