"""WebPurify client configuration models."""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigError


REST_PATH = "/services/rest/"


class Region(str, Enum):
    """Regional API endpoints."""
    US = "us"
    EU = "eu"
    AP = "ap"


REGION_HOSTS = {
    Region.US: "api1.webpurify.com",
    Region.EU: "api1-eu.webpurify.com",
    Region.AP: "api1-ap.webpurify.com",
}


class ClientConfig(BaseModel):
    """Immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    region: Region = Region.US
    enterprise: bool = False  # HTTPS transport
    timeout: float = 10.0

    @field_validator("api_key", mode="before")
    @classmethod
    def _require_key(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Invalid API Key")
        return v

    @field_validator("region", mode="before")
    @classmethod
    def _lower_region(cls, v: Any) -> Any:
        if v is None:
            return Region.US
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @property
    def host(self) -> str:
        return REGION_HOSTS[self.region]

    @property
    def scheme(self) -> str:
        return "https" if self.enterprise else "http"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"


def build_client_config(options: ClientConfig | Mapping[str, Any]) -> ClientConfig:
    """Coerce constructor options into a ``ClientConfig``.

    Accepts an existing config or a mapping using either ``region`` or the
    legacy ``endpoint`` key. Any failure is reported as ``ConfigError``.
    """
    if isinstance(options, ClientConfig):
        return options
    if not isinstance(options, Mapping):
        raise ConfigError("Invalid parameters")

    api_key = options.get("api_key")
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigError("Invalid API Key", field="api_key")

    data = {k: v for k, v in options.items() if k != "endpoint"}
    if "region" not in data and options.get("endpoint") is not None:
        data["region"] = options["endpoint"]
    data = {k: v for k, v in data.items() if v is not None}

    try:
        return ClientConfig(**data)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else None
        if field == "region":
            message = f"Unknown region: {options.get('region', options.get('endpoint'))!r}"
        else:
            message = first.get("msg", "Invalid parameters")
        fields = [".".join(str(p) for p in e.get("loc", ())) for e in exc.errors()]
        raise ConfigError(message, field=field, details={"fields": fields}) from exc
