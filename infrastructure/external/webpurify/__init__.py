"""WebPurify client entry point and lifecycle management."""
from typing import Optional

from core.config import settings, WebPurifySettings
from core.logging_config import get_logger
from .client import WebPurifyClient
from .config import ClientConfig, Region, REGION_HOSTS, build_client_config
from .exceptions import (
    WebPurifyError,
    ConfigError,
    InvalidArgumentError,
    TransportError,
    ParseError,
    ApiError,
)

logger = get_logger(__name__)

# Global client instance shared by the HTTP facade
_moderation_client: Optional[WebPurifyClient] = None


def get_client_config(group: Optional[WebPurifySettings] = None) -> ClientConfig:
    """Assemble ClientConfig from core.config.settings.webpurify.

    Raises:
        ConfigError: api key missing or region unknown
    """
    s = group or settings.webpurify
    return build_client_config(
        {
            "api_key": s.api_key,
            "region": s.region,
            "enterprise": s.enterprise,
            "timeout": s.timeout,
        }
    )


def get_moderation_client() -> WebPurifyClient:
    """Create a new client from settings (caller owns and closes it)."""
    return WebPurifyClient(get_client_config())


async def init_moderation_client() -> None:
    """Initialize the shared client."""
    global _moderation_client

    if _moderation_client is not None:
        logger.warning("Moderation client already initialized")
        return

    _moderation_client = get_moderation_client()
    logger.info(
        "Moderation client initialized",
        provider=_moderation_client.provider,
        region=_moderation_client.config.region.value,
        enterprise=_moderation_client.config.enterprise,
    )


def get_moderation_client_instance() -> Optional[WebPurifyClient]:
    """Get the shared client, or None if not initialized."""
    return _moderation_client


async def shutdown_moderation_client() -> None:
    """Close the shared client."""
    global _moderation_client

    if _moderation_client is not None:
        await _moderation_client.aclose()
        _moderation_client = None
        logger.info("Moderation client shutdown")


__all__ = [
    "WebPurifyClient",
    "ClientConfig",
    "Region",
    "REGION_HOSTS",
    "build_client_config",
    "get_client_config",
    "get_moderation_client",
    "init_moderation_client",
    "get_moderation_client_instance",
    "shutdown_moderation_client",
    "WebPurifyError",
    "ConfigError",
    "InvalidArgumentError",
    "TransportError",
    "ParseError",
    "ApiError",
]
