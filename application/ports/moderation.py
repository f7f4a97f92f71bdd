"""
Moderation gateway port (application/ports) exposing a replaceable protocol.

Application depends on this Protocol; infrastructure implements adapters.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ModerationGateway(Protocol):
    """Gateway protocol for third-party profanity filters.

    Implementations should be async and side-effect free beyond IO.
    """

    provider: str

    async def check(self, text: str, *, options: Optional[Mapping[str, Any]] = None) -> bool: ...

    async def check_count(self, text: str, *, options: Optional[Mapping[str, Any]] = None) -> int: ...

    async def replace(
        self, text: str, replace_symbol: str, *, options: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]: ...

    async def return_expletives(self, text: str, *, options: Optional[Mapping[str, Any]] = None) -> list[str]: ...

    async def add_to_blacklist(
        self, word: str, deep_search: Optional[bool] = None, *, options: Optional[Mapping[str, Any]] = None
    ) -> bool: ...

    async def remove_from_blacklist(self, word: str, *, options: Optional[Mapping[str, Any]] = None) -> bool: ...

    async def get_blacklist(self, *, options: Optional[Mapping[str, Any]] = None) -> list[str]: ...

    async def add_to_whitelist(self, word: str, *, options: Optional[Mapping[str, Any]] = None) -> bool: ...

    async def remove_from_whitelist(self, word: str, *, options: Optional[Mapping[str, Any]] = None) -> bool: ...

    async def get_whitelist(self, *, options: Optional[Mapping[str, Any]] = None) -> list[str]: ...
