"""
WebPurify REST client.

Each public method is one stateless GET against ``/services/rest/``:
build query -> request -> unwrap envelope -> reshape.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from core.logging_config import get_logger
from infrastructure.external.api_clients import APIError, BaseAPIClient
from shared.codes.moderation_codes import WEBPURIFY_METHODS

from . import envelope
from .config import REST_PATH, ClientConfig, build_client_config
from .exceptions import ApiError, InvalidArgumentError, ParseError, TransportError


logger = get_logger(__name__)

RESERVED_PARAMS = frozenset({"api_key", "format", "method"})


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"'{name}' must be a string", field=name)
    return value


def _require_word(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"'{name}' must be a non-empty string", field=name)
    return value


def _require_symbol(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError("'replace_symbol' must be a non-empty string", field="replace_symbol")
    return value


def _clean(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


class WebPurifyClient(BaseAPIClient):
    """Async client for the WebPurify live API."""

    provider: str = "webpurify"

    def __init__(
        self,
        options: ClientConfig | Mapping[str, Any],
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = build_client_config(options)
        super().__init__(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=transport,
        )
        self._query_base = {"api_key": self.config.api_key, "format": "json"}

    async def aclose(self) -> None:
        await self.close()

    def build_params(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Assemble the full query for ``method``.

        Neither reserved keys nor the call's own arguments may be
        overridden through ``options``.
        """
        if not isinstance(method, str) or not method:
            raise InvalidArgumentError("'method' must be a non-empty string", field="method")
        if options is not None and not isinstance(options, Mapping):
            raise InvalidArgumentError("'options' must be a mapping", field="options")
        extra = _clean(options)
        required = _clean(params)
        clash = RESERVED_PARAMS.union(required).intersection(extra)
        if clash:
            raise InvalidArgumentError(
                f"options may not override {', '.join(sorted(clash))}",
                field="options",
            )
        return {**self._query_base, "method": method, **required, **extra}

    def _http_failure(self, response) -> TransportError:
        return TransportError(
            f"HTTP {response.status_code} from {self.config.host}",
            status_code=response.status_code,
        )

    async def call_method(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Call a raw API method and return the stripped payload."""
        query = self.build_params(method, params, options)
        try:
            response = await self.get(REST_PATH, params=query)
        except APIError as exc:
            logger.warning("webpurify_transport_error", method=method, error=str(exc))
            raise TransportError(str(exc)) from exc

        try:
            document = response.json()
        except ValueError as exc:
            if response.is_error:
                raise self._http_failure(response) from exc
            logger.warning("webpurify_invalid_json", method=method, status_code=response.status_code)
            raise ParseError("Invalid JSON") from exc

        try:
            payload = envelope.unwrap(document)
        except ApiError as exc:
            logger.info("webpurify_api_error", method=method, provider_code=exc.provider_code, error=exc.message)
            raise
        except ParseError as exc:
            if response.is_error:
                raise self._http_failure(response) from exc
            raise
        logger.debug("webpurify_call_ok", method=method, elapsed_ms=round(response.elapsed_ms, 2))
        return payload

    # Live API ----------------------------------------------------------

    async def check(self, text: str, *, options: Optional[Mapping[str, Any]] = None) -> bool:
        """True if ``text`` contains profanity."""
        res = await self.call_method(
            WEBPURIFY_METHODS["check"], {"text": _require_text(text, "text")}, options
        )
        return envelope.as_flag(res.get("found"))

    async def check_count(self, text: str, *, options: Optional[Mapping[str, Any]] = None) -> int:
        """Number of profane words found in ``text``."""
        res = await self.call_method(
            WEBPURIFY_METHODS["check_count"], {"text": _require_text(text, "text")}, options
        )
        return envelope.as_count(res.get("found"))

    async def replace(
        self,
        text: str,
        replace_symbol: str,
        *,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """``text`` with each profane word masked by ``replace_symbol``."""
        params = {
            "text": _require_text(text, "text"),
            "replacesymbol": _require_symbol(replace_symbol),
        }
        res = await self.call_method(WEBPURIFY_METHODS["replace"], params, options)
        return res.get("text")

    async def return_expletives(self, text: str, *, options: Optional[Mapping[str, Any]] = None) -> list[str]:
        """The profane words found in ``text``."""
        res = await self.call_method(
            WEBPURIFY_METHODS["return_expletives"], {"text": _require_text(text, "text")}, options
        )
        return envelope.as_list(res.get("expletive"))

    # Blacklist ---------------------------------------------------------

    async def add_to_blacklist(
        self,
        word: str,
        deep_search: Optional[bool] = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        params: dict[str, Any] = {"word": _require_word(word, "word")}
        if deep_search is not None:
            params["ds"] = "1" if deep_search else "0"
        res = await self.call_method(WEBPURIFY_METHODS["add_to_blacklist"], params, options)
        return envelope.as_flag(res.get("success"))

    async def remove_from_blacklist(self, word: str, *, options: Optional[Mapping[str, Any]] = None) -> bool:
        res = await self.call_method(
            WEBPURIFY_METHODS["remove_from_blacklist"], {"word": _require_word(word, "word")}, options
        )
        return envelope.as_flag(res.get("success"))

    async def get_blacklist(self, *, options: Optional[Mapping[str, Any]] = None) -> list[str]:
        res = await self.call_method(WEBPURIFY_METHODS["get_blacklist"], None, options)
        return envelope.as_list(res.get("word"))

    # Whitelist ---------------------------------------------------------

    async def add_to_whitelist(self, word: str, *, options: Optional[Mapping[str, Any]] = None) -> bool:
        res = await self.call_method(
            WEBPURIFY_METHODS["add_to_whitelist"], {"word": _require_word(word, "word")}, options
        )
        return envelope.as_flag(res.get("success"))

    async def remove_from_whitelist(self, word: str, *, options: Optional[Mapping[str, Any]] = None) -> bool:
        res = await self.call_method(
            WEBPURIFY_METHODS["remove_from_whitelist"], {"word": _require_word(word, "word")}, options
        )
        return envelope.as_flag(res.get("success"))

    async def get_whitelist(self, *, options: Optional[Mapping[str, Any]] = None) -> list[str]:
        res = await self.call_method(WEBPURIFY_METHODS["get_whitelist"], None, options)
        return envelope.as_list(res.get("word"))
