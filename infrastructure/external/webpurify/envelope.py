"""
WebPurify response envelope handling.

Every response is wrapped as ``{"rsp": {"@attributes": {"stat": ...}, ...}}``.
The service renders its XML model to JSON, so a repeated element collapses to
a bare string when exactly one value is present.
"""
from __future__ import annotations

from typing import Any

from .exceptions import ApiError, ParseError


ENVELOPE_META_KEYS = ("@attributes", "api_key", "method", "format")


def strip(rsp: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``rsp`` without envelope metadata."""
    return {k: v for k, v in rsp.items() if k not in ENVELOPE_META_KEYS}


def unwrap(envelope: Any) -> dict[str, Any]:
    """Validate the envelope and return the stripped payload.

    Raises:
        ApiError: ``stat`` is ``"fail"``.
        ParseError: the document is not a recognizable envelope.
    """
    rsp = envelope.get("rsp") if isinstance(envelope, dict) else None
    if not isinstance(rsp, dict):
        raise ParseError("Response is missing the 'rsp' envelope")

    attributes = rsp.get("@attributes")
    status = attributes.get("stat") if isinstance(attributes, dict) else None

    if status == "fail":
        err = rsp.get("err")
        err_attrs = err.get("@attributes") if isinstance(err, dict) else None
        if not isinstance(err_attrs, dict):
            err_attrs = {}
        raise ApiError(err_attrs.get("msg"), provider_code=err_attrs.get("code"))
    if status == "ok":
        return strip(rsp)
    raise ParseError(f"Unexpected response status: {status!r}")


def as_list(value: Any) -> list:
    """Normalize a possibly-collapsed repeated element into a list."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return value
    return [value]


def as_flag(value: Any) -> bool:
    return value == "1"


def as_count(value: Any) -> int:
    if value in (None, ""):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Expected an integer count, got {value!r}") from exc
