"""
Exceptions for the WebPurify client mapped to unified BusinessException variants.
"""
from __future__ import annotations

from typing import Optional

from domain.common.exceptions import BusinessException
from shared.codes.moderation_codes import ModerationCode


class WebPurifyError(BusinessException):
    """Base class for every error raised by the WebPurify client."""

    code_value: ModerationCode = ModerationCode.API_ERROR
    type_name: str = "WebPurifyError"

    def __init__(self, message: str, *, details: Optional[dict] = None, field: Optional[str] = None):
        super().__init__(
            code=self.code_value,
            message=message,
            error_type=self.type_name,
            details=details,
            field=field,
        )


class ConfigError(WebPurifyError):
    code_value = ModerationCode.CONFIG_ERROR
    type_name = "ConfigError"


class InvalidArgumentError(WebPurifyError):
    code_value = ModerationCode.INVALID_ARGUMENT
    type_name = "InvalidArgument"


class TransportError(WebPurifyError):
    code_value = ModerationCode.TRANSPORT_ERROR
    type_name = "TransportError"

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        details = {"status_code": status_code} if status_code is not None else None
        super().__init__(message, details=details)
        self.status_code = status_code


class ParseError(WebPurifyError):
    code_value = ModerationCode.PARSE_ERROR
    type_name = "ParseError"


class ApiError(WebPurifyError):
    """The service answered with ``stat="fail"``."""

    code_value = ModerationCode.API_ERROR
    type_name = "ApiError"

    def __init__(self, message: Optional[str], *, provider_code: Optional[str] = None):
        super().__init__(message or "", details={"provider_code": provider_code})
        self.provider_code = provider_code

    def __str__(self) -> str:
        if self.message:
            return f"Error: {self.message}"
        return "There was an error."
