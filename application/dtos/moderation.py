"""
Moderation DTOs (Pydantic v2) used at application boundaries.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class OptionsRequest(BaseModel):
    # Extra WebPurify parameters forwarded verbatim (e.g. lang, semail)
    options: Optional[dict[str, Any]] = None


class TextRequest(OptionsRequest):
    text: str


class ReplaceRequest(TextRequest):
    replace_symbol: str = Field(default="*", min_length=1)


class WordRequest(OptionsRequest):
    word: str = Field(min_length=1)
    deep_search: Optional[bool] = None


class CheckResult(BaseModel):
    found: bool


class CountResult(BaseModel):
    count: int


class ReplaceResult(BaseModel):
    text: Optional[str] = None


class ExpletivesResult(BaseModel):
    expletives: list[str]


class WordListResult(BaseModel):
    words: list[str]


class WordChangeResult(BaseModel):
    word: str
    success: bool
