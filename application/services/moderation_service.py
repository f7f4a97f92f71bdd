"""
Application service orchestrating moderation use-cases.

This class depends only on the ModerationGateway port and DTOs. The gateway
is injected from the composition root (API), keeping dependencies one-way.
Text content is never logged, only its length.
"""
from __future__ import annotations

from application.dtos.moderation import (
    CheckResult,
    CountResult,
    ExpletivesResult,
    ReplaceRequest,
    ReplaceResult,
    TextRequest,
    WordChangeResult,
    WordListResult,
    WordRequest,
)
from application.ports.moderation import ModerationGateway
from core.logging_config import get_logger


logger = get_logger(__name__)


class ModerationService:
    def __init__(self, gateway: ModerationGateway) -> None:
        self.gateway = gateway

    async def check(self, req: TextRequest) -> CheckResult:
        found = await self.gateway.check(req.text, options=req.options)
        logger.info("moderation_check", provider=self.gateway.provider, text_length=len(req.text), found=found)
        return CheckResult(found=found)

    async def check_count(self, req: TextRequest) -> CountResult:
        count = await self.gateway.check_count(req.text, options=req.options)
        logger.info("moderation_check_count", provider=self.gateway.provider, text_length=len(req.text), count=count)
        return CountResult(count=count)

    async def replace(self, req: ReplaceRequest) -> ReplaceResult:
        text = await self.gateway.replace(req.text, req.replace_symbol, options=req.options)
        logger.info("moderation_replace", provider=self.gateway.provider, text_length=len(req.text))
        return ReplaceResult(text=text)

    async def return_expletives(self, req: TextRequest) -> ExpletivesResult:
        words = await self.gateway.return_expletives(req.text, options=req.options)
        logger.info("moderation_return", provider=self.gateway.provider, matches=len(words))
        return ExpletivesResult(expletives=words)

    async def add_to_blacklist(self, req: WordRequest) -> WordChangeResult:
        ok = await self.gateway.add_to_blacklist(req.word, req.deep_search, options=req.options)
        logger.info("blacklist_add", provider=self.gateway.provider, success=ok, deep_search=req.deep_search)
        return WordChangeResult(word=req.word, success=ok)

    async def remove_from_blacklist(self, req: WordRequest) -> WordChangeResult:
        ok = await self.gateway.remove_from_blacklist(req.word, options=req.options)
        logger.info("blacklist_remove", provider=self.gateway.provider, success=ok)
        return WordChangeResult(word=req.word, success=ok)

    async def get_blacklist(self) -> WordListResult:
        return WordListResult(words=await self.gateway.get_blacklist())

    async def add_to_whitelist(self, req: WordRequest) -> WordChangeResult:
        ok = await self.gateway.add_to_whitelist(req.word, options=req.options)
        logger.info("whitelist_add", provider=self.gateway.provider, success=ok)
        return WordChangeResult(word=req.word, success=ok)

    async def remove_from_whitelist(self, req: WordRequest) -> WordChangeResult:
        ok = await self.gateway.remove_from_whitelist(req.word, options=req.options)
        logger.info("whitelist_remove", provider=self.gateway.provider, success=ok)
        return WordChangeResult(word=req.word, success=ok)

    async def get_whitelist(self) -> WordListResult:
        return WordListResult(words=await self.gateway.get_whitelist())
