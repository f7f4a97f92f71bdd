"""
Moderation API routes.

Thin HTTP facade over the moderation application service; no provider
details here.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_moderation_service
from application.dtos.moderation import (
    CheckResult,
    CountResult,
    ExpletivesResult,
    OptionsRequest,
    ReplaceRequest,
    ReplaceResult,
    TextRequest,
    WordChangeResult,
    WordListResult,
    WordRequest,
)
from application.services.moderation_service import ModerationService
from core.response import Response as ApiResponse, success_response


router = APIRouter(prefix="/moderation", tags=["Moderation"])


@router.post("/check", summary="检测文本是否包含脏词", response_model=ApiResponse[CheckResult])
async def check_text(payload: TextRequest, service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.check(payload))


@router.post("/check-count", summary="统计脏词数量", response_model=ApiResponse[CountResult])
async def check_count(payload: TextRequest, service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.check_count(payload))


@router.post("/replace", summary="屏蔽脏词", response_model=ApiResponse[ReplaceResult])
async def replace_text(payload: ReplaceRequest, service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.replace(payload))


@router.post("/expletives", summary="返回命中的脏词", response_model=ApiResponse[ExpletivesResult])
async def return_expletives(payload: TextRequest, service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.return_expletives(payload))


@router.get("/blacklist", summary="获取黑名单", response_model=ApiResponse[WordListResult])
async def get_blacklist(service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.get_blacklist())


@router.post("/blacklist", summary="添加黑名单词", response_model=ApiResponse[WordChangeResult])
async def add_to_blacklist(payload: WordRequest, service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.add_to_blacklist(payload))


@router.delete("/blacklist/{word}", summary="移除黑名单词", response_model=ApiResponse[WordChangeResult])
async def remove_from_blacklist(
    word: str,
    payload: Optional[OptionsRequest] = Body(default=None),
    service: ModerationService = Depends(get_moderation_service),
):
    req = WordRequest(word=word, options=payload.options if payload else None)
    return success_response(data=await service.remove_from_blacklist(req))


@router.get("/whitelist", summary="获取白名单", response_model=ApiResponse[WordListResult])
async def get_whitelist(service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.get_whitelist())


@router.post("/whitelist", summary="添加白名单词", response_model=ApiResponse[WordChangeResult])
async def add_to_whitelist(payload: WordRequest, service: ModerationService = Depends(get_moderation_service)):
    return success_response(data=await service.add_to_whitelist(payload))


@router.delete("/whitelist/{word}", summary="移除白名单词", response_model=ApiResponse[WordChangeResult])
async def remove_from_whitelist(
    word: str,
    payload: Optional[OptionsRequest] = Body(default=None),
    service: ModerationService = Depends(get_moderation_service),
):
    req = WordRequest(word=word, options=payload.options if payload else None)
    return success_response(data=await service.remove_from_whitelist(req))
