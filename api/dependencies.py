"""
API依赖项 - 组装 Moderation 应用服务
"""
from fastapi import Depends

from application.ports.moderation import ModerationGateway
from application.services.moderation_service import ModerationService
from infrastructure.external.webpurify import (
    get_moderation_client_instance,
    init_moderation_client,
)


async def get_moderation_gateway() -> ModerationGateway:
    """获取共享的 WebPurify 客户端（未初始化时按配置懒加载）"""
    client = get_moderation_client_instance()
    if client is None:
        await init_moderation_client()
        client = get_moderation_client_instance()
    return client


async def get_moderation_service(
    gateway: ModerationGateway = Depends(get_moderation_gateway),
) -> ModerationService:
    return ModerationService(gateway=gateway)
