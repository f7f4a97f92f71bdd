"""
REST API客户端基类

提供通用的HTTP请求功能，包括：
- 错误处理（传输层异常统一包装为 APIError）
- 请求/响应日志（自动屏蔽敏感参数）
- 超时控制

不做自动重试：失败直接交给调用方处理。
"""
import json
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass
from enum import Enum
from datetime import datetime

import httpx

from core.logging_config import get_logger

logger = get_logger(__name__)


class HTTPMethod(Enum):
    """HTTP方法枚举"""
    GET = "GET"


@dataclass
class APIResponse:
    """API响应封装"""
    status_code: int
    raw_content: bytes
    elapsed_ms: float

    @property
    def is_error(self) -> bool:
        """判断请求是否失败"""
        return self.status_code >= 400

    def json(self) -> Any:
        """获取JSON响应（解析失败抛出 ValueError）"""
        return json.loads(self.raw_content)


class APIError(Exception):
    """传输层错误：连接失败、超时、DNS 等"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class BaseAPIClient:
    """
    REST API客户端基类

    子类负责组装具体的查询参数并解释响应体。
    """

    # 日志中需要屏蔽的查询参数
    SENSITIVE_PARAMS = {"api_key"}

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化API客户端

        Args:
            base_url: API基础URL（含协议与主机）
            timeout: 请求超时时间（秒）
            transport: 自定义 httpx transport（测试时注入 MockTransport）
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

        self.default_headers = {
            "Accept": "application/json",
            "User-Agent": "webpurify-python/1.0",
        }

        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """获取或创建HTTP客户端"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """关闭HTTP客户端"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()

    def _build_url(self, endpoint: str) -> str:
        """构建完整URL（保留末尾斜杠，REST 路径需要）"""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _masked(self, params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if not params:
            return params
        return {k: ("***" if k in self.SENSITIVE_PARAMS else v) for k, v in params.items()}

    async def _request(
        self,
        method: Union[str, HTTPMethod],
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> APIResponse:
        """
        发送HTTP请求

        Args:
            method: HTTP方法
            endpoint: API端点
            params: 查询参数（由 httpx 进行百分号编码）

        Returns:
            APIResponse: API响应（不论状态码，交由子类解释）

        Raises:
            APIError: 传输层错误
        """
        if isinstance(method, HTTPMethod):
            method = method.value

        url = self._build_url(endpoint)

        logger.debug("api_request", method=method, url=url, params=self._masked(params))

        start_time = datetime.now()
        try:
            response = await self.client.request(
                method=method,
                url=url,
                params=params,
                headers=self.default_headers,
            )
        except httpx.TimeoutException as exc:
            raise APIError(f"Request timeout after {self.timeout}s: {exc}") from exc
        except httpx.HTTPError as exc:
            raise APIError(f"Network error: {exc}") from exc

        elapsed = (datetime.now() - start_time).total_seconds() * 1000

        api_response = APIResponse(
            status_code=response.status_code,
            raw_content=response.content,
            elapsed_ms=elapsed,
        )
        logger.debug(
            "api_response",
            status_code=api_response.status_code,
            elapsed_ms=round(api_response.elapsed_ms, 2),
        )
        return api_response

    async def get(self, endpoint: str, **kwargs) -> APIResponse:
        """GET请求"""
        return await self._request(HTTPMethod.GET, endpoint, **kwargs)
