"""
API客户端模块

提供与外部REST API集成的通用异步客户端
"""
from .base import BaseAPIClient, APIResponse, APIError, HTTPMethod

__all__ = [
    "BaseAPIClient",
    "APIResponse",
    "APIError",
    "HTTPMethod",
]
