"""
feishu_openapi - Feishu/Lark open platform API client.

Usage:
    from feishu_openapi import FeishuClient

    client = FeishuClient.from_config()
    client.get_tenant_access_token()
"""

from feishu_openapi.errors import (
    AuthError,
    FeishuError,
    RemoteAPIError,
    TransportError,
    parse_response,
)
from feishu_openapi.core import AccessToken, HTTPTransport, TokenProvider
from feishu_openapi.feishu_client import FeishuClient

__version__ = "0.1.0"

__all__ = [
    'FeishuClient',
    'AccessToken', 'TokenProvider', 'HTTPTransport',
    'FeishuError', 'TransportError', 'AuthError', 'RemoteAPIError',
    'parse_response',
]
