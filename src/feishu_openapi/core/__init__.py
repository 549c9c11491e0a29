"""
Core Module Package

Core functionality used by every endpoint call:
- auth: Access token fetching and single-flight caching
- transport: HTTP transport (requests.Session)

Usage:
    from feishu_openapi.core import TokenProvider, HTTPTransport
"""

from feishu_openapi.core.auth import AccessToken, TokenProvider, fetch_access_token
from feishu_openapi.core.transport import HTTPTransport

__all__ = [
    'AccessToken', 'TokenProvider', 'fetch_access_token',
    'HTTPTransport',
]
