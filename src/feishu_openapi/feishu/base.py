"""
Base Feishu Client Module

Contains core client functionality shared by all endpoint mixins:
- App credentials and base URL
- Tenant/app access token providers
- Request building (URL, bearer header, JSON or multipart body)
"""

import json
import os
import time
import urllib.parse
from functools import partial
from typing import Any, Callable, Dict, Optional

from feishu_openapi import config
from feishu_openapi.constants import AuthAPI, JSON_CONTENT_TYPE
from feishu_openapi.core.auth import TokenProvider, fetch_access_token
from feishu_openapi.core.transport import HTTPTransport
from feishu_openapi.logger import logger, mask


def encode_payload(payload: Any) -> Optional[bytes]:
    """Serialize a JSON payload. bytes/str are assumed already encoded."""
    if payload is None:
        return None
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


class FeishuClientBase:
    """Application context: credentials, HTTP transport and token cache.

    One instance is shared by all endpoint calls of an app; it owns its own
    token state, nothing is cached at module level.
    """

    def __init__(self, app_id: str, app_secret: str, base_url: str = None,
                 transport: HTTPTransport = None, safety_margin: float = None,
                 clock: Callable[[], float] = time.time):
        """Initialize the Feishu client.

        Args:
            app_id: Feishu app ID
            app_secret: Feishu app secret
            base_url: API host, defaults to config.FEISHU_BASE_URL
            transport: HTTP transport, a new one is created if omitted
            safety_margin: Seconds before expiry at which tokens are refreshed
            clock: Time source for token expiry
        """
        self.app_id = app_id
        self.app_secret = app_secret
        self.base_url = (base_url or config.FEISHU_BASE_URL).rstrip("/")
        self.transport = transport or HTTPTransport()

        self.tenant_token = TokenProvider(
            partial(self._fetch_token, AuthAPI.TENANT_ACCESS_TOKEN, "tenant_access_token", clock),
            safety_margin=safety_margin,
            clock=clock,
            name="tenant_access_token",
        )
        self.app_token = TokenProvider(
            partial(self._fetch_token, AuthAPI.APP_ACCESS_TOKEN, "app_access_token", clock),
            safety_margin=safety_margin,
            clock=clock,
            name="app_access_token",
        )
        logger.debug(f"[认证] 已初始化 App ID: {mask(app_id, 5)}")

    @classmethod
    def from_config(cls, **kwargs):
        """Build a client from feishu_openapi.config settings."""
        return cls(config.FEISHU_APP_ID, config.FEISHU_APP_SECRET, **kwargs)

    def _fetch_token(self, path: str, token_field: str, clock: Callable[[], float]):
        return fetch_access_token(
            self.transport, self.base_url + path, token_field,
            self.app_id, self.app_secret, clock=clock,
        )

    def get_tenant_access_token(self) -> str:
        """Current tenant_access_token, refreshed if stale."""
        return self.tenant_token.get()

    def get_app_access_token(self) -> str:
        """Current app_access_token, refreshed if stale."""
        return self.app_token.get()

    # ==========================================
    # Request helpers
    # ==========================================

    def _url(self, path: str, **path_params: str) -> str:
        for key, value in path_params.items():
            if value is None or value == "":
                raise ValueError(f"{key} 不能为空")
        quoted = {k: urllib.parse.quote(str(v), safe="") for k, v in path_params.items()}
        return self.base_url + path.format(**quoted)

    def _headers(self, access_token: str = None, content_type: str = JSON_CONTENT_TYPE) -> Dict[str, str]:
        token = access_token or self.get_tenant_access_token()
        headers = {"Authorization": f"Bearer {token}"}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    def _request(self, method: str, path: str, params: Dict[str, Any] = None,
                 payload: Any = None, access_token: str = None, **path_params) -> bytes:
        """Issue an authorized JSON request and return the raw body.

        Args:
            method: HTTP method
            path: Endpoint path, may contain ``{name}`` placeholders
            params: Query parameters
            payload: JSON body (dict/list) or pre-encoded bytes/str
            access_token: Use this token instead of the tenant token
            **path_params: Values for the path placeholders
        """
        url = self._url(path, **path_params)
        headers = self._headers(access_token)
        return self.transport.request(
            method, url, headers=headers, params=params, data=encode_payload(payload),
        )

    def _upload(self, path: str, field: str, file_path: str,
                fields: Dict[str, str] = None, access_token: str = None) -> bytes:
        """POST a multipart/form-data body with one file part."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(file_path)

        url = self._url(path)
        # requests sets the multipart boundary Content-Type itself
        headers = self._headers(access_token, content_type=None)
        file_name = os.path.basename(file_path)
        with open(file_path, "rb") as f:
            return self.transport.request(
                "POST", url, headers=headers, data=fields or {},
                files={field: (file_name, f)}, timeout=config.UPLOAD_TIMEOUT,
            )

    def close(self):
        """Release the underlying HTTP session."""
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
