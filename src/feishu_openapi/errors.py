"""
Errors Module

Exception hierarchy raised by the Feishu client:
- TransportError: network/connection failure
- AuthError: access token exchange failed
- RemoteAPIError: endpoint answered with a failure
"""

import json
from typing import Any, Dict, Optional, Union


class FeishuError(Exception):
    """Base class for all errors raised by feishu_openapi."""


class TransportError(FeishuError):
    """The HTTP request could not be completed (DNS, connect, timeout...)."""

    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.url = url


class AuthError(FeishuError):
    """Credential exchange with the identity endpoint failed."""

    def __init__(self, message: str, code: int = None, msg: str = None):
        super().__init__(message)
        self.code = code
        self.msg = msg


class RemoteAPIError(FeishuError):
    """The endpoint returned a non-success HTTP status or application code.

    Attributes:
        status_code: HTTP status, if the failure was at the HTTP level
        code: Feishu application code from the JSON body, if any
        msg: Feishu message from the JSON body, if any
        body: Raw response body
    """

    def __init__(self, message: str, status_code: int = None, code: int = None,
                 msg: str = None, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.msg = msg
        self.body = body


def parse_response(body: Union[bytes, str]) -> Dict[str, Any]:
    """Decode a raw JSON response and raise RemoteAPIError if ``code`` != 0.

    Endpoint methods return bytes untouched; callers that want the usual
    ``{"code": 0, "msg": "ok", "data": {...}}`` envelope checked can pass
    the bytes through here.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise RemoteAPIError(f"响应不是合法 JSON: {e}", body=body) from e

    if not isinstance(data, dict):
        raise RemoteAPIError("响应 JSON 不是对象", body=body)

    code: Optional[int] = data.get("code")
    if code is None:
        # Legacy v4 endpoints reply with errcode/errmsg
        code = data.get("errcode", 0)
    if code != 0:
        msg = data.get("msg") or data.get("errmsg") or ""
        raise RemoteAPIError(f"API 返回错误: {code} {msg}", code=code, msg=msg, body=body)
    return data
