"""
Access Token Module

Fetches tenant/app access tokens for self-built apps and caches them until
shortly before they expire. Refreshes are single-flight: concurrent callers
that find the cache stale share one identity-endpoint call.
"""

import json
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Optional

from feishu_openapi import config
from feishu_openapi.constants import JSON_CONTENT_TYPE
from feishu_openapi.core.transport import HTTPTransport
from feishu_openapi.errors import AuthError, FeishuError
from feishu_openapi.logger import logger, mask


@dataclass(frozen=True)
class AccessToken:
    """An issued access token and the epoch second it expires at."""
    value: str
    expires_at: float

    def is_valid(self, now: float, safety_margin: float) -> bool:
        return now < self.expires_at - safety_margin


class TokenProvider:
    """Caches one kind of access token and refreshes it on demand.

    Only ``_refresh`` mutates the cache, and at most one refresh is in flight
    at a time. Reads of a fresh token never take the lock.
    """

    def __init__(self, fetch: Callable[[], AccessToken], safety_margin: float = None,
                 clock: Callable[[], float] = time.time, name: str = "access_token"):
        """
        Args:
            fetch: Performs the credential exchange; returns an AccessToken
                   or raises AuthError
            safety_margin: Seconds before expiry at which a token is stale
            clock: Time source, epoch seconds
            name: Token kind, for log messages
        """
        self._fetch = fetch
        self.safety_margin = config.TOKEN_SAFETY_MARGIN if safety_margin is None else safety_margin
        if self.safety_margin < 0:
            raise ValueError(f"safety_margin 不能为负数: {self.safety_margin}")
        self._clock = clock
        self.name = name
        self._token: Optional[AccessToken] = None
        self._inflight: Optional[Future] = None
        self._mutex = threading.Lock()

    @property
    def cached(self) -> Optional[AccessToken]:
        return self._token

    def _fresh(self) -> Optional[AccessToken]:
        token = self._token
        if token is not None and token.is_valid(self._clock(), self.safety_margin):
            return token
        return None

    def get(self) -> str:
        """Return a usable token string, refreshing it if needed.

        Raises:
            AuthError: the refresh this call waited on failed
        """
        token = self._fresh()
        if token is not None:
            return token.value
        return self._refresh().value

    def _refresh(self) -> AccessToken:
        with self._mutex:
            # Another thread may have finished a refresh while we waited
            token = self._fresh()
            if token is not None:
                return token
            future = self._inflight
            leader = future is None
            if leader:
                future = Future()
                self._inflight = future

        if not leader:
            logger.debug(f"等待进行中的 {self.name} 刷新")
            return future.result()

        logger.debug(f"刷新 {self.name}")
        try:
            token = self._fetch()
        except BaseException as e:
            with self._mutex:
                self._inflight = None
            future.set_exception(e)
            raise

        with self._mutex:
            self._token = token
            self._inflight = None
        future.set_result(token)
        logger.debug(f"{self.name} 已刷新: {mask(token.value)}")
        lifetime = token.expires_at - self._clock()
        if lifetime <= self.safety_margin:
            logger.warning(
                f"{self.name} 有效期 {lifetime:.0f}s 不大于 safety_margin {self.safety_margin:.0f}s，"
                f"每次调用都会重新获取"
            )
        return token

    def invalidate(self):
        """Drop the cached token so the next ``get`` refreshes it."""
        with self._mutex:
            self._token = None


def fetch_access_token(transport: HTTPTransport, url: str, token_field: str,
                       app_id: str, app_secret: str,
                       clock: Callable[[], float] = time.time) -> AccessToken:
    """Exchange app credentials for an access token.

    Args:
        transport: HTTP transport
        url: Identity endpoint (tenant or app token)
        token_field: Key of the token in the response body
        app_id: Feishu app ID
        app_secret: Feishu app secret
        clock: Time source used to compute the expiry

    Raises:
        AuthError: on any failure of the exchange
    """
    if not app_id or not app_secret:
        raise AuthError("缺少 app_id 或 app_secret")

    payload = json.dumps({"app_id": app_id, "app_secret": app_secret}).encode("utf-8")
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    try:
        body = transport.post(url, data=payload, headers=headers)
    except FeishuError as e:
        logger.warning(f"获取 {token_field} 失败: {e}")
        raise AuthError(f"获取 {token_field} 失败: {e}") from e

    try:
        data = json.loads(body)
    except ValueError as e:
        raise AuthError(f"{token_field} 响应不是合法 JSON") from e
    if not isinstance(data, dict):
        raise AuthError(f"{token_field} 响应格式错误")

    # Only a present, non-zero code is a failure
    code = data.get("code", 0)
    if code != 0:
        msg = data.get("msg", "")
        logger.warning(f"获取 {token_field} 失败: {code} {msg}")
        raise AuthError(f"获取 {token_field} 失败: {code} {msg}", code=code, msg=msg)

    value = data.get(token_field, data.get("token"))
    expire = data.get("expire", data.get("expires_in"))
    if not value or not isinstance(value, str):
        raise AuthError(f"响应中缺少 {token_field}")
    if isinstance(expire, bool) or not isinstance(expire, (int, float)) or expire <= 0:
        raise AuthError(f"{token_field} 有效期无效: {expire!r}")

    return AccessToken(value=value, expires_at=clock() + expire)
