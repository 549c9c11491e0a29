"""
HTTP Transport Module

Thin wrapper around a requests.Session. Issues one request, returns the
raw response bytes, maps failures to feishu_openapi errors. No retries.
"""

from typing import Any, Dict, Optional

import requests

from feishu_openapi.errors import RemoteAPIError, TransportError
from feishu_openapi.logger import logger
from feishu_openapi import config


class HTTPTransport:
    """Blocking HTTP transport shared by every endpoint call of a client."""

    def __init__(self, timeout: float = None, session: requests.Session = None):
        """
        Args:
            timeout: Default per-request timeout in seconds
            session: Optional pre-configured session (proxies, adapters...)
        """
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
        self.session = session or requests.Session()

    def request(self, method: str, url: str, headers: Dict[str, str] = None,
                params: Dict[str, Any] = None, data: Any = None,
                files: Dict[str, Any] = None, timeout: Optional[float] = None) -> bytes:
        """Send a request and return the body bytes.

        Raises:
            TransportError: connection failure or timeout
            RemoteAPIError: non-2xx HTTP status (body attached)
        """
        logger.debug(f"{method} {url}")
        try:
            resp = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                data=data,
                files=files,
                timeout=timeout or self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"请求超时: {method} {url}")
            raise TransportError(f"请求超时: {method} {url}", url=url) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"网络错误: {method} {url} - {e}")
            raise TransportError(f"网络错误: {e}", url=url) from e

        if not 200 <= resp.status_code < 300:
            logger.warning(f"HTTP {resp.status_code}: {method} {url}")
            raise RemoteAPIError(
                f"HTTP {resp.status_code}: {method} {url}",
                status_code=resp.status_code,
                body=resp.content,
            )
        return resp.content

    def get(self, url: str, headers: Dict[str, str] = None, params: Dict[str, Any] = None) -> bytes:
        return self.request("GET", url, headers=headers, params=params)

    def post(self, url: str, data: Any = None, headers: Dict[str, str] = None, **kwargs) -> bytes:
        return self.request("POST", url, headers=headers, data=data, **kwargs)

    def close(self):
        self.session.close()
