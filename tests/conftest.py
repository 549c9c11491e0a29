"""
Pytest configuration and shared fixtures.
"""

import json
import threading
from typing import Callable, Dict, List

import pytest

from feishu_openapi.feishu_client import FeishuClient

BASE_URL = "https://open.feishu.cn"
TENANT_TOKEN_URL = BASE_URL + "/open-apis/auth/v3/tenant_access_token/internal"
APP_TOKEN_URL = BASE_URL + "/open-apis/auth/v3/app_access_token/internal"


class FakeClock:
    """Manually advanced time source (epoch seconds)."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingTransport:
    """Stands in for HTTPTransport: records every request, replies per URL.

    A handler receives the recorded call dict and returns the body bytes or
    raises. URLs without a handler answer ``{"code":0,"msg":"ok"}``.
    """

    def __init__(self):
        self.calls: List[Dict] = []
        self.handlers: Dict[str, Callable[[Dict], bytes]] = {}
        self.closed = False
        self._lock = threading.Lock()

    def route(self, url: str, handler: Callable[[Dict], bytes]):
        self.handlers[url] = handler

    def reply(self, url: str, body):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        self.route(url, lambda call: body)

    def calls_to(self, url: str) -> List[Dict]:
        return [c for c in self.calls if c["url"] == url]

    def request(self, method, url, headers=None, params=None, data=None,
                files=None, timeout=None) -> bytes:
        call = {
            "method": method,
            "url": url,
            "headers": dict(headers or {}),
            "params": params,
            "data": data,
            "timeout": timeout,
        }
        if files:
            # File handles are closed once the request returns
            call["files"] = {k: (name, fh.read()) for k, (name, fh) in files.items()}
        with self._lock:
            self.calls.append(call)
        handler = self.handlers.get(url)
        if handler is None:
            return b'{"code":0,"msg":"ok"}'
        return handler(call)

    def get(self, url, headers=None, params=None):
        return self.request("GET", url, headers=headers, params=params)

    def post(self, url, data=None, headers=None, **kwargs):
        return self.request("POST", url, headers=headers, data=data, **kwargs)

    def close(self):
        self.closed = True


def token_body(token: str, expire: int = 7200, field: str = "tenant_access_token") -> bytes:
    return json.dumps({"code": 0, "msg": "ok", field: token, "expire": expire}).encode("utf-8")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def transport() -> RecordingTransport:
    t = RecordingTransport()
    t.reply(TENANT_TOKEN_URL, token_body("t-tenant"))
    t.reply(APP_TOKEN_URL, token_body("a-app", field="app_access_token"))
    return t


@pytest.fixture
def client(transport, clock) -> FeishuClient:
    """A FeishuClient wired to the recording transport and fake clock."""
    return FeishuClient("cli_test", "secret", base_url=BASE_URL,
                        transport=transport, safety_margin=30, clock=clock)
