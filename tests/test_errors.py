"""Tests for parse_response envelope checking."""
import pytest

from feishu_openapi.errors import FeishuError, RemoteAPIError, parse_response


class TestParseResponse:

    def test_success(self):
        data = parse_response(b'{"code":0,"msg":"ok","data":{"message_id":"om_1"}}')
        assert data["data"]["message_id"] == "om_1"

    def test_error_code(self):
        body = b'{"code":230002,"msg":"bot not in chat"}'
        with pytest.raises(RemoteAPIError) as exc_info:
            parse_response(body)
        err = exc_info.value
        assert err.code == 230002
        assert err.msg == "bot not in chat"
        assert err.body == body
        assert err.status_code is None

    def test_legacy_errcode(self):
        with pytest.raises(RemoteAPIError) as exc_info:
            parse_response('{"errcode":40001,"errmsg":"invalid credential"}')
        assert exc_info.value.code == 40001
        assert exc_info.value.msg == "invalid credential"

    def test_legacy_errcode_ok(self):
        assert parse_response(b'{"errcode":0,"errmsg":"ok"}')["errmsg"] == "ok"

    @pytest.mark.parametrize("body", [b"\x89PNG", b"[1, 2]", b""])
    def test_not_json_object(self, body):
        with pytest.raises(RemoteAPIError):
            parse_response(body)

    def test_hierarchy(self):
        assert issubclass(RemoteAPIError, FeishuError)
