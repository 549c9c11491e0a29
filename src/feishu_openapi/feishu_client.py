from feishu_openapi.feishu.base import FeishuClientBase
from feishu_openapi.feishu.calendar import CalendarOperationsMixin
from feishu_openapi.feishu.contact import ContactOperationsMixin
from feishu_openapi.feishu.documents import DocumentOperationsMixin
from feishu_openapi.feishu.message import MessageOperationsMixin
from feishu_openapi.feishu.user_group import UserGroupOperationsMixin


class FeishuClient(
    MessageOperationsMixin,
    CalendarOperationsMixin,
    DocumentOperationsMixin,
    ContactOperationsMixin,
    UserGroupOperationsMixin,
    FeishuClientBase,
):
    """
    Client for the Feishu/Lark open API.

    Every endpoint method returns the raw response body; use
    feishu_openapi.errors.parse_response to check the ``code`` envelope.

    Usage:
        with FeishuClient(app_id, app_secret) as client:
            body = client.send_message({"chat_id": "oc_xxx", "msg_type": "text",
                                        "content": {"text": "hello"}})
    """
