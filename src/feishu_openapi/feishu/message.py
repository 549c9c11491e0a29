"""
Feishu Message Operations Module

Contains methods for bot messaging (v4 API):
- batch_send, send_message, read_info
- put_image, get_image, get_file
- app_notify

All methods use the tenant access token and return the raw response body.
"""

from typing import Any

from feishu_openapi.constants import MessageAPI


class MessageOperationsMixin:
    """Mixin class providing message operation methods for FeishuClient."""

    def batch_send(self, payload: Any) -> bytes:
        """批量发送消息: send one message to many users or departments.

        Requires the bot capability and batch-send permission.
        """
        return self._request("POST", MessageAPI.BATCH_SEND, payload=payload)

    def send_message(self, payload: Any) -> bytes:
        """发送消息: send text/image/post/share_chat/interactive to a user or chat."""
        return self._request("POST", MessageAPI.SEND, payload=payload)

    def read_info(self, payload: Any) -> bytes:
        """查询消息已读状态 (only the bot's own messages of the last 7 days)."""
        return self._request("POST", MessageAPI.READ_INFO, payload=payload)

    def put_image(self, image_path: str, image_type: str = "message") -> bytes:
        """上传图片 and obtain its image_key.

        Args:
            image_path: Local path to the image file
            image_type: ``message`` or ``avatar``
        """
        return self._upload(MessageAPI.IMAGE_PUT, "image", image_path,
                            fields={"image_type": image_type})

    def get_image(self, image_key: str) -> bytes:
        """获取图片: returns the image bytes for an image_key."""
        return self._request("GET", MessageAPI.IMAGE_GET, params={"image_key": image_key})

    def get_file(self, file_key: str) -> bytes:
        """获取文件 sent to the bot in a p2p chat."""
        return self._request("GET", MessageAPI.FILE_GET, params={"file_key": file_key})

    def app_notify(self, payload: Any) -> bytes:
        """应用发送通知给用户."""
        return self._request("POST", MessageAPI.APP_NOTIFY, payload=payload)
